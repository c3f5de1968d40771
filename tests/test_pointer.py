"""
Tests for pointer inversion and tooltip derivation.
"""

import math

import pandas as pd
import pytest

from weatherwheel import config
from weatherwheel.core.context import initialize
from weatherwheel.core.dataset import Dataset
from weatherwheel.core.geometry import to_cartesian
from weatherwheel.core.pointer import (
    angle_from_pointer,
    format_tooltip_text,
    listener_grid,
    resolve,
    tooltip_data,
    tooltip_indicator,
    tooltip_position,
)
from weatherwheel.models.weather import Resolution

from sample_data import make_record, year_context


class TestAngleFromPointer:
    """Test pointer position to chart angle."""

    def test_cardinal_directions(self):
        """Test up, right, down and left."""
        assert angle_from_pointer(0, -1) == pytest.approx(0)
        assert angle_from_pointer(1, 0) == pytest.approx(math.pi / 2)
        assert angle_from_pointer(0, 1) == pytest.approx(math.pi)
        assert angle_from_pointer(-1, 0) == pytest.approx(3 * math.pi / 2)

    def test_upper_left_quadrant_normalized(self):
        """Test that rotation into negative angles wraps around."""
        angle = angle_from_pointer(-1, -1)
        assert angle == pytest.approx(7 * math.pi / 4)

    def test_half_open_interval(self):
        """Test every direction lands in [0, 2π)."""
        for i in range(360):
            theta = 2 * math.pi * i / 360
            angle = angle_from_pointer(math.cos(theta), math.sin(theta))
            assert 0 <= angle < 2 * math.pi

    def test_seam_tie_break(self):
        """Test positions just left of north stay inside the interval."""
        angle = angle_from_pointer(-1e-16, -1)
        assert 0 <= angle < 2 * math.pi

    def test_origin(self):
        """Test the origin resolves to angle 0."""
        assert angle_from_pointer(0, 0) == 0

    def test_non_finite(self):
        """Test NaN folds to 0 and infinity keeps its direction."""
        assert angle_from_pointer(float("nan"), 1) == 0
        assert angle_from_pointer(1, float("nan")) == 0
        assert angle_from_pointer(1, float("inf")) == pytest.approx(math.pi)

    def test_inverts_to_cartesian(self):
        """Test angle_from_pointer undoes to_cartesian."""
        context = year_context()
        for i in range(1, 64):
            angle = 2 * math.pi * i / 64
            assert angle_from_pointer(*to_cartesian(context, angle, 0.8)) == pytest.approx(angle)


class TestResolve:
    """Test resolve."""

    def setup_method(self):
        self.context = year_context()

    def test_straight_up_is_earliest_date(self):
        """Test a pointer at north resolves to the first day."""
        resolution = resolve(self.context, 0, -self.context.dimensions.bounded_radius)

        assert resolution.angle == 0
        assert resolution.date == pd.Timestamp("2018-01-01")
        assert resolution.record.date_string == "2018-01-01"
        assert resolution.found

    def test_origin(self):
        """Test a pointer at the center does not crash."""
        resolution = resolve(self.context, 0, 0)
        assert resolution.angle == 0
        assert resolution.record.date_string == "2018-01-01"

    def test_record_positions_resolve_to_their_record(self):
        """Test pointing at a record's spoke resolves that record."""
        for record in self.context.dataset[::17]:
            angle = self.context.scales.angle(record.date)
            x, y = to_cartesian(self.context, angle, 1.27)
            assert resolve(self.context, x, y).record == record

    def test_floors_to_day(self):
        """Test any position within a day's arc resolves to that day."""
        scale = self.context.scales.angle
        angle = scale("2018-03-10 05:00")
        x, y = to_cartesian(self.context, angle)
        assert resolve(self.context, x, y).record.date_string == "2018-03-10"

        angle = scale("2018-03-10 19:00")
        x, y = to_cartesian(self.context, angle)
        assert resolve(self.context, x, y).record.date_string == "2018-03-10"

        angle = scale("2018-03-11 01:00")
        x, y = to_cartesian(self.context, angle)
        assert resolve(self.context, x, y).record.date_string == "2018-03-11"

    def test_just_before_seam(self):
        """Test the arc before the seam belongs to the second-to-last day."""
        angle = self.context.scales.angle("2018-12-30 23:00")
        x, y = to_cartesian(self.context, angle)
        assert resolve(self.context, x, y).record.date_string == "2018-12-30"

    def test_idempotent(self):
        """Test identical input gives identical output."""
        assert resolve(self.context, 37.5, -12.25) == resolve(self.context, 37.5, -12.25)

    def test_gap_returns_no_record(self):
        """Test a date missing from the dataset gives no record instead of raising."""
        dataset = Dataset(
            [
                make_record("2018-01-01"),
                make_record("2018-01-02"),
                make_record("2018-01-11"),
            ]
        )
        context = initialize(dataset)
        angle = context.scales.angle("2018-01-06 12:00")
        resolution = resolve(context, *to_cartesian(context, angle))

        assert resolution.record is None
        assert not resolution.found
        assert resolution.date.floor("D") == pd.Timestamp("2018-01-06")

    def test_non_finite_pointer(self):
        """Test a non-finite pointer degrades to no record."""
        resolution = resolve(self.context, float("nan"), 10)
        assert resolution == Resolution(angle=0.0, date=None, record=None)

    def test_single_record(self):
        """Test every direction resolves to the only record."""
        record = make_record(
            "2018-06-01", tmin=60, tmax=75, uv=9, precip=0.4, cloud=0.5, precip_type="rain"
        )
        context = initialize(Dataset([record]))
        for x, y in [(0, -10), (10, 0), (0, 10), (-10, -10), (0, 0)]:
            assert resolve(context, x, y).record == record


class TestTooltipData:
    """Test tooltip contents."""

    def setup_method(self):
        self.record = make_record(
            "2018-06-01", tmin=60, tmax=75, uv=9, precip=0.4, cloud=0.5, precip_type="rain"
        )
        self.context = initialize(Dataset([self.record]))

    def test_contents(self):
        """Test formatted values and colors."""
        data = tooltip_data(self.context, resolve(self.context, 0, -100))

        assert data.date_label == "June 1"
        assert data.temp_min == "60.0°F"
        assert data.temp_max == "75.0°F"
        assert data.temp_min_color == self.context.scales.temperature_color(60)
        assert data.temp_max_color == self.context.scales.temperature_color(75)
        assert data.temp_min_color != data.temp_max_color
        assert data.uv == 9
        assert data.cloud == 0.5
        assert data.precip_pct == "40%"
        assert data.precip_type == "rain"
        assert data.precip_color == "#54a0ff"

    def test_empty_precip_type_uses_fallback(self):
        """Test a record without precipitation type."""
        record = make_record("2018-06-01", precip_type=None)
        context = initialize(Dataset([record]))
        data = tooltip_data(context, resolve(context, 0, -100))

        assert data.precip_type == ""
        assert data.precip_color == config.PRECIPITATION_FALLBACK_COLOR

    def test_no_record_hides_tooltip(self):
        """Test that no record means no tooltip."""
        assert tooltip_data(self.context, Resolution(angle=0.0, date=None)) is None

    def test_format_tooltip_text(self):
        """Test hover label text."""
        data = tooltip_data(self.context, resolve(self.context, 0, -100))
        text = format_tooltip_text(data)

        assert "<b>June 1</b>" in text
        assert "Precipitation: 40%" in text
        assert "Type: rain" in text
        assert format_tooltip_text(None) == ""


class TestTooltipGeometry:
    """Test the pointer indicator and tooltip placement."""

    def setup_method(self):
        self.context = year_context()

    def test_indicator_wedge(self):
        """Test the wedge starts and ends at the center and reaches the outer circle."""
        xs, ys = tooltip_indicator(self.context, math.pi / 2, points=8)

        assert len(xs) == 10
        assert (xs[0], ys[0]) == (0, 0)
        assert (xs[-1], ys[-1]) == (0, 0)
        for x, y in zip(xs[1:-1], ys[1:-1]):
            assert math.hypot(x, y) == pytest.approx(180 * 1.6)

    def test_position_north(self):
        """Test placement above the wheel."""
        placement = tooltip_position(self.context, 0)

        assert placement.anchor == pytest.approx((0, -288))
        assert placement.horizontal == "center"
        assert placement.vertical == "before"

    def test_position_east(self):
        """Test placement right of the wheel."""
        placement = tooltip_position(self.context, math.pi / 2)
        assert placement.horizontal == "after"
        assert placement.vertical == "center"


class TestListenerGrid:
    """Test hover targets."""

    def test_grid_size_and_text(self):
        """Test one sample per angle step and ring, each with resolved text."""
        context = year_context()
        xs, ys, texts = listener_grid(context, angle_steps=12, offsets=(0.5, 1.0))

        assert len(xs) == len(ys) == len(texts) == 24
        assert texts[0] == texts[1]
        assert "January 1" in texts[0]
        assert math.hypot(xs[1], ys[1]) == pytest.approx(180)
