"""
Tests for radial_viz module
"""

import math

import plotly.graph_objects as go
import pytest

from weatherwheel.core.chart_config import get_temperature_colorscale
from weatherwheel.core.geometry import temperature_ticks
from weatherwheel.core.pointer import resolve
from weatherwheel.core.radial_viz import add_pointer_indicator, create_radial_weather_chart
from weatherwheel.models.weather import Resolution

from sample_data import year_context


def trace_names(fig):
    return [trace.name for trace in fig.data]


class TestCreateRadialWeatherChart:
    """Test the create_radial_weather_chart function."""

    def setup_method(self):
        self.context = year_context()
        self.fig = create_radial_weather_chart(self.context)

    def test_basic_functionality(self):
        """Test figure type and layout."""
        assert isinstance(self.fig, go.Figure)
        assert self.fig.layout.width == 600
        assert self.fig.layout.height == 600
        assert self.fig.layout.yaxis.range[0] > self.fig.layout.yaxis.range[1]

    def test_layers_present(self):
        """Test every layer of the wheel is drawn."""
        names = trace_names(self.fig)

        for name in [
            "grid-line",
            "temperature-band",
            "uv-line",
            "cloud-dot",
            "precipitation-dot",
            "annotation-line",
            "precipitation-legend",
            "listener",
        ]:
            assert name in names

    def test_circles(self):
        """Test one grid circle per temperature tick plus the freezing circle."""
        circles = [s for s in self.fig.layout.shapes if s.type == "circle"]
        assert len(circles) == len(temperature_ticks(self.context)) + 1

    def test_marker_sizes(self):
        """Test marker sizes are diameters of the scaled radii."""
        clouds = next(t for t in self.fig.data if t.name == "cloud-dot")
        assert len(clouds.x) == len(self.context.dataset)
        assert min(clouds.marker.size) >= 2
        assert max(clouds.marker.size) <= 20

    def test_band_colors_from_colorscale(self):
        """Test the band polygons take their colors from the temperature colorscale."""
        colorscale = get_temperature_colorscale(self.context.scales.temperature_color)
        band = [t for t in self.fig.data if t.name == "temperature-band"]

        assert band
        for trace in band:
            assert trace.fillcolor in [color for _, color in colorscale]

    def test_annotations(self):
        """Test month labels, temperature labels, call-outs and legend text."""
        texts = [a.text for a in self.fig.layout.annotations]

        assert "Jan" in texts
        assert "Dec" in texts
        assert "20°F" in texts
        assert "Freezing Temperature" in texts
        assert "UV Index over 8" in texts
        assert "snow" in texts

    def test_listener_hover_text(self):
        """Test hover targets carry resolved tooltip text."""
        listener = next(t for t in self.fig.data if t.name == "listener")
        assert listener.hoverinfo == "text"
        assert any("January 1" in text for text in listener.hovertext)

    def test_static_chart(self):
        """Test that the listener can be left out."""
        fig = create_radial_weather_chart(self.context, interactive=False, title="2018")
        assert "listener" not in trace_names(fig)
        assert fig.layout.title.text == "2018"


class TestAddPointerIndicator:
    """Test the add_pointer_indicator function."""

    def setup_method(self):
        self.context = year_context()

    def test_adds_wedge(self):
        """Test a resolved pointer adds the indicator."""
        fig = create_radial_weather_chart(self.context, interactive=False)
        before = len(fig.data)

        add_pointer_indicator(fig, self.context, resolve(self.context, 50, 50))

        assert len(fig.data) == before + 1
        assert fig.data[-1].name == "tooltip-line"
        assert fig.data[-1].fill == "toself"

    def test_adds_tooltip_label(self):
        """Test the tooltip text sits outside the wedge on the pointer's side."""
        fig = create_radial_weather_chart(self.context, interactive=False)
        resolution = resolve(self.context, 50, 50)

        add_pointer_indicator(fig, self.context, resolution)

        label = fig.layout.annotations[-1]
        assert label.name == "tooltip"
        assert resolution.record is not None
        assert label.text.startswith("<b>")
        # lower right of the wheel: the label hangs right of and below the anchor
        assert label.xanchor == "left"
        assert label.yanchor == "top"
        assert math.hypot(label.x, label.y) == pytest.approx(180 * 1.6)

    def test_no_record_no_wedge(self):
        """Test nothing is drawn without a record."""
        fig = go.Figure()
        add_pointer_indicator(fig, self.context, Resolution(angle=1.0, date=None))
        add_pointer_indicator(fig, self.context, None)
        assert len(fig.data) == 0
        assert len(fig.layout.annotations) == 0
