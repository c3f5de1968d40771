"""
scales.py

Scale objects mapping data values to visual values, and the builder that
derives every chart scale from a full dataset.

Scales are immutable: ``nice()`` returns a new scale. A degenerate domain
(both ends equal) maps every input to the middle of the range, and inverting
any value over it returns that single domain value.

Scales in a ScaleSet:
- angle: date -> radians in [0, 2π]
- radius: temperature -> distance from center, niced to round ticks
- cloud_radius / precipitation_radius: square-root marker sizes
- precipitation_type_color: ordinal type -> color, with a fallback
- temperature_color: sequential YlOrRd color over the temperature extent
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import pandas as pd
from plotly.colors import get_colorscale, sample_colorscale

from weatherwheel import config
from weatherwheel.core.accessors import (
    cloud_accessor,
    date_accessor,
    extent,
    precipitation_probability_accessor,
    temperature_values,
)
from weatherwheel.core.errors import EmptyDatasetError
from weatherwheel.models.weather import Dimensions
from weatherwheel.utils.log_util import app_logger

logger = app_logger(__name__)

E10 = math.sqrt(50)
E5 = math.sqrt(10)
E2 = math.sqrt(2)

EPOCH = pd.Timestamp("1970-01-01")


def tick_increment(start: float, stop: float, count: int) -> float:
    """
    Tick step for ``count`` ticks over [start, stop], as 1, 2 or 5 × 10^k.

    Steps below one are returned as a negative reciprocal (-10 means 0.1)
    so callers can divide instead of multiplying by an inexact fraction.
    Returns 0 when no step exists (empty or degenerate interval).
    """
    if count <= 0:
        return 0
    step = (stop - start) / count
    if not math.isfinite(step) or step <= 0:
        return 0
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    if error >= E10:
        factor = 10
    elif error >= E5:
        factor = 5
    elif error >= E2:
        factor = 2
    else:
        factor = 1
    if power < 0:
        return -(10 ** -power) / factor
    return factor * 10 ** power


def ticks(start: float, stop: float, count: int) -> List[float]:
    """Round tick values within [start, stop]."""
    if count <= 0:
        return []
    if start == stop:
        return [start]
    reverse = stop < start
    if reverse:
        start, stop = stop, start
    inc = tick_increment(start, stop, count)
    if inc == 0:
        return []
    if inc > 0:
        values = [i * inc for i in range(math.ceil(start / inc), math.floor(stop / inc) + 1)]
    else:
        inc = -inc
        values = [i / inc for i in range(math.ceil(start * inc), math.floor(stop * inc) + 1)]
    return values[::-1] if reverse else values


def nice_domain(start: float, stop: float, count: int = 10) -> Tuple[float, float]:
    """
    Expand [start, stop] outward to multiples of its tick step.

    Iterates until the step is stable. A degenerate interval is returned
    unchanged.
    """
    reverse = stop < start
    if reverse:
        start, stop = stop, start
    lo, hi = start, stop
    prestep = None
    for _ in range(10):
        step = tick_increment(lo, hi, count)
        if step == prestep:
            start, stop = lo, hi
            break
        if step > 0:
            lo = math.floor(lo / step) * step
            hi = math.ceil(hi / step) * step
        elif step < 0:
            lo = math.ceil(lo * step) / step
            hi = math.floor(hi * step) / step
        else:
            break
        prestep = step
    return (stop, start) if reverse else (start, stop)


def _interpolate(value: float, domain: Sequence[float], range_: Sequence[float]) -> float:
    d0, d1 = domain
    r0, r1 = range_
    if d1 == d0:
        t = 0.5
    else:
        t = (value - d0) / (d1 - d0)
    return r0 + t * (r1 - r0)


@dataclass(frozen=True)
class LinearScale:
    """Continuous linear mapping from ``domain`` to ``range``."""

    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value: float) -> float:
        return _interpolate(float(value), self.domain, self.range)

    def invert(self, value: float) -> float:
        return _interpolate(float(value), self.range, self.domain)

    def nice(self, count: int = 10) -> "LinearScale":
        return LinearScale(nice_domain(*self.domain, count=count), self.range)

    def ticks(self, count: int = 10) -> List[float]:
        return ticks(self.domain[0], self.domain[1], count)


@dataclass(frozen=True)
class SqrtScale:
    """
    Square-root scale: equal input differences give equal marker areas.

    Negative inputs are mirrored, so the transform is sign(x)·√|x|.
    """

    domain: Tuple[float, float]
    range: Tuple[float, float]

    @staticmethod
    def _transform(value: float) -> float:
        return math.copysign(math.sqrt(abs(value)), value)

    @staticmethod
    def _untransform(value: float) -> float:
        return math.copysign(value * value, value)

    def __call__(self, value: float) -> float:
        domain = tuple(self._transform(d) for d in self.domain)
        return _interpolate(self._transform(float(value)), domain, self.range)

    def invert(self, value: float) -> float:
        domain = tuple(self._transform(d) for d in self.domain)
        return self._untransform(_interpolate(float(value), self.range, domain))


@dataclass(frozen=True)
class TimeScale:
    """
    Linear-in-time scale. Inputs are anything ``pd.Timestamp`` accepts;
    ``invert`` returns a Timestamp rounded to the millisecond.
    """

    domain: Tuple[pd.Timestamp, pd.Timestamp]
    range: Tuple[float, float]

    @staticmethod
    def _seconds(value) -> float:
        return (pd.Timestamp(value) - EPOCH) / pd.Timedelta(seconds=1)

    def _numeric_domain(self) -> Tuple[float, float]:
        return self._seconds(self.domain[0]), self._seconds(self.domain[1])

    def __call__(self, value) -> float:
        return _interpolate(self._seconds(value), self._numeric_domain(), self.range)

    def invert(self, value: float) -> pd.Timestamp:
        seconds = _interpolate(float(value), self.range, self._numeric_domain())
        return EPOCH + pd.Timedelta(milliseconds=round(seconds * 1000))

    def months(self) -> List[pd.Timestamp]:
        """Month starts in [start, stop)."""
        start, stop = self.domain
        return [m for m in pd.date_range(start, stop, freq="MS") if m < stop]


@dataclass(frozen=True)
class OrdinalScale:
    """Fixed mapping from categories to values; anything else gets ``unknown``."""

    domain: Tuple[str, ...]
    range: Tuple[str, ...]
    unknown: str

    def __post_init__(self):
        if len(self.domain) != len(self.range):
            raise ValueError(
                f"Ordinal scale needs one value per category: {len(self.domain)} != {len(self.range)}"
            )

    def __call__(self, value: Optional[str]) -> str:
        try:
            return self.range[self.domain.index(value)]
        except ValueError:
            return self.unknown


@dataclass(frozen=True)
class SequentialScale:
    """Continuous color scale: domain is normalized to [0, 1] and sampled."""

    domain: Tuple[float, float]
    colorscale: str = config.TEMPERATURE_COLORSCALE

    def interpolate(self, t: float) -> str:
        t = min(1.0, max(0.0, t))
        return sample_colorscale(get_colorscale(self.colorscale), [t])[0]

    def __call__(self, value: float) -> str:
        return self.interpolate(_interpolate(float(value), self.domain, (0.0, 1.0)))

    def gradient_stops(self, count: int = config.GRADIENT_STOP_COUNT) -> List[Tuple[float, str]]:
        """Evenly spaced (fraction, color) stops over the whole interpolator."""
        if count < 2:
            return [(0.0, self.interpolate(0.0))]
        return [(i / (count - 1), self.interpolate(i / (count - 1))) for i in range(count)]


@dataclass(frozen=True)
class ScaleSet:
    angle: TimeScale
    radius: LinearScale
    cloud_radius: SqrtScale
    precipitation_radius: SqrtScale
    precipitation_type_color: OrdinalScale
    temperature_color: SequentialScale


def build_scales(records, dimensions: Dimensions) -> ScaleSet:
    """
    Derive every chart scale from the full dataset.

    :param records: Dataset or any sequence of WeatherRecord
    :param dimensions: Chart layout; the radius scale spans its bounded radius
    :return: ScaleSet
    :raises EmptyDatasetError: if there are no records
    """
    records = list(records)
    if not records:
        raise EmptyDatasetError("Cannot build scales from an empty dataset")

    temperature_extent = extent(temperature_values(records))

    angle = TimeScale(
        domain=extent(date_accessor(r) for r in records),
        range=(0.0, 2 * math.pi),
    )
    radius = LinearScale(
        domain=temperature_extent,
        range=(0.0, dimensions.bounded_radius),
    ).nice(config.RADIUS_NICE_COUNT)
    cloud_radius = SqrtScale(
        domain=extent(cloud_accessor(r) for r in records),
        range=config.CLOUD_RADIUS_RANGE,
    )
    precipitation_radius = SqrtScale(
        domain=extent(precipitation_probability_accessor(r) for r in records),
        range=config.PRECIPITATION_RADIUS_RANGE,
    )
    precipitation_type_color = OrdinalScale(
        domain=config.PRECIPITATION_TYPES,
        range=config.PRECIPITATION_TYPE_COLORS,
        unknown=config.PRECIPITATION_FALLBACK_COLOR,
    )
    temperature_color = SequentialScale(domain=temperature_extent)

    logger.debug(
        f"Built scales: dates {angle.domain[0].date()}..{angle.domain[1].date()}, "
        f"temperature {temperature_extent} niced to {radius.domain}"
    )
    return ScaleSet(
        angle=angle,
        radius=radius,
        cloud_radius=cloud_radius,
        precipitation_radius=precipitation_radius,
        precipitation_type_color=precipitation_type_color,
        temperature_color=temperature_color,
    )
