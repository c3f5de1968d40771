"""
Weather chart data models and type definitions.

This module provides immutable data structures for daily weather records,
the chart layout, and the values produced by pointer inspection.
"""

import datetime
from dataclasses import dataclass, field
from typing import Optional

from weatherwheel import config


@dataclass(frozen=True)
class WeatherRecord:
    """One calendar day of weather."""

    date: datetime.date
    temperature_min: float
    temperature_max: float
    uv_index: float
    precip_probability: float
    cloud_cover: float
    precip_type: Optional[str] = None

    @property
    def date_string(self) -> str:
        return self.date.strftime(config.DATE_FORMAT)


@dataclass(frozen=True)
class Margin:
    """Chart margins in pixels."""

    top: float = 120
    right: float = 120
    bottom: float = 120
    left: float = 120


@dataclass(frozen=True)
class Dimensions:
    """
    Fixed chart layout.

    Bounded sizes are what remains after margins; they are clamped at zero so
    oversized margins give an empty drawing area rather than a negative one.
    """

    width: float
    height: float
    radius: float
    margin: Margin = field(default_factory=Margin)

    @classmethod
    def from_width(cls, width: float = config.CHART_WIDTH, margin: Optional[Margin] = None) -> "Dimensions":
        """Square chart whose nominal radius is half its width."""
        if margin is None:
            margin = Margin(**config.CHART_MARGIN)
        return cls(width=width, height=width, radius=width / 2, margin=margin)

    @property
    def bounded_width(self) -> float:
        return max(0.0, self.width - self.margin.left - self.margin.right)

    @property
    def bounded_height(self) -> float:
        return max(0.0, self.height - self.margin.top - self.margin.bottom)

    @property
    def bounded_radius(self) -> float:
        return max(0.0, self.radius - (self.margin.left + self.margin.right) / 2)


@dataclass(frozen=True)
class Resolution:
    """Result of inverting a pointer position."""

    angle: float
    date: Optional[datetime.datetime]
    record: Optional[WeatherRecord] = None

    @property
    def found(self) -> bool:
        return self.record is not None


@dataclass(frozen=True)
class TooltipData:
    """Structured tooltip update for one resolved record."""

    date_label: str
    temp_min: str
    temp_max: str
    temp_min_color: str
    temp_max_color: str
    uv: float
    cloud: float
    precip_pct: str
    precip_type: str
    precip_color: str
