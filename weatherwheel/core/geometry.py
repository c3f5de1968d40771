"""
geometry.py

Polar transform and every static coordinate of the wheel.

Angles are radians measured clockwise from north (12 o'clock). Coordinates
are relative to the chart center with y growing downward, and every point
here goes through ``to_cartesian`` so all layers share one frame.

Functions:
- to_cartesian: (angle, offset multiplier) -> (x, y)
- x_from_record / y_from_record / point_from_record: position of a record
- month_ticks: grid spokes and month labels
- temperature_ticks: concentric grid circles and their labels
- freezing_radius: radius of the 32°F circle
- temperature_band: per-record inner/outer points of the min/max band
- high_uv_segments: short radial marks for days over the UV threshold
- cloud_markers / precipitation_markers: per-record circles
- annotation / standard_annotations: call-out lines and labels
- precipitation_legend: swatches for each precipitation type
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from weatherwheel import config
from weatherwheel.core.accessors import (
    cloud_accessor,
    date_accessor,
    precipitation_probability_accessor,
    precipitation_type_accessor,
    temperature_max_accessor,
    temperature_min_accessor,
    uv_accessor,
)
from weatherwheel.core.context import ChartContext
from weatherwheel.models.weather import WeatherRecord
from weatherwheel.utils.date_util import format_date

Point = Tuple[float, float]


@dataclass(frozen=True)
class MonthTick:
    month: object
    angle: float
    line_end: Point
    label_anchor: Point
    label: str
    text_anchor: str


@dataclass(frozen=True)
class TemperatureTick:
    value: float
    radius: float
    label: Optional[str]


@dataclass(frozen=True)
class BandPoint:
    record: WeatherRecord
    angle: float
    inner: Point
    outer: Point


@dataclass(frozen=True)
class Segment:
    record: WeatherRecord
    start: Point
    end: Point


@dataclass(frozen=True)
class Marker:
    record: WeatherRecord
    center: Point
    radius: float
    color: Optional[str] = None


@dataclass(frozen=True)
class Annotation:
    angle: float
    offset: float
    start: Point
    end: Point
    label_anchor: Point
    text: str


@dataclass(frozen=True)
class LegendEntry:
    precip_type: str
    swatch: Point
    label_anchor: Point
    color: str


def to_cartesian(context: ChartContext, angle: float, offset: float = 1) -> Point:
    """
    Convert a chart angle and ring offset to (x, y).

    :param context: Chart context providing the bounded radius
    :param angle: Radians clockwise from north
    :param offset: Fraction of the bounded radius
    :return: (x, y) relative to the chart center
    """
    distance = context.dimensions.bounded_radius * offset
    return (
        math.cos(angle - math.pi / 2) * distance,
        math.sin(angle - math.pi / 2) * distance,
    )


def point_from_record(
    context: ChartContext, record: WeatherRecord, offset: float = config.DATA_POINT_OFFSET
) -> Point:
    return to_cartesian(context, context.scales.angle(date_accessor(record)), offset)


def x_from_record(
    context: ChartContext, record: WeatherRecord, offset: float = config.DATA_POINT_OFFSET
) -> float:
    return point_from_record(context, record, offset)[0]


def y_from_record(
    context: ChartContext, record: WeatherRecord, offset: float = config.DATA_POINT_OFFSET
) -> float:
    return point_from_record(context, record, offset)[1]


def text_anchor(x: float) -> str:
    # near the vertical axis labels are centered, otherwise they extend outward
    if abs(x) < 5:
        return "middle"
    return "start" if x > 0 else "end"


def month_ticks(context: ChartContext) -> List[MonthTick]:
    result = []
    for month in context.scales.angle.months():
        angle = context.scales.angle(month)
        label_anchor = to_cartesian(context, angle, config.MONTH_LABEL_OFFSET)
        result.append(
            MonthTick(
                month=month,
                angle=angle,
                line_end=to_cartesian(context, angle),
                label_anchor=label_anchor,
                label=format_date(month, config.MONTH_LABEL_FORMAT),
                text_anchor=text_anchor(label_anchor[0]),
            )
        )
    return result


def temperature_ticks(
    context: ChartContext, count: int = config.TEMPERATURE_TICK_COUNT
) -> List[TemperatureTick]:
    """Grid circle radii; ticks below 1° are drawn without a label."""
    radius = context.scales.radius
    return [
        TemperatureTick(
            value=t,
            radius=radius(t),
            label=f"{t:.0f}°F" if t >= 1 else None,
        )
        for t in radius.ticks(count)
    ]


def freezing_radius(context: ChartContext) -> float:
    return context.scales.radius(config.FREEZING_TEMPERATURE)


def temperature_band(context: ChartContext) -> List[BandPoint]:
    bounded_radius = context.dimensions.bounded_radius
    radius = context.scales.radius
    band = []
    for record in context.dataset:
        angle = context.scales.angle(date_accessor(record))
        # radius scale output is in pixels; to_cartesian wants a fraction
        inner = radius(temperature_min_accessor(record)) / bounded_radius if bounded_radius else 0
        outer = radius(temperature_max_accessor(record)) / bounded_radius if bounded_radius else 0
        band.append(
            BandPoint(
                record=record,
                angle=angle,
                inner=to_cartesian(context, angle, inner),
                outer=to_cartesian(context, angle, outer),
            )
        )
    return band


def high_uv_segments(
    context: ChartContext, threshold: float = config.UV_INDEX_THRESHOLD
) -> List[Segment]:
    return [
        Segment(
            record=record,
            start=point_from_record(context, record, config.UV_OFFSET),
            end=point_from_record(context, record, config.UV_OFFSET + config.UV_SEGMENT_LENGTH),
        )
        for record in context.dataset
        if uv_accessor(record) > threshold
    ]


def cloud_markers(context: ChartContext) -> List[Marker]:
    scale = context.scales.cloud_radius
    return [
        Marker(
            record=record,
            center=point_from_record(context, record, config.CLOUD_OFFSET),
            radius=scale(cloud_accessor(record)),
        )
        for record in context.dataset
    ]


def precipitation_markers(context: ChartContext) -> List[Marker]:
    size = context.scales.precipitation_radius
    color = context.scales.precipitation_type_color
    return [
        Marker(
            record=record,
            center=point_from_record(context, record, config.PRECIPITATION_OFFSET),
            radius=size(precipitation_probability_accessor(record)),
            color=color(precipitation_type_accessor(record)),
        )
        for record in context.dataset
    ]


def annotation(context: ChartContext, angle: float, offset: float, text: str) -> Annotation:
    """
    Call-out line from a ring out to the annotation circle, with a label
    just past its far end.
    """
    start = to_cartesian(context, angle, offset)
    end = to_cartesian(context, angle, config.ANNOTATION_OUTER_OFFSET)
    return Annotation(
        angle=angle,
        offset=offset,
        start=start,
        end=end,
        label_anchor=(end[0] + 6, end[1]),
        text=text,
    )


def freezing_offset(context: ChartContext) -> float:
    """Freezing point as a fraction of the bounded radius."""
    bounded_radius = context.dimensions.bounded_radius
    if not bounded_radius:
        return 0.0
    return freezing_radius(context) / bounded_radius


def standard_annotations(context: ChartContext) -> List[Annotation]:
    annotations = [
        annotation(context, a["angle"], a["offset"], a["text"]) for a in config.ANNOTATIONS
    ]
    annotations.append(
        annotation(
            context,
            config.FREEZING_ANNOTATION_ANGLE,
            freezing_offset(context),
            config.FREEZING_ANNOTATION_TEXT,
        )
    )
    return annotations


def precipitation_legend(context: ChartContext) -> List[LegendEntry]:
    x, y = to_cartesian(context, config.PRECIPITATION_LEGEND_ANGLE, config.ANNOTATION_OUTER_OFFSET)
    color = context.scales.precipitation_type_color
    return [
        LegendEntry(
            precip_type=precip_type,
            swatch=(x + 15, y + 16 * (i + 1)),
            label_anchor=(x + 25, y + 16 * (i + 1)),
            color=color(precip_type),
        )
        for i, precip_type in enumerate(config.PRECIPITATION_TYPES)
    ]

