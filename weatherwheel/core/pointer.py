"""
pointer.py

Pointer inversion: turn a pointer position over the wheel back into a date
and the record for that date, and derive the tooltip contents and placement.

Pointer coordinates are relative to the chart center with y growing
downward, the same frame ``geometry.to_cartesian`` produces. Resolution
never raises: positions that land on a date missing from the dataset, or
non-finite positions, come back with ``record=None`` and the caller hides
the tooltip.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from weatherwheel import config
from weatherwheel.core.context import ChartContext
from weatherwheel.core.geometry import to_cartesian
from weatherwheel.models.weather import Resolution, TooltipData
from weatherwheel.utils.date_util import format_date
from weatherwheel.utils.log_util import app_logger

logger = app_logger(__name__)

FULL_TURN = 2 * math.pi


@dataclass(frozen=True)
class TooltipPlacement:
    """Where the tooltip sits relative to the outer end of the indicator."""

    anchor: Tuple[float, float]
    horizontal: str
    vertical: str


def angle_from_pointer(x: float, y: float) -> float:
    """
    Chart angle of a pointer position, in the half-open interval [0, 2π).

    The seam belongs to angle 0: a value that rounds up to a full turn is
    folded back onto 0. The origin has no direction and resolves to 0, and
    so does a NaN coordinate.
    """
    if x == 0 and y == 0:
        return 0.0
    angle = math.atan2(y, x) + math.pi / 2
    if angle < 0:
        angle += FULL_TURN
    if not 0 <= angle < FULL_TURN:
        angle = 0.0
    return angle


def resolve(context: ChartContext, x: float, y: float) -> Resolution:
    """
    Resolve a pointer position to the record of the day it falls in.

    :param context: Chart context
    :param x: Pointer x relative to the chart center
    :param y: Pointer y relative to the chart center (downward)
    :return: Resolution; ``record`` is None when no record has that date
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        logger.debug(f"Ignoring non-finite pointer position ({x}, {y})")
        return Resolution(angle=0.0, date=None, record=None)

    angle = angle_from_pointer(x, y)
    date = context.scales.angle.invert(angle)
    date_string = format_date(date.floor("D"), config.DATE_FORMAT)
    record = context.dataset.find(date_string)
    if record is None:
        logger.debug(f"No record for {date_string} at angle {angle:.4f}")
    return Resolution(angle=angle, date=date, record=record)


def tooltip_data(context: ChartContext, resolution: Resolution) -> Optional[TooltipData]:
    """
    Tooltip contents for a resolved record, or None to hide the tooltip.
    """
    record = resolution.record
    if record is None:
        return None

    temperature_color = context.scales.temperature_color
    return TooltipData(
        date_label=format_date(record.date, config.TOOLTIP_DATE_FORMAT),
        temp_min=f"{record.temperature_min:.1f}°F",
        temp_max=f"{record.temperature_max:.1f}°F",
        temp_min_color=temperature_color(record.temperature_min),
        temp_max_color=temperature_color(record.temperature_max),
        uv=record.uv_index,
        cloud=record.cloud_cover,
        precip_pct=f"{record.precip_probability:.0%}",
        precip_type=record.precip_type or "",
        precip_color=context.scales.precipitation_type_color(record.precip_type),
    )


def tooltip_indicator(
    context: ChartContext,
    angle: float,
    half_width: float = config.TOOLTIP_WEDGE_HALF_WIDTH,
    points: int = 8,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Closed wedge from the center out to the annotation circle, spanning
    ``angle ± half_width``.
    """
    arc = [
        to_cartesian(context, a, config.ANNOTATION_OUTER_OFFSET)
        for a in np.linspace(angle - half_width, angle + half_width, points)
    ]
    xs = [0.0] + [p[0] for p in arc] + [0.0]
    ys = [0.0] + [p[1] for p in arc] + [0.0]
    return np.array(xs), np.array(ys)


def _placement(value: float) -> str:
    threshold = config.TOOLTIP_PLACEMENT_THRESHOLD
    if value < -threshold:
        return "before"
    if value > threshold:
        return "after"
    return "center"


def tooltip_position(context: ChartContext, angle: float) -> TooltipPlacement:
    """
    Tooltip anchor at the outer end of the indicator.

    ``horizontal``/``vertical`` say which side of the anchor the tooltip goes:
    ``before`` (left/up), ``center`` or ``after`` (right/down).
    """
    x, y = to_cartesian(context, angle, config.ANNOTATION_OUTER_OFFSET)
    return TooltipPlacement(
        anchor=(x, y),
        horizontal=_placement(x),
        vertical=_placement(y),
    )


def listener_grid(
    context: ChartContext,
    angle_steps: int = config.LISTENER_ANGLE_STEPS,
    offsets=config.LISTENER_RING_OFFSETS,
) -> Tuple[List[float], List[float], List[str]]:
    """
    Sample positions covering the wheel with the tooltip text each resolves to.

    Used as an invisible hover target: every sample runs through ``resolve``
    exactly as a live pointer would.
    """
    xs, ys, texts = [], [], []
    for step in range(angle_steps):
        angle = FULL_TURN * step / angle_steps
        # every ring along one spoke resolves to the same date
        x, y = to_cartesian(context, angle)
        text = format_tooltip_text(tooltip_data(context, resolve(context, x, y)))
        for offset in offsets:
            x, y = to_cartesian(context, angle, offset)
            xs.append(x)
            ys.append(y)
            texts.append(text)
    return xs, ys, texts


def format_tooltip_text(data: Optional[TooltipData]) -> str:
    """Plain hover label; empty when there is nothing to show."""
    if data is None:
        return ""
    lines = [
        f"<b>{data.date_label}</b>",
        f"{data.temp_min} – {data.temp_max}",
        f"UV Index: {data.uv}",
        f"Cloud Cover: {data.cloud}",
        f"Precipitation: {data.precip_pct}",
    ]
    if data.precip_type:
        lines.append(f"Type: {data.precip_type}")
    return "<br>".join(lines)
