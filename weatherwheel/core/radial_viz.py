"""
radial_viz.py
Plotly rendering of the radial weather chart.

Every coordinate drawn here comes from ``geometry`` or ``pointer``; this
module only turns them into traces, shapes and annotations.

Functions:
- create_radial_weather_chart: Full wheel with peripherals, data rings and call-outs
- add_pointer_indicator: Wedge and tooltip label for a resolved pointer angle
"""

from typing import List, Optional

import plotly.graph_objects as go

from weatherwheel.core.chart_config import (
    apply_radial_layout,
    create_text_annotation,
    get_standard_colors,
    get_temperature_colorscale,
)
from weatherwheel.core.context import ChartContext
from weatherwheel.core.geometry import (
    cloud_markers,
    freezing_radius,
    high_uv_segments,
    month_ticks,
    precipitation_legend,
    precipitation_markers,
    standard_annotations,
    temperature_band,
    temperature_ticks,
)
from weatherwheel.core.pointer import (
    format_tooltip_text,
    listener_grid,
    tooltip_data,
    tooltip_indicator,
    tooltip_position,
)
from weatherwheel.models.weather import Resolution
from weatherwheel.utils.log_util import app_logger

logger = app_logger(__name__)

# tooltip sides map to the side of the label box that touches the anchor
TOOLTIP_XANCHORS = {"before": "right", "center": "center", "after": "left"}
TOOLTIP_YANCHORS = {"before": "bottom", "center": "middle", "after": "top"}


def _segments_trace(segments, color: str, width: float = 1, name: str = "") -> go.Scatter:
    """One line trace for many (start, end) segments, separated by gaps."""
    xs: List[Optional[float]] = []
    ys: List[Optional[float]] = []
    for start, end in segments:
        xs.extend([start[0], end[0], None])
        ys.extend([start[1], end[1], None])
    return go.Scatter(
        x=xs,
        y=ys,
        mode="lines",
        line=dict(color=color, width=width),
        hoverinfo="skip",
        name=name,
    )


def _circle_shape(radius: float, **kwargs) -> dict:
    return dict(
        type="circle",
        xref="x",
        yref="y",
        x0=-radius,
        y0=-radius,
        x1=radius,
        y1=radius,
        layer="below",
        **kwargs,
    )


def _add_peripherals(fig: go.Figure, context: ChartContext, colors: dict) -> None:
    ticks = month_ticks(context)
    fig.add_trace(
        _segments_trace(
            [((0.0, 0.0), tick.line_end) for tick in ticks],
            colors["grid_line"],
            name="grid-line",
        )
    )
    for tick in ticks:
        fig.add_annotation(
            create_text_annotation(
                tick.label, *tick.label_anchor, anchor=tick.text_anchor, css_class="tick-label"
            )
        )

    for tick in temperature_ticks(context):
        fig.add_shape(_circle_shape(tick.radius, line=dict(color=colors["grid_line"], width=1)))
        if tick.label is None:
            continue
        fig.add_annotation(
            create_text_annotation(
                tick.label, 4, -tick.radius, css_class="tick-label-temperature"
            )
        )


def _add_temperature_band(fig: go.Figure, context: ChartContext) -> None:
    """
    Min/max temperature band, filled by distance from the center the way a
    radial gradient would color it.
    """
    band = temperature_band(context)
    if not band:
        return

    stops = get_temperature_colorscale(context.scales.temperature_color)
    bounded_radius = context.dimensions.bounded_radius or 1
    buckets = {i: ([], []) for i in range(len(stops))}

    pairs = list(zip(band, band[1:])) if len(band) > 1 else [(band[0], band[0])]
    for a, b in pairs:
        xs = [a.inner[0], a.outer[0], b.outer[0], b.inner[0], a.inner[0], None]
        ys = [a.inner[1], a.outer[1], b.outer[1], b.inner[1], a.inner[1], None]
        outer = max(abs(complex(*a.outer)), abs(complex(*b.outer)))
        fraction = min(1.0, outer / bounded_radius)
        index = round(fraction * (len(stops) - 1))
        buckets[index][0].extend(xs)
        buckets[index][1].extend(ys)

    for index, (xs, ys) in buckets.items():
        if not xs:
            continue
        color = stops[index][1]
        fig.add_trace(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines",
                fill="toself",
                fillcolor=color,
                line=dict(color=color, width=0.5),
                hoverinfo="skip",
                name="temperature-band",
            )
        )


def _add_data_rings(fig: go.Figure, context: ChartContext, colors: dict) -> None:
    uv = high_uv_segments(context)
    if uv:
        fig.add_trace(
            _segments_trace(
                [(s.start, s.end) for s in uv], colors["uv_line"], width=2, name="uv-line"
            )
        )

    clouds = cloud_markers(context)
    fig.add_trace(
        go.Scatter(
            x=[m.center[0] for m in clouds],
            y=[m.center[1] for m in clouds],
            mode="markers",
            marker=dict(size=[2 * m.radius for m in clouds], color=colors["cloud_dot"]),
            hoverinfo="skip",
            name="cloud-dot",
        )
    )

    precipitation = precipitation_markers(context)
    fig.add_trace(
        go.Scatter(
            x=[m.center[0] for m in precipitation],
            y=[m.center[1] for m in precipitation],
            mode="markers",
            marker=dict(
                size=[2 * m.radius for m in precipitation],
                color=[m.color for m in precipitation],
                opacity=0.5,
            ),
            hoverinfo="skip",
            name="precipitation-dot",
        )
    )


def _add_annotations(fig: go.Figure, context: ChartContext, colors: dict) -> None:
    annotations = standard_annotations(context)
    fig.add_trace(
        _segments_trace(
            [(a.start, a.end) for a in annotations],
            colors["annotation_line"],
            name="annotation-line",
        )
    )
    for a in annotations:
        fig.add_annotation(create_text_annotation(a.text, *a.label_anchor))

    legend = precipitation_legend(context)
    fig.add_trace(
        go.Scatter(
            x=[entry.swatch[0] for entry in legend],
            y=[entry.swatch[1] for entry in legend],
            mode="markers",
            marker=dict(size=8, color=[entry.color for entry in legend], opacity=0.7),
            hoverinfo="skip",
            name="precipitation-legend",
        )
    )
    for entry in legend:
        fig.add_annotation(create_text_annotation(entry.precip_type, *entry.label_anchor))


def _add_listener(fig: go.Figure, context: ChartContext) -> None:
    xs, ys, texts = listener_grid(context)
    fig.add_trace(
        go.Scatter(
            x=xs,
            y=ys,
            mode="markers",
            marker=dict(size=12, color="rgba(0, 0, 0, 0)"),
            hovertext=texts,
            hoverinfo="text",
            name="listener",
        )
    )


def create_radial_weather_chart(
    context: ChartContext,
    title: Optional[str] = None,
    interactive: bool = True,
) -> go.Figure:
    """
    Create the radial weather chart.

    Design:
    - Spokes at each month start, concentric circles at temperature ticks
    - Freezing circle at 32°F
    - Band between daily min and max temperature, colored YlOrRd by radius
    - Short marks for days over the UV threshold, cloud and precipitation dots
    - Call-outs and a precipitation type legend
    - Invisible hover targets resolving to the day under the pointer (when interactive)

    :param context: Chart context
    :param title: Chart title (optional)
    :param interactive: Add the hover/click listener trace
    :return: Plotly figure
    """
    logger.debug(f"Creating radial weather chart for {len(context.dataset)} records")
    colors = get_standard_colors()
    fig = go.Figure()

    _add_peripherals(fig, context, colors)
    fig.add_shape(
        _circle_shape(
            freezing_radius(context),
            fillcolor=colors["freezing_fill"],
            line=dict(width=0),
        )
    )
    _add_temperature_band(fig, context)
    _add_data_rings(fig, context, colors)
    _add_annotations(fig, context, colors)
    if interactive:
        _add_listener(fig, context)

    apply_radial_layout(fig, context.dimensions, title=title)
    logger.info(f"Created radial weather chart with {len(fig.data)} traces")
    return fig


def add_pointer_indicator(
    fig: go.Figure, context: ChartContext, resolution: Optional[Resolution]
) -> go.Figure:
    """
    Draw the wedge marking a resolved pointer angle, with the tooltip text
    placed just outside its far end. Nothing is drawn when the pointer
    resolved to no record.

    :param fig: Figure to draw on
    :param context: Chart context
    :param resolution: Resolved pointer position (optional)
    :return: The same figure
    """
    if resolution is None or not resolution.found:
        return fig
    colors = get_standard_colors()
    xs, ys = tooltip_indicator(context, resolution.angle)
    fig.add_trace(
        go.Scatter(
            x=xs,
            y=ys,
            mode="lines",
            fill="toself",
            fillcolor=colors["tooltip_line"],
            line=dict(width=0),
            hoverinfo="skip",
            name="tooltip-line",
        )
    )

    placement = tooltip_position(context, resolution.angle)
    fig.add_annotation(
        create_text_annotation(
            format_tooltip_text(tooltip_data(context, resolution)),
            *placement.anchor,
            name="tooltip",
            xanchor=TOOLTIP_XANCHORS[placement.horizontal],
            yanchor=TOOLTIP_YANCHORS[placement.vertical],
            align="left",
            bgcolor=colors["background"],
            bordercolor=colors["annotation_line"],
            borderpad=4,
        )
    )
    return fig
