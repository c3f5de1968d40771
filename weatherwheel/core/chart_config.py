"""
chart_config.py

Reusable Plotly configuration helpers for the radial weather chart.

Provides the wheel's color palette, the layout that keeps one data unit per
pixel with the chart center at the origin, and text annotation presets.
"""

from typing import Any, Dict, List, Optional

import plotly.graph_objects as go

from weatherwheel.core.scales import SequentialScale
from weatherwheel.models.weather import Dimensions


def get_standard_colors() -> Dict[str, str]:
    """
    Get standard color palette used across the wheel.

    :return: Dictionary with color definitions
    """
    return {
        "background": "#f8f9fa",
        "grid_line": "#dadadd",
        "tick_label": "#8395a7",
        "freezing_fill": "rgba(0, 210, 211, 0.15)",
        "uv_line": "#feca57",
        "cloud_dot": "#c8d6e5",
        "annotation_line": "#a9a9ab",
        "annotation_text": "#576574",
        "tooltip_line": "rgba(87, 101, 116, 0.3)",
    }


def get_temperature_colorscale(scale: SequentialScale, stops: Optional[int] = None) -> List[list]:
    """
    Plotly colorscale built from the temperature interpolator's gradient stops.

    :param scale: Temperature color scale
    :param stops: Number of stops (default: configured gradient stop count)
    :return: Plotly colorscale list
    """
    gradient = scale.gradient_stops() if stops is None else scale.gradient_stops(stops)
    return [[fraction, color] for fraction, color in gradient]


def apply_radial_layout(
    fig: go.Figure,
    dimensions: Dimensions,
    title: Optional[str] = None,
    hovermode: str = "closest",
) -> go.Figure:
    """
    Apply the radial chart layout.

    Axes are hidden and span the chart in pixels, centered on the wheel, with
    y reversed so coordinates keep y growing downward.

    :param fig: Plotly figure to configure
    :param dimensions: Chart layout
    :param title: Chart title (optional)
    :param hovermode: Hover mode setting
    :return: Configured figure
    """
    center_x = dimensions.margin.left + dimensions.bounded_radius
    center_y = dimensions.margin.top + dimensions.bounded_radius

    layout_config = {
        "width": dimensions.width,
        "height": dimensions.height,
        "margin": dict(l=0, r=0, t=0, b=0),
        "showlegend": False,
        "hovermode": hovermode,
        "plot_bgcolor": "white",
        "paper_bgcolor": "white",
        "dragmode": False,
    }

    if title:
        layout_config["title"] = title

    fig.update_layout(**layout_config)

    axis_config = {
        "visible": False,
        "showgrid": False,
        "zeroline": False,
        "fixedrange": True,
    }
    fig.update_xaxes(range=[-center_x, dimensions.width - center_x], **axis_config)
    fig.update_yaxes(
        range=[dimensions.height - center_y, -center_y],
        scaleanchor="x",
        scaleratio=1,
        **axis_config,
    )
    return fig


def create_text_annotation(
    text: str,
    x: float,
    y: float,
    anchor: str = "start",
    css_class: str = "annotation-text",
    **kwargs
) -> Dict[str, Any]:
    """
    Create a text annotation positioned in chart coordinates.

    :param text: Annotation text
    :param x: X in chart pixels relative to the center
    :param y: Y in chart pixels relative to the center (downward)
    :param anchor: Text anchor ("start", "middle", "end")
    :param css_class: Preset ("annotation-text", "tick-label", "tick-label-temperature")
    :param kwargs: Additional annotation parameters
    :return: Annotation configuration dictionary
    """
    colors = get_standard_colors()
    xanchors = {"start": "left", "middle": "center", "end": "right"}
    presets = {
        "annotation-text": dict(font=dict(size=11, color=colors["annotation_text"])),
        "tick-label": dict(font=dict(size=12, color=colors["tick_label"])),
        "tick-label-temperature": dict(
            font=dict(size=10, color=colors["tick_label"]),
            bgcolor=colors["background"],
        ),
    }

    annotation = {
        "text": text,
        "x": x,
        "y": y,
        "xref": "x",
        "yref": "y",
        "showarrow": False,
        "xanchor": xanchors.get(anchor, "left"),
        "yanchor": "middle",
        **presets.get(css_class, presets["annotation-text"]),
        **kwargs,
    }

    return annotation
