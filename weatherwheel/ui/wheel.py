"""
Streamlit page for the radial weather chart.

Clicking a point on the wheel sends its chart coordinates back through the
selection event; the next run resolves them to a record, draws the pointer
indicator and fills the tooltip.
"""

from typing import Optional

import streamlit as st

from weatherwheel.core.context import ChartContext
from weatherwheel.core.pointer import resolve, tooltip_data
from weatherwheel.core.radial_viz import add_pointer_indicator, create_radial_weather_chart
from weatherwheel.models.weather import Resolution
from weatherwheel.ui.tooltip import render_tooltip
from weatherwheel.utils.log_util import app_logger

logger = app_logger(__name__)

CHART_KEY = "weather_wheel"


def resolution_from_selection(context: ChartContext, selection) -> Optional[Resolution]:
    """
    Resolve the first selected point of a Plotly selection event.

    :param context: Chart context
    :param selection: Selection state from ``st.plotly_chart(..., on_select=...)``
    :return: Resolution, or None when nothing usable is selected
    """
    if not selection:
        return None
    try:
        points = selection["selection"]["points"]
    except (KeyError, TypeError):
        return None
    for point in points:
        x, y = point.get("x"), point.get("y")
        if x is None or y is None:
            continue
        return resolve(context, float(x), float(y))
    return None


def render(context: ChartContext) -> None:
    """
    Render the wheel and the tooltip for the current selection.

    :param context: Chart context
    """
    resolution = resolution_from_selection(context, st.session_state.get(CHART_KEY))
    if resolution is not None:
        logger.debug(f"Selected angle {resolution.angle:.4f} -> {resolution.date}")

    fig = create_radial_weather_chart(context)
    add_pointer_indicator(fig, context, resolution)

    chart_col, tooltip_col = st.columns([3, 1])
    with chart_col:
        st.plotly_chart(
            fig,
            key=CHART_KEY,
            on_select="rerun",
            selection_mode="points",
            config={"displayModeBar": False},
        )
    with tooltip_col:
        placeholder = st.empty()
        if resolution is None:
            st.caption("Hover over the wheel for details, click a day to pin it.")
        render_tooltip(tooltip_data(context, resolution) if resolution else None, placeholder)
