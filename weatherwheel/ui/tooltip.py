"""
Tooltip sink for the radial weather chart.

Renders a resolved record as a small HTML card. Passing None hides it.
"""

from html import escape
from typing import Optional

import streamlit as st

from weatherwheel.models.weather import TooltipData

TOOLTIP_STYLE = (
    "padding: 0.6em 1em; border-radius: 4px; background: white; "
    "box-shadow: 0 3px 10px rgba(0, 0, 0, 0.15); font-size: 0.9rem;"
)


def tooltip_html(data: TooltipData) -> str:
    """
    Build the tooltip card markup.

    :param data: Tooltip contents
    :return: HTML string
    """
    precip_type = escape(data.precip_type) if data.precip_type else "none"
    return (
        f'<div class="tooltip" style="{TOOLTIP_STYLE}">'
        f'<div id="tooltip-date"><b>{escape(data.date_label)}</b></div>'
        f"<div>"
        f'<span id="tooltip-temperature-min" style="color: {data.temp_min_color}">{data.temp_min}</span>'
        f" - "
        f'<span id="tooltip-temperature-max" style="color: {data.temp_max_color}">{data.temp_max}</span>'
        f"</div>"
        f'<div>UV Index: <span id="tooltip-uv">{data.uv}</span></div>'
        f'<div>Cloud Cover: <span id="tooltip-cloud">{data.cloud}</span></div>'
        f'<div>Precipitation: <span id="tooltip-precipitation">{data.precip_pct}</span></div>'
        f'<div class="tooltip-precipitation-type" style="color: {data.precip_color}">'
        f'Type: <span id="tooltip-precipitation-type">{precip_type}</span></div>'
        f"</div>"
    )


def render_tooltip(data: Optional[TooltipData], placeholder=None) -> None:
    """
    Show the tooltip card, or clear it when ``data`` is None.

    :param data: Tooltip contents, or None to hide
    :param placeholder: Streamlit container to draw into (default: new st.empty())
    """
    target = placeholder if placeholder is not None else st.empty()
    if data is None:
        target.empty()
        return
    target.markdown(tooltip_html(data), unsafe_allow_html=True)
