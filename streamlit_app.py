"""
Main streamlit.io application
"""

import streamlit as st

from weatherwheel import config
from weatherwheel.core.context import initialize
from weatherwheel.core.dataset import load_dataset
from weatherwheel.core.errors import WeatherWheelError
from weatherwheel.ui import wheel
from weatherwheel.utils.log_util import app_logger

logger = app_logger(__name__)

st.set_page_config(
    page_title="Weather Wheel",
    layout="wide",
    initial_sidebar_state="collapsed",
)


@st.cache_resource
def get_context(source: str):
    return initialize(load_dataset(source))


try:
    data_source = st.secrets.get("WEATHER_DATA", str(config.DEFAULT_DATA_FILE))
except FileNotFoundError:
    # no secrets.toml
    data_source = str(config.DEFAULT_DATA_FILE)

st.title("Weather Wheel")

try:
    context = get_context(data_source)
except WeatherWheelError as e:
    logger.error(f"❌ Could not build chart from {data_source}: {e}")
    st.error(f"Could not load weather data: {e}")
    st.stop()

wheel.render(context)

with st.expander("Data"):
    st.dataframe(context.dataset.to_frame(), width="stretch")
