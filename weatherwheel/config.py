# config.py
"""
Configurations for the Weather Wheel radial chart.

This module contains the chart layout, ring offsets, color tables and loader
settings shared across the application. Values are visual constants; nothing
here is derived from data.
"""

import math
from pathlib import Path

DEFAULT_DATA_FILE = Path(__file__).parent.parent / "data" / "my_weather_data.json"
HTTP_TIMEOUT_SECONDS = 10

# Layout

CHART_WIDTH = 600
CHART_MARGIN = {
    "top": 120,
    "right": 120,
    "bottom": 120,
    "left": 120,
}

# Ring offsets, as fractions of the bounded radius

UV_OFFSET = 0.95
UV_SEGMENT_LENGTH = 0.1
PRECIPITATION_OFFSET = 1.14
CLOUD_OFFSET = 1.27
MONTH_LABEL_OFFSET = 1.38
DATA_POINT_OFFSET = 1.4
ANNOTATION_OUTER_OFFSET = 1.6
TEMPERATURE_ANNOTATION_OFFSET = 0.5

UV_INDEX_THRESHOLD = 8
FREEZING_TEMPERATURE = 32

# Scales

CLOUD_RADIUS_RANGE = (1, 10)
PRECIPITATION_RADIUS_RANGE = (0, 8)
RADIUS_NICE_COUNT = 10
TEMPERATURE_TICK_COUNT = 4

PRECIPITATION_TYPES = ("rain", "sleet", "snow")
PRECIPITATION_TYPE_COLORS = ("#54a0ff", "#636e72", "#b2bec3")
PRECIPITATION_FALLBACK_COLOR = "#dadadd"

TEMPERATURE_COLORSCALE = "YlOrRd"
GRADIENT_STOP_COUNT = 10

# Pointer / tooltip

TOOLTIP_WEDGE_HALF_WIDTH = 0.015
TOOLTIP_PLACEMENT_THRESHOLD = 50
LISTENER_ANGLE_STEPS = 365
LISTENER_RING_OFFSETS = (0.25, 0.5, 0.75, 1.0, 1.25, 1.5)

# Formats

DATE_FORMAT = "%Y-%m-%d"
MONTH_LABEL_FORMAT = "%b"
TOOLTIP_DATE_FORMAT = "%B %-d"

# Call-outs drawn around the wheel: (angle, start offset, label).
# The freezing line offset depends on the radius scale and is added at runtime.

ANNOTATIONS = [
    {"angle": math.pi * 0.23, "offset": CLOUD_OFFSET, "text": "Cloud Cover"},
    {"angle": math.pi * 0.26, "offset": PRECIPITATION_OFFSET, "text": "Precipitation"},
    {
        "angle": math.pi * 0.734,
        "offset": UV_OFFSET,
        "text": f"UV Index over {UV_INDEX_THRESHOLD}",
    },
    {
        "angle": math.pi * 0.7,
        "offset": TEMPERATURE_ANNOTATION_OFFSET,
        "text": "Temperature",
    },
]
FREEZING_ANNOTATION_ANGLE = math.pi * 0.9
FREEZING_ANNOTATION_TEXT = "Freezing Temperature"
PRECIPITATION_LEGEND_ANGLE = math.pi * 0.26
