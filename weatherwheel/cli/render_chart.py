#!/usr/bin/env python3
"""
render_chart.py: Render the radial weather chart to a standalone HTML file.

Usage:
    python -m weatherwheel.cli.render_chart [DATA] [--output weather_wheel.html] [--width 600]
"""

import argparse
import sys
from pathlib import Path

from weatherwheel import config
from weatherwheel.core.context import initialize
from weatherwheel.core.dataset import load_dataset
from weatherwheel.core.errors import WeatherWheelError
from weatherwheel.core.radial_viz import create_radial_weather_chart
from weatherwheel.models.weather import Dimensions
from weatherwheel.utils.log_util import app_logger

logger = app_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the radial weather chart")
    parser.add_argument(
        "data",
        nargs="?",
        default=str(config.DEFAULT_DATA_FILE),
        help="Path or URL of the daily weather JSON (default: bundled sample)",
    )
    parser.add_argument(
        "--output", "-o", default="weather_wheel.html", help="HTML file to write"
    )
    parser.add_argument(
        "--width", type=int, default=config.CHART_WIDTH, help="Chart width in pixels"
    )
    parser.add_argument("--title", default=None, help="Optional chart title")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        context = initialize(load_dataset(args.data), Dimensions.from_width(args.width))
    except WeatherWheelError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    fig = create_radial_weather_chart(context, title=args.title)
    output = Path(args.output)
    fig.write_html(output, include_plotlyjs="cdn")
    logger.info(f"Wrote {output}")
    print(f"Chart written to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
