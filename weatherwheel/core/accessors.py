"""
accessors.py

Field extraction over weather records. Scales and geometry read record
values only through these functions.
"""

from typing import Iterable, Optional, Tuple

import numpy as np
import pandas as pd

from weatherwheel.models.weather import WeatherRecord


def date_accessor(record: WeatherRecord) -> pd.Timestamp:
    return pd.Timestamp(record.date)


def temperature_min_accessor(record: WeatherRecord) -> float:
    return record.temperature_min


def temperature_max_accessor(record: WeatherRecord) -> float:
    return record.temperature_max


def uv_accessor(record: WeatherRecord) -> float:
    return record.uv_index


def precipitation_probability_accessor(record: WeatherRecord) -> float:
    return record.precip_probability


def precipitation_type_accessor(record: WeatherRecord) -> Optional[str]:
    return record.precip_type


def cloud_accessor(record: WeatherRecord) -> float:
    return record.cloud_cover


def temperature_values(records: Iterable[WeatherRecord]) -> np.ndarray:
    """Union of every minimum and maximum temperature."""
    records = list(records)
    return np.array(
        [temperature_min_accessor(r) for r in records]
        + [temperature_max_accessor(r) for r in records],
        dtype=float,
    )


def extent(values) -> Tuple[float, float]:
    """
    Minimum and maximum of ``values``, ignoring NaN.

    :param values: Sequence of numbers or timestamps
    :return: (min, max)
    :raises ValueError: if there is nothing to measure
    """
    series = pd.Series(list(values)).dropna()
    if series.empty:
        raise ValueError("Cannot compute the extent of an empty sequence")
    return series.min(), series.max()
