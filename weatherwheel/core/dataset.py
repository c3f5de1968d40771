"""
dataset.py

Loading and validation of the daily weather document.

The input is a JSON array of objects with camelCase keys (``date``,
``temperatureMin``, ``temperatureMax``, ``uvIndex``, ``precipProbability``,
``precipType``, ``cloudCover``). A record with a missing or malformed field
rejects the whole load: a partial chart is never drawn.
"""

import json
import math
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

import pandas as pd
import requests

from weatherwheel import config
from weatherwheel.core.errors import DataLoadError, InvalidFieldError, RecordNotFound
from weatherwheel.models.weather import WeatherRecord
from weatherwheel.utils.date_util import to_date
from weatherwheel.utils.log_util import app_logger

logger = app_logger(__name__)

NUMERIC_FIELDS = {
    "temperatureMin": "temperature_min",
    "temperatureMax": "temperature_max",
    "uvIndex": "uv_index",
    "precipProbability": "precip_probability",
    "cloudCover": "cloud_cover",
}


class Dataset:
    """
    Immutable, chronologically ordered collection of weather records.

    Lookup is by exact ``YYYY-MM-DD`` string. When two records share a date
    the first one loaded wins.
    """

    def __init__(self, records: Iterable[WeatherRecord]):
        ordered = sorted(records, key=lambda r: r.date)
        index: Dict[str, WeatherRecord] = {}
        for record in ordered:
            key = record.date_string
            if key in index:
                logger.warning(f"Duplicate record for {key}; keeping the first one")
                continue
            index[key] = record
        self._records = tuple(ordered)
        self._index = index

    @property
    def records(self) -> tuple:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[WeatherRecord]:
        return iter(self._records)

    def __getitem__(self, item) -> WeatherRecord:
        return self._records[item]

    def find(self, date_string: str, strict: bool = False) -> Optional[WeatherRecord]:
        """
        Find the record for an exact date string.

        :param date_string: Date in ``YYYY-MM-DD`` format
        :param strict: Raise RecordNotFound instead of returning None
        :return: Matching record or None
        """
        record = self._index.get(date_string)
        if record is None and strict:
            raise RecordNotFound(date_string)
        return record

    def to_frame(self) -> pd.DataFrame:
        """Records as a DataFrame indexed by date, for tabular display."""
        if not self._records:
            return pd.DataFrame()
        df = pd.DataFrame([vars(r) for r in self._records])
        df["date"] = pd.to_datetime(df["date"])
        return df.set_index("date")


def _parse_number(raw: dict, key: str, index: int) -> float:
    if key not in raw or raw[key] is None:
        raise InvalidFieldError(index, key, "is missing")
    value = raw[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidFieldError(index, key, f"is not a number: {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidFieldError(index, key, "is not finite")
    return value


def parse_record(raw: dict, index: int = 0) -> WeatherRecord:
    """
    Build a WeatherRecord from one JSON object.

    :param raw: Decoded JSON object
    :param index: Position in the document, used in error messages
    :return: WeatherRecord
    :raises InvalidFieldError: on a missing or malformed field
    """
    if not isinstance(raw, dict):
        raise InvalidFieldError(index, "<record>", f"is not an object: {type(raw).__name__}")

    if "date" not in raw or not raw["date"]:
        raise InvalidFieldError(index, "date", "is missing")
    try:
        date = to_date(raw["date"])
    except ValueError:
        raise InvalidFieldError(index, "date", f"is not an ISO date: {raw['date']!r}")

    values = {attr: _parse_number(raw, key, index) for key, attr in NUMERIC_FIELDS.items()}
    if values["temperature_min"] > values["temperature_max"]:
        raise InvalidFieldError(index, "temperatureMin", "is greater than temperatureMax")

    precip_type = raw.get("precipType") or None
    if precip_type is not None and not isinstance(precip_type, str):
        raise InvalidFieldError(index, "precipType", f"is not a string: {precip_type!r}")

    return WeatherRecord(date=date, precip_type=precip_type, **values)


def parse_records(document) -> Dataset:
    """
    Validate a decoded JSON document and build a Dataset.

    :param document: Decoded JSON (expected: list of objects)
    :return: Dataset
    :raises DataLoadError: if the document is not a list
    :raises InvalidFieldError: if any record is malformed
    """
    if not isinstance(document, list):
        raise DataLoadError(f"Expected a JSON array of records, got {type(document).__name__}")
    records: List[WeatherRecord] = [parse_record(raw, i) for i, raw in enumerate(document)]
    return Dataset(records)


def _read_document(source: Union[str, Path]):
    source_str = str(source)
    if source_str.startswith(("http://", "https://")):
        logger.info(f"Fetching weather data from {source_str}")
        try:
            response = requests.get(source_str, timeout=config.HTTP_TIMEOUT_SECONDS)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise DataLoadError(f"Failed to fetch {source_str}: {e}") from e
        except ValueError as e:
            raise DataLoadError(f"Invalid JSON from {source_str}: {e}") from e

    path = Path(source)
    logger.info(f"Reading weather data from {path}")
    if not path.is_file():
        raise DataLoadError(f"Data file not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DataLoadError(f"Failed to read {path}: {e}") from e


def load_dataset(source: Union[str, Path, None] = None) -> Dataset:
    """
    Load the daily weather document from a path or an HTTP(S) URL.

    :param source: File path or URL; defaults to the bundled sample data
    :return: Dataset (possibly empty; emptiness is checked when scales are built)
    :raises DataLoadError: on a missing, unreachable or malformed document
    :raises InvalidFieldError: if any record is malformed
    """
    if source is None:
        source = config.DEFAULT_DATA_FILE
    try:
        dataset = parse_records(_read_document(source))
    except (DataLoadError, InvalidFieldError) as e:
        logger.error(f"❌ Failed to load weather data from {source}: {e}")
        raise
    logger.info(f"Loaded {len(dataset)} weather records from {source}")
    return dataset
