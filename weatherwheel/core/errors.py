"""
errors.py

Exception types raised while loading a dataset and building the chart.
They subclass ValueError so callers that already guard bad input with
``except ValueError`` keep working.
"""


class WeatherWheelError(ValueError):
    """Base class for chart errors."""


class DataLoadError(WeatherWheelError):
    """The input document is missing, unreachable or not a list of records."""


class InvalidFieldError(WeatherWheelError):
    """A record is missing a required field or carries a non-numeric value."""

    def __init__(self, index: int, field: str, reason: str):
        self.index = index
        self.field = field
        super().__init__(f"Record {index}: field '{field}' {reason}")


class EmptyDatasetError(WeatherWheelError):
    """The dataset has no records, so no scale domain can be computed."""


class RecordNotFound(LookupError):
    """No record exists for a resolved date. Non-fatal; means 'no tooltip'."""

    def __init__(self, date_string: str):
        self.date_string = date_string
        super().__init__(f"No record for {date_string}")
