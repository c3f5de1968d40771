import datetime

from dateutil import parser

from weatherwheel.utils.log_util import app_logger

logger = app_logger(__name__)


def to_date(date_string: str) -> datetime.date:
    """
    Convert an ISO ``YYYY-MM-DD`` string to a date.

    :param date_string: str - The date string to parse.
    :return: date - Parsed calendar date.
    :raises: ValueError if the string is not an ISO date.
    """
    try:
        return parser.isoparse(date_string).date()
    except (TypeError, ValueError) as e:
        logger.error(f"Error parsing date string {date_string!r}: {e}")
        raise ValueError(f"Invalid date: {date_string!r}") from e


def format_date(value, fmt: str) -> str:
    """
    Format a date or timestamp, supporting ``%-d`` on every platform.

    :param value: date, datetime or pandas Timestamp
    :param fmt: strftime format
    :return: Formatted string
    """
    if "%-d" in fmt:
        fmt = fmt.replace("%-d", str(value.day))
    return value.strftime(fmt)
