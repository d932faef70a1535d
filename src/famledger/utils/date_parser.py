"""Date and month parsing utilities."""

from datetime import date, datetime, timedelta
import re

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from famledger.domain.errors import InvalidInputError

_MONTH_RE = re.compile(r"^(\d{4})-(\d{1,2})$")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        InvalidInputError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # Parse against two different defaults: a field that comes out different
    # was filled in from the default rather than read from the input
    try:
        first = date_parser.parse(date_str, default=datetime(today.year, 1, 1))
        second = date_parser.parse(date_str, default=datetime(today.year, 2, 2))
    except (ValueError, TypeError, OverflowError) as e:
        raise InvalidInputError(f"Could not parse date '{date_str}': {e}")

    if (first.month, first.day) != (second.month, second.day):
        raise InvalidInputError(f"Could not parse date '{date_str}': missing month or day")
    return first.date()


def parse_month(month_str: str) -> tuple[int, int]:
    """Parse a "YYYY-MM" month string.

    "this" and "last" are accepted as shortcuts for the current and the
    previous month.

    Returns:
        Tuple of (year, month)

    Raises:
        InvalidInputError: If month string is not a valid month
    """
    month_str = month_str.strip().lower()
    if month_str in ("this", "this-month"):
        return current_month()
    if month_str in ("last", "last-month"):
        return shift_month(current_month(), -1)

    match = _MONTH_RE.match(month_str)
    if match is None:
        raise InvalidInputError(f"Invalid month '{month_str}'. Expected YYYY-MM")
    return validate_month((int(match.group(1)), int(match.group(2))))


def validate_month(month: tuple[int, int]) -> tuple[int, int]:
    """Check that a (year, month) pair names a real calendar month.

    Raises:
        InvalidInputError: If the year or month number is out of range
    """
    year, number = month
    if not 1 <= year <= 9999 or not 1 <= number <= 12:
        raise InvalidInputError(f"Invalid month '{year:04d}-{number:02d}'. Expected YYYY-MM")
    return year, number


def resolve_month(month) -> tuple[int, int]:
    """Accept either a "YYYY-MM" string or a (year, month) pair."""
    if isinstance(month, str):
        return parse_month(month)
    return validate_month(tuple(month))


def month_bounds(month: tuple[int, int]) -> tuple[date, date]:
    """Return the first and last day of a (year, month) pair."""
    first = date(*validate_month(month), 1)
    return first, first + relativedelta(months=1, days=-1)


def current_month() -> tuple[int, int]:
    """Return (year, month) for today."""
    today = date.today()
    return today.year, today.month


def shift_month(month: tuple[int, int], increment: int) -> tuple[int, int]:
    """Move a (year, month) pair by a number of months."""
    shifted = date(month[0], month[1], 1) + relativedelta(months=increment)
    return shifted.year, shifted.month


def month_key(month: tuple[int, int]) -> str:
    """Render (year, month) as "YYYY-MM"."""
    return f"{month[0]:04d}-{month[1]:02d}"


def month_label(month: tuple[int, int]) -> str:
    """Render (year, month) as a human label such as "March 2024"."""
    return date(month[0], month[1], 1).strftime("%B %Y")


def add_months(start: date, months: int) -> date:
    """Add calendar months to a date.

    When the target month is shorter than the start day, the result is
    clamped to the target month's last day (Jan 31 + 1 month is Feb 28 or
    Feb 29). Offsets are always taken from ``start``, so a later month that
    has the day again gets it back.
    """
    return start + relativedelta(months=months)
