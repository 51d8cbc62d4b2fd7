"""
Date-range utility.

Responsibilities:
    - Canonical "YYYY-MM-DD" formatting and parsing
    - Today / yesterday strings for a reference day
    - Rolling 7-day "this week" / "last week" window pairs

Design notes:
    - Days follow the caller's local calendar (`date.today()`); there is no
      timezone normalization.
    - Every helper takes an explicit `reference_date`. Only the outermost
      caller should let it default to the local day.
    - Weeks are rolling windows anchored on the reference day, not calendar
      weeks: current = [ref-6, ref], previous = [ref-13, ref-7].
"""

from datetime import date, datetime, timedelta
from typing import NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..errors import ValidationFailed

DATE_FORMAT = "%Y-%m-%d"
WEEK_LENGTH_DAYS = 7


class DateWindow(BaseModel):
    """Inclusive span of calendar days, both ends as YYYY-MM-DD strings."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    start_date: str
    end_date: str


class WeekWindows(NamedTuple):
    current: DateWindow
    previous: DateWindow


def local_today() -> date:
    return date.today()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def parse_date(value: str) -> date:
    """
    Parse a canonical YYYY-MM-DD string.

    Raises:
        ValidationFailed: If the value is empty or not a valid calendar day.
    """
    if not value:
        raise ValidationFailed("Date is required")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationFailed(f"Invalid date {value!r}; expected YYYY-MM-DD") from None


def today(reference_date: Optional[date] = None) -> str:
    return format_date(reference_date or local_today())


def yesterday(reference_date: Optional[date] = None) -> str:
    ref = reference_date or local_today()
    return format_date(ref - timedelta(days=1))


def month_of(reference_date: Optional[date] = None) -> Tuple[int, int]:
    """Return (year, month) with month in 1..12."""
    ref = reference_date or local_today()
    return ref.year, ref.month


def this_week_and_last_week(reference_date: Optional[date] = None) -> WeekWindows:
    """
    Compute the current and previous rolling 7-day windows.

    Example:
        >>> this_week_and_last_week(date(2025, 12, 8)).current.start_date
        '2025-12-02'
    """
    current_end = reference_date or local_today()
    current_start = current_end - timedelta(days=WEEK_LENGTH_DAYS - 1)
    previous_end = current_start - timedelta(days=1)
    previous_start = previous_end - timedelta(days=WEEK_LENGTH_DAYS - 1)
    return WeekWindows(
        current=DateWindow(start_date=format_date(current_start), end_date=format_date(current_end)),
        previous=DateWindow(start_date=format_date(previous_start), end_date=format_date(previous_end)),
    )
