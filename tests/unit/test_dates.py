"""
Unit tests for the date-range utility.

Covers:
    - rolling 7-day window boundaries, including month and year rollover
    - today/yesterday strings from an explicit reference day
    - canonical parsing and month extraction
"""

from datetime import date

import pytest

from jobclick_dashboard.dates import (
    format_date,
    month_of,
    parse_date,
    this_week_and_last_week,
    today,
    yesterday,
)
from jobclick_dashboard.errors import ValidationFailed


def test_rolling_weeks_exact_boundaries():
    windows = this_week_and_last_week(date(2025, 12, 8))
    assert (windows.current.start_date, windows.current.end_date) == ("2025-12-02", "2025-12-08")
    assert (windows.previous.start_date, windows.previous.end_date) == ("2025-11-25", "2025-12-01")


def test_rolling_weeks_cross_year_boundary():
    windows = this_week_and_last_week(date(2025, 1, 3))
    assert windows.current.start_date == "2024-12-28"
    assert windows.previous.start_date == "2024-12-21"
    assert windows.previous.end_date == "2024-12-27"


def test_rolling_weeks_leap_day():
    windows = this_week_and_last_week(date(2024, 3, 1))
    assert windows.current.start_date == "2024-02-24"
    assert windows.previous.end_date == "2024-02-23"


def test_today_and_yesterday_use_reference_date():
    ref = date(2025, 3, 1)
    assert today(ref) == "2025-03-01"
    assert yesterday(ref) == "2025-02-28"


def test_format_date_zero_pads():
    assert format_date(date(2025, 1, 5)) == "2025-01-05"


def test_parse_date_round_trips_canonical_string():
    assert parse_date("2025-12-08") == date(2025, 12, 8)


@pytest.mark.parametrize("bad", ["", "2025-13-01", "08/12/2025", "2025-02-30"])
def test_parse_date_rejects_malformed(bad):
    with pytest.raises(ValidationFailed):
        parse_date(bad)


def test_month_of_reference():
    assert month_of(date(2025, 12, 31)) == (2025, 12)
