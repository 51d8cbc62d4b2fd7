"""Calendar-day helpers shared by the resolver, the manager and the comparison engine."""

from .ranges import (
    DateWindow,
    WeekWindows,
    format_date,
    local_today,
    month_of,
    parse_date,
    this_week_and_last_week,
    today,
    yesterday,
)

__all__ = [
    "DateWindow",
    "WeekWindows",
    "format_date",
    "local_today",
    "month_of",
    "parse_date",
    "this_week_and_last_week",
    "today",
    "yesterday",
]
