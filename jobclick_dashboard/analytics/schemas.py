"""
Typed records for the remote analytics service.

Responsibilities:
    - Mirror the JSON shapes returned by /analytics/summary, /weekly, /monthly, /range
    - Accept the service's camelCase keys while exposing snake_case attributes
    - Treat missing or null collections inside a present dataset as empty

All records are frozen: a dataset is replaced wholesale on refetch, never
mutated in place.
"""

from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

__all__ = [
    "ApiEnvelope",
    "DailyBreakdown",
    "MetricPair",
    "MonthSummary",
    "RollupDataset",
    "SummaryDataset",
    "TopPerformer",
    "WeekSummary",
]

DataT = TypeVar("DataT")


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


def _none_as_empty(value, empty):
    return empty if value is None else value


class MetricPair(_Record):
    """Click and unique-URL counts. `unique_urls <= clicks` is trusted, not enforced."""

    clicks: int = 0
    unique_urls: int = 0


class TopPerformer(_Record):
    short_code: str
    clicks: int = 0
    job_title: str = ""
    location: str = ""
    original_url: str = ""


class DailyBreakdown(_Record):
    date: str
    total_clicks: int = 0
    unique_urls: int = 0
    top_short_codes: List[TopPerformer] = []
    location_breakdown: Dict[str, int] = {}
    job_title_breakdown: Dict[str, int] = {}

    @field_validator("top_short_codes", mode="before")
    @classmethod
    def null_list_as_empty(cls, value):
        return _none_as_empty(value, [])

    @field_validator("location_breakdown", "job_title_breakdown", mode="before")
    @classmethod
    def null_map_as_empty(cls, value):
        return _none_as_empty(value, {})


class RollupDataset(_Record):
    """Shared shape of the weekly, monthly and custom-range rollups."""

    total_clicks: int = 0
    unique_urls: int = 0
    daily_breakdown: List[DailyBreakdown] = []
    top_performers: List[TopPerformer] = []
    location_breakdown: Dict[str, int] = {}
    job_title_breakdown: Dict[str, int] = {}

    @field_validator("daily_breakdown", "top_performers", mode="before")
    @classmethod
    def null_list_as_empty(cls, value):
        return _none_as_empty(value, [])

    @field_validator("location_breakdown", "job_title_breakdown", mode="before")
    @classmethod
    def null_map_as_empty(cls, value):
        return _none_as_empty(value, {})

    def day(self, date: str) -> Optional[DailyBreakdown]:
        """Locate a daily entry by its date value (never by position)."""
        for entry in self.daily_breakdown:
            if entry.date == date:
                return entry
        return None


class WeekSummary(MetricPair):
    top_performers: List[TopPerformer] = []

    @field_validator("top_performers", mode="before")
    @classmethod
    def null_list_as_empty(cls, value):
        return _none_as_empty(value, [])


class MonthSummary(WeekSummary):
    location_breakdown: Optional[Dict[str, int]] = None
    job_title_breakdown: Optional[Dict[str, int]] = None


class SummaryDataset(_Record):
    today: MetricPair = MetricPair()
    yesterday: MetricPair = MetricPair()
    this_week: WeekSummary = WeekSummary()
    this_month: MonthSummary = MonthSummary()

    def for_range(self, key: str) -> MetricPair:
        """
        Return the totals for a preset range id ("today", "yesterday", "thisWeek", "thisMonth").

        Raises:
            KeyError: For any other id.
        """
        periods = {
            "today": self.today,
            "yesterday": self.yesterday,
            "thisWeek": self.this_week,
            "thisMonth": self.this_month,
        }
        return periods[key]


class ApiEnvelope(BaseModel, Generic[DataT]):
    """The `{success, data}` wrapper every endpoint responds with."""

    success: bool = False
    data: Optional[DataT] = None
