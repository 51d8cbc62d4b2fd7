"""
View model handed to the presentation and export layers.

Consumers must treat every list and map as a read-only snapshot.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..analytics.schemas import MetricPair, TopPerformer
from .time_range import TimeRange


class _ViewRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class TrendPoint(_ViewRecord):
    date: str
    total_clicks: int


class Drilldown(_ViewRecord):
    """Breakdowns and top performers; always resolved together from one source."""

    location_breakdown: Dict[str, int] = {}
    job_title_breakdown: Dict[str, int] = {}
    top_performers: List[TopPerformer] = []


class ViewModel(_ViewRecord):
    selected_range: TimeRange
    totals: MetricPair
    top_performers: List[TopPerformer] = []
    location_breakdown: Dict[str, int] = {}
    job_title_breakdown: Dict[str, int] = {}
    trend_series: List[TrendPoint] = []
