"""Range resolution: selected range + cached datasets -> view model."""

from .jobs import filter_jobs, rank_breakdown, sort_jobs
from .resolver import resolve
from .time_range import PRESET_RANGES, TimeRange
from .view_model import Drilldown, TrendPoint, ViewModel

__all__ = [
    "Drilldown",
    "PRESET_RANGES",
    "TimeRange",
    "TrendPoint",
    "ViewModel",
    "filter_jobs",
    "rank_breakdown",
    "resolve",
    "sort_jobs",
]
