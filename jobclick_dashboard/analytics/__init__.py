"""Remote analytics client and the records it returns."""

from .base import BaseAnalyticsClient
from .client import AnalyticsClient
from .schemas import (
    DailyBreakdown,
    MetricPair,
    MonthSummary,
    RollupDataset,
    SummaryDataset,
    TopPerformer,
    WeekSummary,
)

__all__ = [
    "AnalyticsClient",
    "BaseAnalyticsClient",
    "DailyBreakdown",
    "MetricPair",
    "MonthSummary",
    "RollupDataset",
    "SummaryDataset",
    "TopPerformer",
    "WeekSummary",
]
