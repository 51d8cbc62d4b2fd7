"""
Week-over-week comparison.

Fetches the current and previous rolling 7-day windows concurrently and
returns both rollups paired. The operation is all-or-nothing: if either leg
fails, `ComparisonFailed` is raised and neither dataset is exposed. No delta
arithmetic happens here; that belongs to whoever presents the pair.
"""

import asyncio
import logging
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..analytics.base import BaseAnalyticsClient
from ..analytics.schemas import RollupDataset
from ..dates import DateWindow, this_week_and_last_week
from ..errors import ComparisonFailed, RequestFailed

log = logging.getLogger(__name__)


class WeekComparison(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    current: RollupDataset
    previous: RollupDataset
    current_range: DateWindow
    previous_range: DateWindow


async def compare_weeks(client: BaseAnalyticsClient, reference_date: Optional[date] = None) -> WeekComparison:
    """
    Fetch this rolling week and the one before it.

    Args:
        client: Any BaseAnalyticsClient.
        reference_date: Last day of the current window; defaults to the local day.

    Raises:
        ComparisonFailed: If either fetch raises RequestFailed.
    """
    windows = this_week_and_last_week(reference_date)
    current, previous = await asyncio.gather(
        client.fetch_range(windows.current.start_date, windows.current.end_date),
        client.fetch_range(windows.previous.start_date, windows.previous.end_date),
        return_exceptions=True,
    )

    for leg, result in (("current", current), ("previous", previous)):
        if isinstance(result, RequestFailed):
            log.warning("Week comparison failed on %s window: %s", leg, result)
            raise ComparisonFailed(f"Failed to fetch week comparison ({leg} window)") from result
        if isinstance(result, BaseException):
            raise result

    return WeekComparison(
        current=current,
        previous=previous,
        current_range=windows.current,
        previous_range=windows.previous,
    )
