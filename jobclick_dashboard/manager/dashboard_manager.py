"""
DashboardManager: one viewer's dashboard session.

Responsibilities:
    - Own the four dataset slots (summary, weekly, monthly, custom range)
    - Load summary/weekly/monthly concurrently, each slot applied independently
    - Track the selected preset range and the custom-range state machine
    - Resolve the current view model and run week-over-week comparisons

Custom range state machine:
    INACTIVE --(valid start <= end, fetch succeeds)--> ACTIVE
    ACTIVE   --(clear, or a preset range is selected)--> INACTIVE
    Validation failures never touch the network. A failed fetch leaves the
    session INACTIVE with a message kept until the next attempt or until a
    preset is chosen.

Failure policy:
    Slot fetch failures are logged and recorded on the slot, never raised,
    so the view renders whatever subset did load. Validation and comparison
    failures are raised to the caller.
"""

import asyncio
import logging
from datetime import date
from enum import Enum
from typing import Awaitable, Callable, Dict, Optional, Union

from ..analytics.base import BaseAnalyticsClient
from ..analytics.schemas import RollupDataset, SummaryDataset
from ..comparison.engine import WeekComparison, compare_weeks
from ..dates import DateWindow, local_today, month_of, parse_date
from ..errors import RequestFailed, ValidationFailed
from ..resolver.resolver import resolve
from ..resolver.time_range import TimeRange
from ..resolver.view_model import ViewModel
from .slots import DatasetSlot

log = logging.getLogger(__name__)

MISSING_DATES_MESSAGE = "Please select both start and end dates."
DATE_ORDER_MESSAGE = "Start date cannot be after end date."
CUSTOM_FETCH_MESSAGE = "Could not load range data. Please try again."


class CustomRangeState(str, Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"


class DashboardManager:
    """
    Coordinates dataset loading, range selection and resolution for a session.
    """

    def __init__(
        self,
        client: BaseAnalyticsClient,
        default_range: Union[TimeRange, str] = TimeRange.THIS_WEEK,
        clock: Callable[[], date] = local_today,
    ):
        """
        Args:
            client (BaseAnalyticsClient): Source of all datasets.
            default_range (TimeRange | str): Preset selected at session start.
            clock (Callable[[], date]): Supplies the local day when a caller
                does not pass an explicit reference date.
        """
        preset = default_range if isinstance(default_range, TimeRange) else TimeRange.parse(default_range)
        if not preset.is_preset:
            raise ValidationFailed("Default range must be a preset range")

        self.client = client
        self.clock = clock
        self.preset_range = preset

        self.summary: DatasetSlot[SummaryDataset] = DatasetSlot("summary")
        self.weekly: DatasetSlot[RollupDataset] = DatasetSlot("weekly")
        self.monthly: DatasetSlot[RollupDataset] = DatasetSlot("monthly")
        self.custom: DatasetSlot[RollupDataset] = DatasetSlot("custom")

        self.custom_state = CustomRangeState.INACTIVE
        self.custom_window: Optional[DateWindow] = None
        self.custom_error: Optional[str] = None

    # ---------------------------------------------------------------------
    # Loading
    # ---------------------------------------------------------------------
    async def _load_slot(self, slot: DatasetSlot, fetch: Callable[[], Awaitable]) -> bool:
        token = slot.begin()
        try:
            value = await fetch()
        except RequestFailed as exc:
            log.warning("Could not load %s analytics: %s", slot.name, exc)
            slot.fail(token, str(exc))
            return False
        return slot.apply(token, value)

    async def load_initial(self, reference_date: Optional[date] = None) -> Dict[str, bool]:
        """
        Fetch summary, weekly and monthly data concurrently.

        Each slot applies its own result as soon as it completes; one slow or
        failed fetch does not hold back the others.

        Returns:
            Dict[str, bool]: slot name -> whether this call's result was applied.
        """
        year, month = month_of(reference_date or self.clock())
        results = await asyncio.gather(
            self._load_slot(self.summary, self.client.fetch_summary),
            self._load_slot(self.weekly, self.client.fetch_weekly),
            self._load_slot(self.monthly, lambda: self.client.fetch_monthly(year, month)),
        )
        return dict(zip(("summary", "weekly", "monthly"), results))

    # ---------------------------------------------------------------------
    # Range selection
    # ---------------------------------------------------------------------
    @property
    def selected_range(self) -> TimeRange:
        if self.custom_state is CustomRangeState.ACTIVE:
            return TimeRange.CUSTOM_RANGE
        return self.preset_range

    def select_range(self, time_range: Union[TimeRange, str]) -> TimeRange:
        """
        Select a preset range card; exits custom-range mode.

        Raises:
            ValidationFailed: Unknown id, or CUSTOM_RANGE (use apply_custom_range).
        """
        selected = time_range if isinstance(time_range, TimeRange) else TimeRange.parse(time_range)
        if not selected.is_preset:
            raise ValidationFailed("Custom ranges are selected by applying start and end dates")
        self.clear_custom_range()
        self.preset_range = selected
        return selected

    def _validate_window(self, start_date: Optional[str], end_date: Optional[str]) -> DateWindow:
        if not start_date or not end_date:
            raise ValidationFailed(MISSING_DATES_MESSAGE)
        if parse_date(start_date) > parse_date(end_date):
            raise ValidationFailed(DATE_ORDER_MESSAGE)
        return DateWindow(start_date=start_date, end_date=end_date)

    async def apply_custom_range(self, start_date: Optional[str], end_date: Optional[str]) -> bool:
        """
        Validate the dates, fetch the range rollup and activate custom mode.

        Returns:
            bool: True if this request's result was applied (False when a newer
            request superseded it while in flight).

        Raises:
            ValidationFailed: Missing, malformed or out-of-order dates (no fetch issued).
            RequestFailed: The range fetch failed; session is left INACTIVE.
        """
        self.custom_error = None
        try:
            window = self._validate_window(start_date, end_date)
        except ValidationFailed as exc:
            self.custom_error = exc.reason
            raise

        token = self.custom.begin()
        try:
            data = await self.client.fetch_range(window.start_date, window.end_date)
        except RequestFailed as exc:
            log.warning("Could not load custom range %s..%s: %s", window.start_date, window.end_date, exc)
            if self.custom.is_current(token):
                self.clear_custom_range()
                self.custom_error = CUSTOM_FETCH_MESSAGE
            raise

        if not self.custom.apply(token, data):
            return False
        self.custom_state = CustomRangeState.ACTIVE
        self.custom_window = window
        return True

    def clear_custom_range(self) -> None:
        """Return to the last chosen preset and drop the custom dataset."""
        self.custom.clear()
        self.custom_state = CustomRangeState.INACTIVE
        self.custom_window = None
        self.custom_error = None

    # ---------------------------------------------------------------------
    # Views
    # ---------------------------------------------------------------------
    def view(self, reference_date: Optional[date] = None) -> ViewModel:
        return resolve(
            self.selected_range,
            self.summary.value,
            self.weekly.value,
            self.monthly.value,
            self.custom.value,
            reference_date=reference_date or self.clock(),
        )

    async def compare_weeks(self, reference_date: Optional[date] = None) -> WeekComparison:
        return await compare_weeks(self.client, reference_date or self.clock())

    def status(self) -> dict:
        window = self.custom_window
        return {
            "selectedRange": self.selected_range.value,
            "presetRange": self.preset_range.value,
            "customRange": {
                "state": self.custom_state.value,
                "startDate": window.start_date if window else None,
                "endDate": window.end_date if window else None,
                "error": self.custom_error,
            },
            "slots": {
                slot.name: slot.status()
                for slot in (self.summary, self.weekly, self.monthly, self.custom)
            },
        }
