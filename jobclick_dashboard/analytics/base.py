"""
Abstract base class for remote analytics clients.

Responsibilities:
    - Define the four read-only queries the dashboard issues
    - Support easy substitution (HTTP client, in-memory fake for tests)

Every method either returns a parsed dataset or raises `RequestFailed`.
Implementations do not retry; retry policy belongs to the caller.
"""

from abc import ABC, abstractmethod

from .schemas import RollupDataset, SummaryDataset

__all__ = ["BaseAnalyticsClient"]


class BaseAnalyticsClient(ABC):
    """Abstract base for pluggable analytics clients."""

    @abstractmethod
    async def fetch_summary(self) -> SummaryDataset:  # pragma: no cover
        """Today / yesterday / this week / this month totals."""
        raise NotImplementedError

    @abstractmethod
    async def fetch_weekly(self) -> RollupDataset:  # pragma: no cover
        """Rollup for the service's current week, with a per-day breakdown."""
        raise NotImplementedError

    @abstractmethod
    async def fetch_monthly(self, year: int, month: int) -> RollupDataset:  # pragma: no cover
        """
        Rollup for one calendar month.

        Args:
            year (int): Four-digit year.
            month (int): Month number, 1..12.
        """
        raise NotImplementedError

    @abstractmethod
    async def fetch_range(self, start_date: str, end_date: str) -> RollupDataset:  # pragma: no cover
        """
        Rollup for an inclusive span of days.

        Args:
            start_date (str): First day, YYYY-MM-DD.
            end_date (str): Last day, YYYY-MM-DD; must not precede start_date.
        """
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release transport resources; no-op by default."""
        return None
