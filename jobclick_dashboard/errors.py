"""
Error taxonomy for the Job Click Dashboard.

- RequestFailed     : transport error, non-2xx status, unparsable body or success=false.
                      Swallowed at the dataset-slot boundary so siblings still render.
- ValidationFailed  : local, pre-network input problems (dates, month, range ids).
- ComparisonFailed  : either leg of the week-over-week fetch failed; no partial result.
"""

from typing import Optional

__all__ = ["DashboardError", "RequestFailed", "ValidationFailed", "ComparisonFailed"]


class DashboardError(Exception):
    """Base class for every error raised by this package."""


class RequestFailed(DashboardError):
    """A read against the remote analytics service did not produce a dataset."""

    def __init__(self, status: Optional[int] = None, reason: str = "Request failed"):
        self.status = status
        self.reason = reason
        label = f"{reason} (status {status})" if status is not None else reason
        super().__init__(label)


class ValidationFailed(DashboardError, ValueError):
    """Input rejected locally; no network call was issued."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class ComparisonFailed(DashboardError):
    """Week-over-week comparison could not be built from both windows."""

    def __init__(self, reason: str = "Failed to fetch week comparison"):
        self.reason = reason
        super().__init__(reason)
