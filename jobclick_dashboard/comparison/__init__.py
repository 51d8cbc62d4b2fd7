"""Independent read path pairing two adjacent rolling weeks."""

from .engine import WeekComparison, compare_weeks

__all__ = ["WeekComparison", "compare_weeks"]
