"""Session state: dataset slots, range selection and the custom-range state machine."""

from .dashboard_manager import CustomRangeState, DashboardManager
from .slots import DatasetSlot

__all__ = ["CustomRangeState", "DashboardManager", "DatasetSlot"]
