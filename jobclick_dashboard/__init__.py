"""
jobclick_dashboard package initializer.
"""

from . import analytics
from . import comparison
from . import dates
from . import manager
from . import resolver

__all__ = ["analytics", "comparison", "dates", "manager", "resolver"]
