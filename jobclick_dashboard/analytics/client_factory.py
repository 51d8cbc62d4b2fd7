"""
Client factory: build the analytics client from configuration.

- Reads the environment **at call time** to avoid stale values in tests.
- JOBCLICK_API_BASE_URL: service root; falls back to settings.API_BASE_URL.
"""

import logging
import os
from typing import Optional

from ..config import settings
from .client import AnalyticsClient

log = logging.getLogger(__name__)


def get_client(base_url: Optional[str] = None, **kwargs) -> AnalyticsClient:
    """
    Return an AnalyticsClient pointed at the configured deployment.

    Parameters
    ----------
    base_url : str, optional
        Explicit service root. If omitted, reads JOBCLICK_API_BASE_URL.
    kwargs : dict
        Extra args for AnalyticsClient (timeout=..., transport=...).

    Raises
    ------
    ValueError
        If the resolved base URL is blank.
    """
    url = (base_url or os.getenv("JOBCLICK_API_BASE_URL", settings.API_BASE_URL)).strip()
    if not url:
        raise ValueError("API base URL is required (env JOBCLICK_API_BASE_URL)")
    kwargs.setdefault("timeout", settings.REQUEST_TIMEOUT)
    log.info("Analytics service: %s", url)
    return AnalyticsClient(base_url=url, **kwargs)
