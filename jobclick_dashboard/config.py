"""
Runtime configuration for the Job Click Dashboard
=================================================

Simple settings module that reads from environment variables (only here),
and exposes a stable `settings` object for the rest of the codebase.
Avoid reading env vars anywhere else; import from this module instead.
The one exception is `analytics.client_factory.get_client`, which re-reads
the base URL at call time so tests can monkeypatch it.

Remote analytics service
------------------------
- JOBCLICK_API_BASE_URL     : base address of the aggregation service
                              (default "https://jobs.api.mastaskillz.com")
- JOBCLICK_REQUEST_TIMEOUT  : per-request timeout in seconds; default 10; clamped to [1, 120]

Session
-------
- JOBCLICK_DEFAULT_RANGE    : preset selected when a session starts; one of
                              "today", "yesterday", "thisWeek" (default), "thisMonth"

Logging
-------
- JOBCLICK_LOG_LEVEL        : root level applied by the app factory (default "INFO")
"""

import os

DEFAULT_API_BASE_URL = "https://jobs.api.mastaskillz.com"

_PRESET_RANGES = ("today", "yesterday", "thisWeek", "thisMonth")


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name, str(default))
    try:
        return float(raw)
    except ValueError:
        return default


def _get_range(name: str, default: str) -> str:
    raw = os.getenv(name, default).strip()
    return raw if raw in _PRESET_RANGES else default


class _Settings:
    # -------- Remote service --------
    API_BASE_URL: str = os.getenv("JOBCLICK_API_BASE_URL", DEFAULT_API_BASE_URL).strip().rstrip("/")

    _timeout_raw = _get_float("JOBCLICK_REQUEST_TIMEOUT", 10.0)
    REQUEST_TIMEOUT: float = max(1.0, min(120.0, _timeout_raw))

    # -------- Session --------
    DEFAULT_RANGE: str = _get_range("JOBCLICK_DEFAULT_RANGE", "thisWeek")

    # -------- Logging --------
    LOG_LEVEL: str = os.getenv("JOBCLICK_LOG_LEVEL", "INFO").strip().upper()


settings = _Settings()
