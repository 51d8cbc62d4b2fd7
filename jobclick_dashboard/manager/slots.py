"""
Per-session dataset slots.

A slot holds at most one dataset (present) or nothing (absent), plus the
last error message for its most recent request. Each request takes a token
from `begin()`; only the completion holding the latest token is applied, so
a slow superseded request can never overwrite a newer result.
"""

import logging
from typing import Generic, Optional, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")


class DatasetSlot(Generic[T]):
    def __init__(self, name: str):
        self.name = name
        self.value: Optional[T] = None
        self.error: Optional[str] = None
        self._issued = 0

    @property
    def present(self) -> bool:
        return self.value is not None

    def begin(self) -> int:
        """Reserve a token for a new request; supersedes any in flight."""
        self._issued += 1
        return self._issued

    def is_current(self, token: int) -> bool:
        return token == self._issued

    def apply(self, token: int, value: T) -> bool:
        """Replace the dataset wholesale. Returns False if the token is stale."""
        if not self.is_current(token):
            log.debug("Discarding stale %s result (token %d, latest %d)", self.name, token, self._issued)
            return False
        self.value = value
        self.error = None
        return True

    def fail(self, token: int, error: str) -> bool:
        """Record a failure; the prior dataset (or absence) is left untouched."""
        if not self.is_current(token):
            log.debug("Discarding stale %s failure (token %d, latest %d)", self.name, token, self._issued)
            return False
        self.error = error
        return True

    def clear(self) -> None:
        """Drop the dataset and invalidate anything in flight."""
        self._issued += 1
        self.value = None
        self.error = None

    def status(self) -> dict:
        return {"loaded": self.present, "error": self.error}
