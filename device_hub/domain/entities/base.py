"""
Identity and time sources shared by every mutating operation.

These are pure Python classes with no external dependencies.
"""
import threading
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4


def utc_now() -> datetime:
    """Return current UTC timestamp."""
    return datetime.now(timezone.utc)


class Clock:
    """
    Timestamp source that never runs backwards.

    If the wall clock steps back, the last issued timestamp is returned
    again, so ``last_seen`` values derived from it never decrease.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last: Optional[datetime] = None

    def _read(self) -> datetime:
        return utc_now()

    def now(self) -> datetime:
        """Return the current timestamp, clamped to the last one issued."""
        with self._lock:
            current = self._read()
            if self._last is not None and current < self._last:
                current = self._last
            self._last = current
            return current


class IdGenerator:
    """Generates opaque, unique identifiers such as ``device_3f9c...``."""

    def new_id(self, prefix: str) -> str:
        return f"{prefix}_{uuid4().hex}"
