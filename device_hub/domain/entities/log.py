"""
Per-device activity log.
"""
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Deque, List


DEFAULT_LOG_CAPACITY = 100


class LogAction(str, Enum):
    """Actions recorded in a device log."""
    REGISTERED = "REGISTERED"
    UPDATED = "UPDATED"
    TELEMETRY = "TELEMETRY"


@dataclass(frozen=True)
class LogEntry:
    """A single immutable log record."""
    timestamp: datetime
    action: LogAction
    details: str

    @classmethod
    def registered(cls, timestamp: datetime) -> "LogEntry":
        return cls(timestamp, LogAction.REGISTERED, "Device registered successfully")

    @classmethod
    def updated(cls, timestamp: datetime) -> "LogEntry":
        return cls(timestamp, LogAction.UPDATED, "Device information updated")

    @classmethod
    def telemetry(cls, timestamp: datetime) -> "LogEntry":
        return cls(timestamp, LogAction.TELEMETRY, "Telemetry data received")


class BoundedLog:
    """
    Fixed-capacity, append-only log.

    Once full, each append evicts the oldest entry, so the log always holds
    the ``capacity`` most recent entries in oldest-to-newest order.
    """

    def __init__(self, capacity: int = DEFAULT_LOG_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen

    def append(self, entry: LogEntry) -> None:
        self._entries.append(entry)

    def entries(self) -> List[LogEntry]:
        """Return current contents, oldest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
