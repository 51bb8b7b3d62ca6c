"""
Aggregate status value objects.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from .device import Device, DeviceStatus


@dataclass(frozen=True)
class StatusCounters:
    """
    Device counts by status.

    Always derived from the full device set, never patched incrementally,
    so the three counts add up to the number of devices.
    """
    online: int = 0
    offline: int = 0
    warning: int = 0

    @classmethod
    def from_devices(cls, devices: Iterable[Device]) -> "StatusCounters":
        online = offline = warning = 0
        for device in devices:
            if device.status == DeviceStatus.ONLINE:
                online += 1
            elif device.status == DeviceStatus.OFFLINE:
                offline += 1
            elif device.status == DeviceStatus.WARNING:
                warning += 1
        return cls(online=online, offline=offline, warning=warning)

    @property
    def total(self) -> int:
        return self.online + self.offline + self.warning


@dataclass(frozen=True)
class SystemStatus:
    """Point-in-time summary of the whole hub."""
    device_count: int
    counters: StatusCounters
    alert_count: int
    timestamp: datetime
    status: str = "running"
