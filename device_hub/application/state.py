"""
Owned in-memory state of the hub.

One HubState is built at process start and handed to every service. All
reads and writes of the device map, the per-device logs, the alert sink and
the status counters happen while holding ``lock``.
"""
import logging
import threading
from typing import Dict, Optional

from ..config import HubSettings
from ..domain.entities import (
    AlertSink,
    BoundedLog,
    Clock,
    Device,
    IdGenerator,
    LogEntry,
    StatusCounters,
)
from ..domain.exceptions import DeviceNotFoundException

logger = logging.getLogger(__name__)


class HubState:
    """Registry, logs, alerts and counters behind a single mutex."""

    def __init__(
        self,
        settings: Optional[HubSettings] = None,
        clock: Optional[Clock] = None,
        id_generator: Optional[IdGenerator] = None,
    ):
        self.settings = settings or HubSettings()
        self.clock = clock or Clock()
        self.ids = id_generator or IdGenerator()
        self.lock = threading.RLock()

        # dicts keep insertion order, which is registration order
        self.devices: Dict[str, Device] = {}
        self.logs: Dict[str, BoundedLog] = {}
        self.alerts = AlertSink(self.clock, self.ids, self.settings.alert_capacity)
        self.counters = StatusCounters()

    def require_device(self, device_id: str) -> Device:
        """
        Look up a live device.

        Raises:
            DeviceNotFoundException: The id is not registered.
        """
        device = self.devices.get(device_id)
        if device is None:
            logger.warning(f"Device {device_id} not found")
            raise DeviceNotFoundException(device_id)
        return device

    def add_device(self, device: Device) -> None:
        self.devices[device.id] = device
        self.logs[device.id] = BoundedLog(self.settings.log_capacity)

    def remove_device(self, device_id: str) -> None:
        """Drop a device together with its log."""
        del self.devices[device_id]
        self.logs.pop(device_id, None)

    def append_log(self, device_id: str, entry: LogEntry) -> None:
        self.logs[device_id].append(entry)
