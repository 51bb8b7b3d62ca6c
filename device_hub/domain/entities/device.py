"""
Device domain entities.

A device carries identity, descriptive attributes, an operator-visible
status and the latest telemetry snapshot.
"""
import copy
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class DeviceStatus(str, Enum):
    """Operator-visible device status."""
    ONLINE = "online"
    OFFLINE = "offline"
    WARNING = "warning"


class DeviceType(str, Enum):
    """Known device categories. The set is open: other strings are accepted."""
    SENSOR = "sensor"
    ACTUATOR = "actuator"
    GATEWAY = "gateway"
    CONTROLLER = "controller"


@dataclass
class TelemetrySnapshot:
    """Latest known readings of a device."""
    temperature: Optional[float] = None     # degrees C
    humidity: Optional[float] = None        # percent
    battery: float = 100                    # percent, 0-100
    signal_strength: Optional[float] = None


@dataclass(frozen=True)
class TelemetryReading:
    """
    An incoming telemetry reading.

    ``None`` means the field was not part of the reading. Absent fields leave
    the stored snapshot value untouched.
    """
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    battery: Optional[float] = None
    signal_strength: Optional[float] = None

    def apply_to(self, snapshot: TelemetrySnapshot) -> TelemetrySnapshot:
        """Overwrite the fields present in this reading. Mutates and returns ``snapshot``."""
        if self.temperature is not None:
            snapshot.temperature = self.temperature
        if self.humidity is not None:
            snapshot.humidity = self.humidity
        if self.battery is not None:
            snapshot.battery = self.battery
        if self.signal_strength is not None:
            snapshot.signal_strength = self.signal_strength
        return snapshot


@dataclass(frozen=True)
class DevicePatch:
    """
    Partial update of the user-editable device attributes.

    Only name, location, status and metadata can be changed after
    registration; ``None`` means "keep the current value".
    """
    name: Optional[str] = None
    location: Optional[str] = None
    status: Optional[DeviceStatus] = None
    metadata: Optional[Dict[str, Any]] = None

    def apply_to(self, device: "Device") -> "Device":
        """Overwrite the supplied attributes on ``device``. Mutates and returns it."""
        if self.name is not None:
            device.name = self.name
        if self.location is not None:
            device.location = self.location
        if self.status is not None:
            device.status = DeviceStatus(self.status)
        if self.metadata is not None:
            device.metadata = copy.deepcopy(self.metadata)
        return device


@dataclass
class Device:
    """
    A registered device.

    ``id`` and ``registered_at`` are fixed at registration. ``last_seen``
    only moves forward.
    """
    id: str
    name: str
    type: str
    location: str
    registered_at: datetime
    last_seen: datetime
    status: DeviceStatus = DeviceStatus.ONLINE
    metadata: Dict[str, Any] = field(default_factory=dict)
    telemetry: TelemetrySnapshot = field(default_factory=TelemetrySnapshot)

    def touch(self, seen_at: datetime) -> None:
        """Record activity at ``seen_at`` without moving ``last_seen`` backwards."""
        if seen_at > self.last_seen:
            self.last_seen = seen_at

    def mark_online(self) -> None:
        """Telemetry receipt counts as a liveness signal."""
        self.status = DeviceStatus.ONLINE
