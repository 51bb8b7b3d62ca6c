"""
Domain entities for Device Hub.
"""
from .base import Clock, IdGenerator, utc_now
from .device import (
    DeviceStatus,
    DeviceType,
    TelemetrySnapshot,
    TelemetryReading,
    DevicePatch,
    Device,
)
from .log import (
    DEFAULT_LOG_CAPACITY,
    LogAction,
    LogEntry,
    BoundedLog,
)
from .alert import (
    DEFAULT_ALERT_CAPACITY,
    AlertSeverity,
    Alert,
    AlertSink,
)
from .status import (
    StatusCounters,
    SystemStatus,
)

__all__ = [
    # Base
    "Clock",
    "IdGenerator",
    "utc_now",
    # Device
    "DeviceStatus",
    "DeviceType",
    "TelemetrySnapshot",
    "TelemetryReading",
    "DevicePatch",
    "Device",
    # Log
    "DEFAULT_LOG_CAPACITY",
    "LogAction",
    "LogEntry",
    "BoundedLog",
    # Alert
    "DEFAULT_ALERT_CAPACITY",
    "AlertSeverity",
    "Alert",
    "AlertSink",
    # Status
    "StatusCounters",
    "SystemStatus",
]
