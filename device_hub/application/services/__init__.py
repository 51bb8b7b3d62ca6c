# Application Services - Device registry, telemetry, alerts, status

from .status_service import StatusService
from .device_service import DeviceService
from .telemetry_service import TelemetryService
from .alert_service import AlertService

__all__ = [
    "StatusService",
    "DeviceService",
    "TelemetryService",
    "AlertService",
]
