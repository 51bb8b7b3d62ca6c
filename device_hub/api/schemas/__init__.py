# Pydantic Schemas for the device hub API

from .base import (
    CamelModel,
    EnvelopeResponse,
    MessageResponse,
)
from .telemetry_schemas import (
    TelemetryIngestRequest,
    TelemetryResponse,
    TelemetryEnvelope,
)
from .device_schemas import (
    DeviceRegisterRequest,
    DeviceUpdateRequest,
    DeviceResponse,
    LogEntryResponse,
    StatusCountersResponse,
    DeviceEnvelope,
    DeviceDetailResponse,
    DeviceListResponse,
    DeviceLogsResponse,
)
from .alert_schemas import (
    AlertResponse,
    AlertListResponse,
)
from .status_schemas import (
    SystemStatusResponse,
)

__all__ = [
    # Base
    "CamelModel",
    "EnvelopeResponse",
    "MessageResponse",
    # Telemetry
    "TelemetryIngestRequest",
    "TelemetryResponse",
    "TelemetryEnvelope",
    # Device
    "DeviceRegisterRequest",
    "DeviceUpdateRequest",
    "DeviceResponse",
    "LogEntryResponse",
    "StatusCountersResponse",
    "DeviceEnvelope",
    "DeviceDetailResponse",
    "DeviceListResponse",
    "DeviceLogsResponse",
    # Alert
    "AlertResponse",
    "AlertListResponse",
    # Status
    "SystemStatusResponse",
]
