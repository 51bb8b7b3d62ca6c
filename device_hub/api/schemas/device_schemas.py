"""
Pydantic schemas for device API endpoints.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from .base import CamelModel, EnvelopeResponse
from .telemetry_schemas import TelemetryResponse
from ...domain.entities import DevicePatch, DeviceStatus, LogAction


class DeviceRegisterRequest(CamelModel):
    """Request to register a device. Every field is optional."""
    name: Optional[str] = None
    type: Optional[str] = None
    location: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class DeviceUpdateRequest(CamelModel):
    """Request to update device properties."""
    name: Optional[str] = None
    location: Optional[str] = None
    status: Optional[DeviceStatus] = None
    metadata: Optional[Dict[str, Any]] = None

    def to_patch(self) -> DevicePatch:
        return DevicePatch(
            name=self.name,
            location=self.location,
            status=self.status,
            metadata=self.metadata,
        )


class DeviceResponse(CamelModel):
    """Response for device information."""
    id: str
    name: str
    type: str
    location: str
    status: DeviceStatus
    last_seen: datetime
    registered_at: datetime
    metadata: Dict[str, Any]
    telemetry: TelemetryResponse


class LogEntryResponse(CamelModel):
    """Response for a device log entry."""
    timestamp: datetime
    action: LogAction
    details: str


class StatusCountersResponse(CamelModel):
    """Device counts by status."""
    online: int
    offline: int
    warning: int


class DeviceEnvelope(EnvelopeResponse):
    """Response for register and update."""
    device: DeviceResponse
    message: str


class DeviceDetailResponse(EnvelopeResponse):
    """Response for a single device with its log."""
    device: DeviceResponse
    logs: List[LogEntryResponse]


class DeviceListResponse(EnvelopeResponse):
    """Response for device list."""
    devices: List[DeviceResponse]
    count: int
    status: StatusCountersResponse


class DeviceLogsResponse(EnvelopeResponse):
    """Response for a device log."""
    logs: List[LogEntryResponse]
