"""
Pydantic schemas for the system status endpoint.
"""
from datetime import datetime

from .base import EnvelopeResponse
from .device_schemas import StatusCountersResponse


class SystemStatusResponse(EnvelopeResponse):
    """Response for system status."""
    status: str
    device_count: int
    device_status: StatusCountersResponse
    alert_count: int
    timestamp: datetime
