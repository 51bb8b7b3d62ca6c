"""
Pydantic schemas for alert API endpoints.
"""
from datetime import datetime
from typing import List

from .base import CamelModel, EnvelopeResponse
from ...domain.entities import AlertSeverity


class AlertResponse(CamelModel):
    """Response for alert information."""
    id: str
    device_id: str
    message: str
    severity: AlertSeverity
    timestamp: datetime
    acknowledged: bool


class AlertListResponse(EnvelopeResponse):
    """Response for alert list, oldest first."""
    alerts: List[AlertResponse]
    count: int
