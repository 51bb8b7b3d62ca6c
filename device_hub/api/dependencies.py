"""
FastAPI dependencies for the Device Hub API.

Provides the shared hub state and service instances via dependency injection.
"""
from fastapi import Depends, Request

from ..application.state import HubState
from ..application.services import (
    AlertService,
    DeviceService,
    StatusService,
    TelemetryService,
)


def get_hub_state(request: Request) -> HubState:
    """Get the hub state created by the application factory."""
    return request.app.state.hub


def get_status_service(state: HubState = Depends(get_hub_state)) -> StatusService:
    """Get status service instance."""
    return StatusService(state)


def get_device_service(
    state: HubState = Depends(get_hub_state),
    status_service: StatusService = Depends(get_status_service),
) -> DeviceService:
    """Get device service instance."""
    return DeviceService(state, status_service)


def get_telemetry_service(
    state: HubState = Depends(get_hub_state),
    status_service: StatusService = Depends(get_status_service),
) -> TelemetryService:
    """Get telemetry service instance."""
    return TelemetryService(state, status_service)


def get_alert_service(state: HubState = Depends(get_hub_state)) -> AlertService:
    """Get alert service instance."""
    return AlertService(state)
