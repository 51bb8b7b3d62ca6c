"""
API Version 1 routes for Device Hub.

Includes device management, telemetry ingestion, alerts and system status.
"""
from fastapi import APIRouter

from .devices import router as devices_router
from .alerts import router as alerts_router
from .status import router as status_router

# Main API router that includes all sub-routers
api_router = APIRouter()

api_router.include_router(devices_router)
api_router.include_router(alerts_router)
api_router.include_router(status_router)

__all__ = [
    "api_router",
    "devices_router",
    "alerts_router",
    "status_router",
]
