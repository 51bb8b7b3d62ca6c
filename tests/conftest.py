"""
Shared pytest fixtures for Device Hub tests.

Provides fixtures for:
- Hub state with a controllable clock
- Application services
- API client (httpx over ASGI)
"""
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio

from device_hub.application.services import (
    AlertService,
    DeviceService,
    StatusService,
    TelemetryService,
)
from device_hub.application.state import HubState
from device_hub.config import AppSettings, HubSettings
from device_hub.domain.entities import Clock


class ManualClock(Clock):
    """Clock whose wall time only moves when a test says so."""

    def __init__(self, start: datetime):
        super().__init__()
        self.current = start

    def _read(self) -> datetime:
        return self.current

    def advance(self, seconds: float = 1) -> None:
        self.current += timedelta(seconds=seconds)

    def rewind(self, seconds: float = 1) -> None:
        self.current -= timedelta(seconds=seconds)


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def hub_settings() -> HubSettings:
    """Hub settings with the standard capacities and thresholds."""
    return HubSettings(
        log_capacity=100,
        alert_capacity=50,
        low_battery_threshold=20,
        high_temperature_threshold=80,
    )


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def state(hub_settings, clock) -> HubState:
    """Fresh hub state for each test."""
    return HubState(hub_settings, clock=clock)


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def status_service(state) -> StatusService:
    return StatusService(state)


@pytest.fixture
def device_service(state, status_service) -> DeviceService:
    return DeviceService(state, status_service)


@pytest.fixture
def telemetry_service(state, status_service) -> TelemetryService:
    return TelemetryService(state, status_service)


@pytest.fixture
def alert_service(state) -> AlertService:
    return AlertService(state)


@pytest.fixture
def registered_device(device_service):
    """A device registered with default fields."""
    return device_service.register_device()


# ============================================================================
# API Client Fixtures
# ============================================================================

@pytest.fixture
def app_settings(hub_settings) -> AppSettings:
    return AppSettings(hub=hub_settings, debug=False, environment="test")


@pytest.fixture
def app(app_settings, state):
    from device_hub.main import create_app

    return create_app(app_settings, state)


@pytest_asyncio.fixture
async def api_client(app):
    """
    Test API client.

    Requests go straight to the ASGI app; no server is started.
    """
    import httpx

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client
