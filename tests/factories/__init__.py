"""
Test data factories for Device Hub.

Provides factory classes for generating API payloads.
"""
from .device_factory import DeviceRegistrationFactory, DeviceUpdateFactory
from .telemetry_factory import (
    TelemetryPayloadFactory,
    LowBatteryPayloadFactory,
    OverheatPayloadFactory,
)

__all__ = [
    "DeviceRegistrationFactory",
    "DeviceUpdateFactory",
    "TelemetryPayloadFactory",
    "LowBatteryPayloadFactory",
    "OverheatPayloadFactory",
]
