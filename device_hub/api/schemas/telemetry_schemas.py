"""
Pydantic schemas for telemetry API endpoints.
"""
from typing import Optional

from pydantic import Field

from .base import CamelModel, EnvelopeResponse
from ...domain.entities import TelemetryReading


class TelemetryIngestRequest(CamelModel):
    """Telemetry reading pushed by a device. Omitted fields keep their stored value."""
    # Finite numbers only; booleans are not readings.
    temperature: Optional[float] = Field(default=None, strict=True, allow_inf_nan=False)
    humidity: Optional[float] = Field(default=None, strict=True, allow_inf_nan=False)
    battery: Optional[float] = Field(default=None, strict=True, allow_inf_nan=False)
    signal_strength: Optional[float] = Field(default=None, strict=True, allow_inf_nan=False)

    def to_reading(self) -> TelemetryReading:
        return TelemetryReading(
            temperature=self.temperature,
            humidity=self.humidity,
            battery=self.battery,
            signal_strength=self.signal_strength,
        )


class TelemetryResponse(CamelModel):
    """Latest telemetry snapshot of a device."""
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    battery: float
    signal_strength: Optional[float] = None


class TelemetryEnvelope(EnvelopeResponse):
    """Response for telemetry ingestion."""
    telemetry: TelemetryResponse
    message: str
