"""
Telemetry Service for Device Hub.

Applies incoming readings to device snapshots and raises threshold alerts.
"""
import copy
import logging
from typing import List, Optional, Tuple

from ..state import HubState
from .status_service import StatusService
from ...domain.entities import (
    Alert,
    AlertSeverity,
    LogEntry,
    TelemetryReading,
    TelemetrySnapshot,
)

logger = logging.getLogger(__name__)


def format_reading(value: float) -> str:
    """Render a reading without a trailing ``.0`` for whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class TelemetryService:
    """
    Application service for telemetry ingestion.

    Receiving telemetry is a liveness signal: the device is forced online
    whatever its previous status. Alert rules are stateless, so every
    qualifying reading raises a new alert even if an identical one is still
    unacknowledged.
    """

    def __init__(self, state: HubState, status_service: Optional[StatusService] = None):
        self._state = state
        self._status = status_service or StatusService(state)

    # =========================================================================
    # Ingestion
    # =========================================================================

    def ingest_telemetry(self, device_id: str, reading: TelemetryReading) -> TelemetrySnapshot:
        """
        Ingest a telemetry reading from a device.

        Args:
            device_id: Device id.
            reading: Fields to overwrite on the stored snapshot.

        Returns:
            The device's resulting TelemetrySnapshot.

        Raises:
            DeviceNotFoundException: The id is not registered.
        """
        with self._state.lock:
            device = self._state.require_device(device_id)
            now = self._state.clock.now()

            reading.apply_to(device.telemetry)
            device.touch(now)
            device.mark_online()

            alerts = self.evaluate_alerts(device_id, device.telemetry)

            self._state.append_log(device_id, LogEntry.telemetry(now))
            self._status.recompute()

            logger.debug(f"Telemetry received from {device_id}, {len(alerts)} alert(s) raised")

            return copy.deepcopy(device.telemetry)

    # =========================================================================
    # Alert rules
    # =========================================================================

    def evaluate_alerts(self, device_id: str, snapshot: TelemetrySnapshot) -> List[Alert]:
        """
        Check the alert rules against a snapshot and raise alerts.

        Rules are evaluated in a fixed order and each can fire on the same call:
        low battery first (warning), then high temperature (critical).
        """
        alerts = []
        for message, severity in self._triggered_rules(snapshot):
            alert = self._state.alerts.create(device_id, message, severity)
            logger.info(f"Alert {alert.id} for {device_id} [{severity.value}]: {message}")
            alerts.append(alert)
        return alerts

    def _triggered_rules(self, snapshot: TelemetrySnapshot) -> List[Tuple[str, AlertSeverity]]:
        settings = self._state.settings
        triggered = []

        battery = snapshot.battery
        if battery is not None and battery < settings.low_battery_threshold:
            triggered.append((f"Low battery: {format_reading(battery)}%", AlertSeverity.WARNING))

        # A temperature of exactly 0 counts as "no reading" here.
        temperature = snapshot.temperature
        if temperature and temperature > settings.high_temperature_threshold:
            triggered.append(
                (f"High temperature: {format_reading(temperature)}°C", AlertSeverity.CRITICAL)
            )

        return triggered
