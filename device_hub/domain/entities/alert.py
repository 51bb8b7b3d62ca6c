"""
Alert entities and the shared alert sink.

Alerts are derived from telemetry threshold crossings. They reference a
device by id only and may outlive it.
"""
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Deque, List

from .base import Clock, IdGenerator
from ..exceptions import AlertNotFoundException


DEFAULT_ALERT_CAPACITY = 50


class AlertSeverity(str, Enum):
    """Alert severity levels."""
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass
class Alert:
    """A threshold alert raised for a device."""
    id: str
    device_id: str
    message: str
    severity: AlertSeverity
    timestamp: datetime
    acknowledged: bool = False

    def acknowledge(self) -> None:
        """Acknowledge this alert. Position and timestamp are unchanged."""
        self.acknowledged = True


class AlertSink:
    """
    Fixed-capacity FIFO collection of alerts shared by all devices.

    Eviction is purely by age: once full, creating an alert drops the
    oldest one whether or not it was acknowledged.
    """

    def __init__(
        self,
        clock: Clock,
        id_generator: IdGenerator,
        capacity: int = DEFAULT_ALERT_CAPACITY,
    ):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._clock = clock
        self._ids = id_generator
        self._alerts: Deque[Alert] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._alerts.maxlen

    def create(self, device_id: str, message: str, severity: AlertSeverity) -> Alert:
        """Create and store a new alert, evicting the oldest if full."""
        alert = Alert(
            id=self._ids.new_id("alert"),
            device_id=device_id,
            message=message,
            severity=AlertSeverity(severity),
            timestamp=self._clock.now(),
        )
        self._alerts.append(alert)
        return alert

    def acknowledge(self, alert_id: str) -> Alert:
        """
        Acknowledge a live alert.

        Raises:
            AlertNotFoundException: No alert with that id is currently held,
                including alerts that have since been evicted.
        """
        for alert in self._alerts:
            if alert.id == alert_id:
                alert.acknowledge()
                return alert
        raise AlertNotFoundException(alert_id)

    def list(self) -> List[Alert]:
        """Return alerts in creation order, oldest first."""
        return list(self._alerts)

    def __len__(self) -> int:
        return len(self._alerts)
