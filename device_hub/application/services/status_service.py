"""
Status Service for Device Hub.

Derives the online/offline/warning counters and the system status summary.
"""
import logging

from ..state import HubState
from ...domain.entities import StatusCounters, SystemStatus

logger = logging.getLogger(__name__)


class StatusService:
    """
    Application service for aggregate device status.

    Counters are recomputed from the full device set on every structural
    or status change instead of being incremented and decremented.
    """

    def __init__(self, state: HubState):
        self._state = state

    def recompute(self) -> StatusCounters:
        """
        Recompute and store the status counters.

        Returns:
            The freshly computed StatusCounters.
        """
        with self._state.lock:
            counters = StatusCounters.from_devices(self._state.devices.values())
            self._state.counters = counters
            logger.debug(
                f"Status recomputed: {counters.online} online, "
                f"{counters.offline} offline, {counters.warning} warning"
            )
            return counters

    def get_counters(self) -> StatusCounters:
        """Return the current counters."""
        with self._state.lock:
            return self._state.counters

    def get_system_status(self) -> SystemStatus:
        """
        Get a point-in-time summary of the hub.

        Returns:
            SystemStatus with device count, counters, alert count and timestamp.
        """
        with self._state.lock:
            return SystemStatus(
                device_count=len(self._state.devices),
                counters=self._state.counters,
                alert_count=len(self._state.alerts),
                timestamp=self._state.clock.now(),
            )
