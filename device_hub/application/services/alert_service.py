"""
Alert Service for Device Hub.

Lists and acknowledges alerts held in the shared alert sink.
"""
import copy
import logging
from typing import List

from ..state import HubState
from ...domain.entities import Alert
from ...domain.exceptions import AlertNotFoundException

logger = logging.getLogger(__name__)


class AlertService:
    """Application service for alert queries and acknowledgement."""

    def __init__(self, state: HubState):
        self._state = state

    def list_alerts(self) -> List[Alert]:
        """
        List alerts oldest first.

        Callers wanting the most recent N reverse and slice this list.
        """
        with self._state.lock:
            return [copy.copy(alert) for alert in self._state.alerts.list()]

    def acknowledge_alert(self, alert_id: str) -> None:
        """
        Acknowledge an alert.

        Raises:
            AlertNotFoundException: The alert does not exist or was evicted.
        """
        with self._state.lock:
            try:
                self._state.alerts.acknowledge(alert_id)
            except AlertNotFoundException:
                logger.warning(f"Alert {alert_id} not found")
                raise

        logger.info(f"Acknowledged alert {alert_id}")
