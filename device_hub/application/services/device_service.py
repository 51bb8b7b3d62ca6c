"""
Device Service for Device Hub.

Handles device registration, updates, removal and lookups.
"""
import copy
import logging
from typing import Any, Dict, List, Optional, Tuple

from ..state import HubState
from .status_service import StatusService
from ...domain.entities import (
    Device,
    DevicePatch,
    DeviceStatus,
    LogEntry,
    StatusCounters,
    TelemetrySnapshot,
)

logger = logging.getLogger(__name__)


class DeviceService:
    """
    Application service for the device registry.

    Every mutation writes a log entry for the device and recomputes the
    status counters before returning. Devices handed back to callers are
    detached copies of the stored ones.
    """

    def __init__(self, state: HubState, status_service: Optional[StatusService] = None):
        self._state = state
        self._status = status_service or StatusService(state)

    # =========================================================================
    # Registration
    # =========================================================================

    def register_device(
        self,
        name: Optional[str] = None,
        type: Optional[str] = None,
        location: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Device:
        """
        Register a new device.

        Missing fields fall back to the configured defaults. The device
        starts online with ``last_seen`` equal to ``registered_at``.

        Args:
            name: Display name.
            type: Device category, e.g. "sensor" or "gateway".
            location: Free-text location.
            metadata: Caller-supplied key/value pairs.

        Returns:
            Created Device.
        """
        defaults = self._state.settings
        with self._state.lock:
            now = self._state.clock.now()
            device = Device(
                id=self._state.ids.new_id("device"),
                name=name or defaults.default_device_name,
                type=type or defaults.default_device_type,
                location=location or defaults.default_location,
                registered_at=now,
                last_seen=now,
                status=DeviceStatus.ONLINE,
                metadata=copy.deepcopy(metadata) if metadata else {},
                telemetry=TelemetrySnapshot(),
            )
            self._state.add_device(device)
            self._state.append_log(device.id, LogEntry.registered(now))
            self._status.recompute()

            logger.info(f"Registered device {device.id} ({device.name})")

            return copy.deepcopy(device)

    # =========================================================================
    # Updates
    # =========================================================================

    def update_device(self, device_id: str, patch: DevicePatch) -> Device:
        """
        Apply a partial update to a device.

        Only the fields present in ``patch`` change; ``last_seen`` is
        refreshed either way.

        Args:
            device_id: Device id.
            patch: Fields to overwrite.

        Returns:
            Updated Device.

        Raises:
            DeviceNotFoundException: The id is not registered.
        """
        with self._state.lock:
            device = self._state.require_device(device_id)
            now = self._state.clock.now()

            patch.apply_to(device)
            device.touch(now)

            self._state.append_log(device_id, LogEntry.updated(now))
            self._status.recompute()

            logger.info(f"Updated device {device_id}")

            return copy.deepcopy(device)

    def delete_device(self, device_id: str) -> None:
        """
        Delete a device and its log.

        Alerts raised for the device are kept.

        Raises:
            DeviceNotFoundException: The id is not registered.
        """
        with self._state.lock:
            self._state.require_device(device_id)
            self._state.remove_device(device_id)
            self._status.recompute()

        logger.info(f"Deleted device {device_id}")

    # =========================================================================
    # Queries
    # =========================================================================

    def get_device(self, device_id: str) -> Tuple[Device, List[LogEntry]]:
        """
        Get a device together with its log.

        Raises:
            DeviceNotFoundException: The id is not registered.
        """
        with self._state.lock:
            device = self._state.require_device(device_id)
            return copy.deepcopy(device), self._state.logs[device_id].entries()

    def get_device_logs(self, device_id: str) -> List[LogEntry]:
        """
        Get the log of a device, oldest entry first.

        Raises:
            DeviceNotFoundException: The id is not registered.
        """
        with self._state.lock:
            self._state.require_device(device_id)
            return self._state.logs[device_id].entries()

    def list_devices(self) -> Tuple[List[Device], StatusCounters]:
        """List devices in registration order with the current counters."""
        with self._state.lock:
            devices = [copy.deepcopy(d) for d in self._state.devices.values()]
            return devices, self._state.counters
