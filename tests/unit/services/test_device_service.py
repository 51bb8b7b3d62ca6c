"""
Unit tests for DeviceService.

Tests device registration, updates, removal and lookups.
"""
import pytest

from device_hub.application.services import DeviceService
from device_hub.domain.entities import (
    DevicePatch,
    DeviceStatus,
    LogAction,
    StatusCounters,
)
from device_hub.domain.exceptions import DeviceNotFoundException


class TestDeviceServiceInit:
    """Test service initialization."""

    def test_init_without_status_service(self, state):
        """Test service builds its own status service when none is given."""
        service = DeviceService(state)
        service.register_device()
        assert state.counters == StatusCounters(online=1)


class TestRegisterDevice:
    """Test device registration."""

    def test_register_with_no_fields_applies_defaults(self, device_service):
        device = device_service.register_device()

        assert device.id.startswith("device_")
        assert device.name == "Unnamed Device"
        assert device.type == "sensor"
        assert device.location == "Unknown"
        assert device.status == DeviceStatus.ONLINE
        assert device.metadata == {}
        assert device.telemetry.battery == 100
        assert device.telemetry.temperature is None
        assert device.last_seen == device.registered_at

    def test_register_with_fields(self, device_service):
        device = device_service.register_device(
            name="Boiler probe",
            type="gateway",
            location="Basement",
            metadata={"firmware": "2.1"},
        )

        assert device.name == "Boiler probe"
        assert device.type == "gateway"
        assert device.location == "Basement"
        assert device.metadata == {"firmware": "2.1"}

    def test_nested_metadata_is_detached_from_caller(self, device_service):
        metadata = {"sensors": {"probe": "pt100"}}
        device = device_service.register_device(metadata=metadata)

        metadata["sensors"]["probe"] = "tampered"

        stored, _ = device_service.get_device(device.id)
        assert stored.metadata == {"sensors": {"probe": "pt100"}}

    def test_register_accepts_unknown_type(self, device_service):
        device = device_service.register_device(type="drone")
        assert device.type == "drone"

    def test_register_writes_log_entry(self, device_service):
        device = device_service.register_device()

        logs = device_service.get_device_logs(device.id)

        assert len(logs) == 1
        assert logs[0].action == LogAction.REGISTERED
        assert logs[0].timestamp == device.registered_at

    def test_register_updates_counters(self, device_service, state):
        device_service.register_device()
        device_service.register_device()

        assert state.counters == StatusCounters(online=2, offline=0, warning=0)

    def test_ids_are_unique(self, device_service):
        ids = {device_service.register_device().id for _ in range(20)}
        assert len(ids) == 20


class TestUpdateDevice:
    """Test partial device updates."""

    def test_update_only_supplied_fields(self, device_service, registered_device):
        updated = device_service.update_device(
            registered_device.id, DevicePatch(location="Roof")
        )

        assert updated.location == "Roof"
        assert updated.name == registered_device.name
        assert updated.status == DeviceStatus.ONLINE

    def test_update_refreshes_last_seen(self, device_service, registered_device, clock):
        clock.advance(30)

        updated = device_service.update_device(registered_device.id, DevicePatch())

        assert updated.last_seen > registered_device.last_seen
        assert updated.registered_at == registered_device.registered_at

    def test_last_seen_never_decreases(self, device_service, registered_device, clock):
        clock.advance(30)
        first = device_service.update_device(registered_device.id, DevicePatch())
        clock.rewind(60)
        second = device_service.update_device(registered_device.id, DevicePatch())

        assert second.last_seen >= first.last_seen

    def test_update_status_recomputes_counters(self, device_service, registered_device, state):
        device_service.update_device(registered_device.id, DevicePatch(status=DeviceStatus.WARNING))

        assert state.counters == StatusCounters(online=0, offline=0, warning=1)

    def test_update_appends_log(self, device_service, registered_device):
        device_service.update_device(registered_device.id, DevicePatch(name="New"))

        actions = [e.action for e in device_service.get_device_logs(registered_device.id)]
        assert actions == [LogAction.REGISTERED, LogAction.UPDATED]

    def test_update_unknown_device_raises(self, device_service):
        with pytest.raises(DeviceNotFoundException):
            device_service.update_device("device_missing", DevicePatch(name="x"))

    def test_returned_device_is_detached(self, device_service, registered_device):
        updated = device_service.update_device(registered_device.id, DevicePatch(name="New"))
        updated.name = "Changed by caller"

        device, _ = device_service.get_device(registered_device.id)
        assert device.name == "New"


class TestDeleteDevice:
    """Test device removal."""

    def test_delete_removes_device_and_logs(self, device_service, registered_device, state):
        device_service.delete_device(registered_device.id)

        assert registered_device.id not in state.devices
        assert registered_device.id not in state.logs

        with pytest.raises(DeviceNotFoundException):
            device_service.get_device(registered_device.id)
        with pytest.raises(DeviceNotFoundException):
            device_service.get_device_logs(registered_device.id)

    def test_delete_recomputes_counters(self, device_service, registered_device, state):
        device_service.delete_device(registered_device.id)
        assert state.counters == StatusCounters(0, 0, 0)

    def test_delete_unknown_device_raises(self, device_service):
        with pytest.raises(DeviceNotFoundException) as exc_info:
            device_service.delete_device("device_missing")

        assert exc_info.value.message == "Device not found"
        assert exc_info.value.entity_id == "device_missing"

    def test_failed_delete_leaves_state_untouched(self, device_service, registered_device, state):
        with pytest.raises(DeviceNotFoundException):
            device_service.delete_device("device_missing")

        assert list(state.devices) == [registered_device.id]
        assert state.counters == StatusCounters(online=1)

    def test_reregistering_starts_fresh_log(self, device_service, registered_device):
        device_service.delete_device(registered_device.id)
        device = device_service.register_device()

        assert len(device_service.get_device_logs(device.id)) == 1


class TestQueries:
    """Test get and list."""

    def test_get_device_returns_device_and_logs(self, device_service, registered_device):
        device, logs = device_service.get_device(registered_device.id)

        assert device == registered_device
        assert [e.action for e in logs] == [LogAction.REGISTERED]

    def test_get_device_twice_is_identical(self, device_service, registered_device):
        first = device_service.get_device(registered_device.id)
        second = device_service.get_device(registered_device.id)

        assert first == second

    def test_list_in_registration_order(self, device_service):
        ids = [device_service.register_device(name=f"d{n}").id for n in range(5)]

        devices, counters = device_service.list_devices()

        assert [d.id for d in devices] == ids
        assert counters.total == 5

    def test_list_empty(self, device_service):
        devices, counters = device_service.list_devices()

        assert devices == []
        assert counters == StatusCounters(0, 0, 0)


class TestCounterConsistency:
    """Counters always add up to the number of devices."""

    def test_counters_sum_to_device_count(self, device_service, state):
        ids = []
        statuses = [DeviceStatus.ONLINE, DeviceStatus.OFFLINE, DeviceStatus.WARNING]

        for n in range(12):
            ids.append(device_service.register_device().id)
            device_service.update_device(ids[n // 2], DevicePatch(status=statuses[n % 3]))
            if n % 4 == 3:
                device_service.delete_device(ids.pop(0))

            devices, counters = device_service.list_devices()
            assert counters.online + counters.offline + counters.warning == len(devices)
