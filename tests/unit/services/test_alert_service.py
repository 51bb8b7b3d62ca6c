"""
Unit tests for AlertService and StatusService.
"""
import pytest

from device_hub.domain.entities import DevicePatch, DeviceStatus, StatusCounters, TelemetryReading
from device_hub.domain.exceptions import AlertNotFoundException


class TestListAlerts:
    """Test alert listing."""

    def test_empty(self, alert_service):
        assert alert_service.list_alerts() == []

    def test_oldest_first(self, telemetry_service, alert_service, registered_device):
        for battery in (15, 10, 5):
            telemetry_service.ingest_telemetry(registered_device.id, TelemetryReading(battery=battery))

        messages = [a.message for a in alert_service.list_alerts()]
        assert messages == ["Low battery: 15%", "Low battery: 10%", "Low battery: 5%"]

    def test_sink_is_bounded(self, telemetry_service, alert_service, registered_device):
        for n in range(60):
            telemetry_service.ingest_telemetry(registered_device.id, TelemetryReading(battery=n % 20))

        alerts = alert_service.list_alerts()
        assert len(alerts) == 50
        assert alerts[-1].message == "Low battery: 19%"

    def test_listed_alerts_are_detached(self, telemetry_service, alert_service, registered_device):
        telemetry_service.ingest_telemetry(registered_device.id, TelemetryReading(battery=5))

        alert_service.list_alerts()[0].acknowledged = True

        assert alert_service.list_alerts()[0].acknowledged is False


class TestAcknowledgeAlert:
    """Test alert acknowledgement."""

    def test_acknowledge(self, telemetry_service, alert_service, registered_device):
        telemetry_service.ingest_telemetry(registered_device.id, TelemetryReading(battery=5))
        alert = alert_service.list_alerts()[0]

        alert_service.acknowledge_alert(alert.id)

        acknowledged = alert_service.list_alerts()[0]
        assert acknowledged.acknowledged is True
        assert acknowledged.timestamp == alert.timestamp

    def test_acknowledge_twice_is_allowed(self, telemetry_service, alert_service, registered_device):
        telemetry_service.ingest_telemetry(registered_device.id, TelemetryReading(battery=5))
        alert_id = alert_service.list_alerts()[0].id

        alert_service.acknowledge_alert(alert_id)
        alert_service.acknowledge_alert(alert_id)

        assert alert_service.list_alerts()[0].acknowledged is True

    def test_unknown_alert_raises(self, alert_service):
        with pytest.raises(AlertNotFoundException):
            alert_service.acknowledge_alert("alert_missing")

    def test_evicted_alert_raises(self, telemetry_service, alert_service, registered_device):
        telemetry_service.ingest_telemetry(registered_device.id, TelemetryReading(battery=5))
        first_id = alert_service.list_alerts()[0].id
        alert_service.acknowledge_alert(first_id)

        for _ in range(50):
            telemetry_service.ingest_telemetry(registered_device.id, TelemetryReading(battery=5))

        with pytest.raises(AlertNotFoundException):
            alert_service.acknowledge_alert(first_id)


class TestSystemStatus:
    """Test the status summary."""

    def test_empty_hub(self, status_service):
        summary = status_service.get_system_status()

        assert summary.status == "running"
        assert summary.device_count == 0
        assert summary.alert_count == 0
        assert summary.counters == StatusCounters(0, 0, 0)

    def test_reflects_devices_and_alerts(
        self, status_service, device_service, telemetry_service, clock
    ):
        first = device_service.register_device()
        second = device_service.register_device()
        device_service.update_device(second.id, DevicePatch(status=DeviceStatus.OFFLINE))
        telemetry_service.ingest_telemetry(first.id, TelemetryReading(battery=5, temperature=99))

        summary = status_service.get_system_status()

        assert summary.device_count == 2
        assert summary.alert_count == 2
        assert summary.counters == StatusCounters(online=1, offline=1, warning=0)
        assert summary.timestamp == clock.current

    def test_recompute_is_pure_fold(self, status_service, device_service, state):
        device = device_service.register_device()
        state.devices[device.id].status = DeviceStatus.WARNING

        assert status_service.get_counters() == StatusCounters(online=1)
        assert status_service.recompute() == StatusCounters(warning=1)
        assert status_service.get_counters() == StatusCounters(warning=1)
