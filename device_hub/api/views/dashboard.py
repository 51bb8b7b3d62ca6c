"""
HTML dashboard for Device Hub.

A read-only view over hub state: status counters, a registration form,
the device table and the most recent alerts.
"""
from datetime import datetime
from html import escape
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from ..dependencies import get_alert_service, get_device_service
from ...application.services import AlertService, DeviceService
from ...application.services.telemetry_service import format_reading
from ...domain.entities import Alert, Device, DeviceType, StatusCounters

RECENT_ALERT_LIMIT = 10

router = APIRouter(tags=["Dashboard"])


_STYLE = """
    body { font-family: Arial, sans-serif; margin: 0; padding: 20px; background: #f5f5f5; }
    .container { max-width: 1200px; margin: 0 auto; }
    h1 { color: #333; }
    .stats { display: flex; gap: 20px; margin: 20px 0; }
    .stat-card { background: white; padding: 20px; border-radius: 8px; flex: 1; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
    .stat-card h3 { margin: 0 0 10px 0; color: #666; font-size: 14px; }
    .stat-card .number { font-size: 32px; font-weight: bold; }
    .online { color: #4caf50; }
    .offline { color: #f44336; }
    .warning { color: #ff9800; }
    .section { background: white; padding: 20px; border-radius: 8px; margin: 20px 0; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
    table { width: 100%; border-collapse: collapse; }
    th, td { padding: 12px; text-align: left; border-bottom: 1px solid #ddd; }
    th { background: #f8f9fa; font-weight: bold; }
    .status-badge { padding: 4px 8px; border-radius: 4px; font-size: 12px; font-weight: bold; }
    .status-online { background: #e8f5e9; color: #4caf50; }
    .status-offline, .status-critical { background: #ffebee; color: #f44336; }
    .status-warning { background: #fff3e0; color: #ff9800; }
    button { background: #2196f3; color: white; border: none; padding: 8px 16px; border-radius: 4px; cursor: pointer; }
    button:hover { background: #1976d2; }
    .form-group { margin: 15px 0; }
    label { display: block; margin-bottom: 5px; font-weight: bold; }
    input, select { width: 100%; padding: 8px; border: 1px solid #ddd; border-radius: 4px; box-sizing: border-box; }
"""

_SCRIPT = """
document.getElementById("registerForm").addEventListener("submit", function(e) {
  e.preventDefault();
  var data = {
    name: document.getElementById("deviceName").value,
    type: document.getElementById("deviceType").value,
    location: document.getElementById("deviceLocation").value
  };
  fetch("/api/devices/register", {
    method: "POST",
    headers: {"Content-Type": "application/json"},
    body: JSON.stringify(data)
  }).then(function(res) { return res.json(); })
    .then(function(data) { alert("Device registered: " + data.device.id); location.reload(); })
    .catch(function(err) { alert("Error: " + err); });
});
function sendTelemetry(id) {
  var data = {
    temperature: Math.floor(Math.random() * 50) + 20,
    humidity: Math.floor(Math.random() * 60) + 30,
    battery: Math.floor(Math.random() * 100),
    signalStrength: -70
  };
  fetch("/api/devices/" + id + "/telemetry", {
    method: "POST",
    headers: {"Content-Type": "application/json"},
    body: JSON.stringify(data)
  }).then(function(res) { return res.json(); })
    .then(function() { alert("Telemetry sent!"); location.reload(); })
    .catch(function(err) { alert("Error: " + err); });
}
function deleteDevice(id) {
  if (confirm("Delete this device?")) {
    fetch("/api/devices/" + id, {method: "DELETE"})
      .then(function() { location.reload(); })
      .catch(function(err) { alert("Error: " + err); });
  }
}
"""


def _format_time(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S UTC")


def _stat_card(title: str, value: int, css_class: str = "") -> str:
    return (
        f'<div class="stat-card"><h3>{title}</h3>'
        f'<div class="number {css_class}">{value}</div></div>'
    )


def _device_row(device: Device) -> str:
    device_id = escape(device.id, quote=True)
    battery = device.telemetry.battery
    battery_str = f"{format_reading(battery)}%" if battery is not None else "N/A"
    return f"""
        <tr>
            <td>{device_id}</td>
            <td>{escape(device.name)}</td>
            <td>{escape(device.type)}</td>
            <td>{escape(device.location)}</td>
            <td><span class="status-badge status-{device.status.value}">{device.status.value}</span></td>
            <td>{_format_time(device.last_seen)}</td>
            <td>{battery_str}</td>
            <td>
                <button onclick="sendTelemetry('{device_id}')">Send Data</button>
                <button onclick="deleteDevice('{device_id}')">Delete</button>
            </td>
        </tr>"""


def _alert_row(alert: Alert) -> str:
    return f"""
        <tr>
            <td>{_format_time(alert.timestamp)}</td>
            <td>{escape(alert.device_id)}</td>
            <td>{escape(alert.message)}</td>
            <td><span class="status-badge status-{alert.severity.value}">{alert.severity.value}</span></td>
            <td>{'Acknowledged' if alert.acknowledged else 'Active'}</td>
        </tr>"""


def render_dashboard(
    devices: List[Device],
    counters: StatusCounters,
    recent_alerts: List[Alert],
    alert_count: int,
    title: str = "IoT Device Management Platform",
) -> str:
    """
    Render the dashboard page.

    Args:
        devices: Devices in registration order.
        counters: Current status counters.
        recent_alerts: Alerts to show, newest first.
        alert_count: Total number of retained alerts.
        title: Page heading.

    Returns:
        Complete HTML document.
    """
    stats = "".join([
        _stat_card("Online Devices", counters.online, "online"),
        _stat_card("Offline Devices", counters.offline, "offline"),
        _stat_card("Warnings", counters.warning, "warning"),
        _stat_card("Total Devices", len(devices)),
    ])

    type_options = "".join(
        f'<option value="{t.value}">{t.value.capitalize()}</option>' for t in DeviceType
    )

    if devices:
        device_section = f"""
        <table>
            <thead><tr><th>ID</th><th>Name</th><th>Type</th><th>Location</th><th>Status</th>
            <th>Last Seen</th><th>Battery</th><th>Actions</th></tr></thead>
            <tbody>{''.join(_device_row(d) for d in devices)}</tbody>
        </table>"""
    else:
        device_section = "<p>No devices registered yet. Register your first device above!</p>"

    if recent_alerts:
        alert_section = f"""
        <table>
            <thead><tr><th>Time</th><th>Device ID</th><th>Message</th><th>Severity</th><th>Status</th></tr></thead>
            <tbody>{''.join(_alert_row(a) for a in recent_alerts)}</tbody>
        </table>"""
    else:
        alert_section = "<p>No alerts yet.</p>"

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{escape(title)}</title>
    <style>{_STYLE}</style>
</head>
<body>
<div class="container">
    <h1>{escape(title)}</h1>
    <div class="stats">{stats}</div>
    <div class="section">
        <h2>Register New Device</h2>
        <form id="registerForm">
            <div class="form-group"><label>Device Name:</label><input type="text" id="deviceName" required></div>
            <div class="form-group"><label>Device Type:</label><select id="deviceType">{type_options}</select></div>
            <div class="form-group"><label>Location:</label><input type="text" id="deviceLocation"></div>
            <button type="submit">Register Device</button>
        </form>
    </div>
    <div class="section">
        <h2>Registered Devices</h2>
        {device_section}
    </div>
    <div class="section">
        <h2>Recent Alerts ({alert_count})</h2>
        {alert_section}
    </div>
    <script>{_SCRIPT}</script>
</div>
</body>
</html>"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
@router.get("/dashboard", response_class=HTMLResponse, summary="HTML dashboard")
async def dashboard(
    device_service: DeviceService = Depends(get_device_service),
    alert_service: AlertService = Depends(get_alert_service),
) -> HTMLResponse:
    devices, counters = device_service.list_devices()
    alerts = alert_service.list_alerts()
    recent = list(reversed(alerts))[:RECENT_ALERT_LIMIT]

    return HTMLResponse(render_dashboard(devices, counters, recent, len(alerts)))
