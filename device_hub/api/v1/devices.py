"""
Device API endpoints.

Handles device registration, updates, removal, telemetry and logs.
"""
from fastapi import APIRouter, Depends, status

from ..dependencies import get_device_service, get_telemetry_service
from ..schemas import (
    DeviceRegisterRequest,
    DeviceUpdateRequest,
    DeviceResponse,
    DeviceEnvelope,
    DeviceDetailResponse,
    DeviceListResponse,
    DeviceLogsResponse,
    LogEntryResponse,
    StatusCountersResponse,
    TelemetryIngestRequest,
    TelemetryResponse,
    TelemetryEnvelope,
    MessageResponse,
)
from ...application.services import DeviceService, TelemetryService

router = APIRouter(prefix="/devices", tags=["Devices"])


@router.get(
    "",
    response_model=DeviceListResponse,
    summary="List devices",
    description="List all devices in registration order with status counters.",
)
async def list_devices(
    service: DeviceService = Depends(get_device_service),
) -> DeviceListResponse:
    devices, counters = service.list_devices()

    return DeviceListResponse(
        devices=[DeviceResponse.model_validate(d) for d in devices],
        count=len(devices),
        status=StatusCountersResponse.model_validate(counters),
    )


@router.post(
    "/register",
    response_model=DeviceEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new device",
    description="Register a new device. Missing fields get default values.",
)
async def register_device(
    request: DeviceRegisterRequest,
    service: DeviceService = Depends(get_device_service),
) -> DeviceEnvelope:
    device = service.register_device(
        name=request.name,
        type=request.type,
        location=request.location,
        metadata=request.metadata,
    )

    return DeviceEnvelope(
        device=DeviceResponse.model_validate(device),
        message="Device registered successfully",
    )


@router.get(
    "/{device_id}",
    response_model=DeviceDetailResponse,
    summary="Get device by ID",
    description="Get device details together with its activity log.",
)
async def get_device(
    device_id: str,
    service: DeviceService = Depends(get_device_service),
) -> DeviceDetailResponse:
    device, logs = service.get_device(device_id)

    return DeviceDetailResponse(
        device=DeviceResponse.model_validate(device),
        logs=[LogEntryResponse.model_validate(entry) for entry in logs],
    )


@router.put(
    "/{device_id}",
    response_model=DeviceEnvelope,
    summary="Update device",
    description="Update name, location, status or metadata. Omitted fields are kept.",
)
async def update_device(
    device_id: str,
    request: DeviceUpdateRequest,
    service: DeviceService = Depends(get_device_service),
) -> DeviceEnvelope:
    device = service.update_device(device_id, request.to_patch())

    return DeviceEnvelope(
        device=DeviceResponse.model_validate(device),
        message="Device updated successfully",
    )


@router.delete(
    "/{device_id}",
    response_model=MessageResponse,
    summary="Delete device",
    description="Delete a device and its log. Its alerts are kept.",
)
async def delete_device(
    device_id: str,
    service: DeviceService = Depends(get_device_service),
) -> MessageResponse:
    service.delete_device(device_id)

    return MessageResponse(message="Device deleted successfully")


@router.post(
    "/{device_id}/telemetry",
    response_model=TelemetryEnvelope,
    summary="Send telemetry",
    description="Push a telemetry reading. Marks the device online and may raise alerts.",
)
async def ingest_telemetry(
    device_id: str,
    request: TelemetryIngestRequest,
    service: TelemetryService = Depends(get_telemetry_service),
) -> TelemetryEnvelope:
    snapshot = service.ingest_telemetry(device_id, request.to_reading())

    return TelemetryEnvelope(
        telemetry=TelemetryResponse.model_validate(snapshot),
        message="Telemetry updated successfully",
    )


@router.get(
    "/{device_id}/logs",
    response_model=DeviceLogsResponse,
    summary="Get device logs",
    description="Get the device activity log, oldest entry first.",
)
async def get_device_logs(
    device_id: str,
    service: DeviceService = Depends(get_device_service),
) -> DeviceLogsResponse:
    logs = service.get_device_logs(device_id)

    return DeviceLogsResponse(
        logs=[LogEntryResponse.model_validate(entry) for entry in logs],
    )
