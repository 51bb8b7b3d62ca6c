"""
System status endpoint.
"""
from fastapi import APIRouter, Depends

from ..dependencies import get_status_service
from ..schemas import StatusCountersResponse, SystemStatusResponse
from ...application.services import StatusService

router = APIRouter(prefix="/status", tags=["Status"])


@router.get(
    "",
    response_model=SystemStatusResponse,
    summary="Get system status",
    description="Device count, status counters and alert count.",
)
async def get_system_status(
    service: StatusService = Depends(get_status_service),
) -> SystemStatusResponse:
    summary = service.get_system_status()

    return SystemStatusResponse(
        status=summary.status,
        device_count=summary.device_count,
        device_status=StatusCountersResponse.model_validate(summary.counters),
        alert_count=summary.alert_count,
        timestamp=summary.timestamp,
    )
