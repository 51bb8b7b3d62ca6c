"""
Alert API endpoints.
"""
from fastapi import APIRouter, Depends

from ..dependencies import get_alert_service
from ..schemas import AlertResponse, AlertListResponse, MessageResponse
from ...application.services import AlertService

router = APIRouter(prefix="/alerts", tags=["Alerts"])


@router.get(
    "",
    response_model=AlertListResponse,
    summary="List alerts",
    description="List retained alerts, oldest first.",
)
async def list_alerts(
    service: AlertService = Depends(get_alert_service),
) -> AlertListResponse:
    alerts = service.list_alerts()

    return AlertListResponse(
        alerts=[AlertResponse.model_validate(a) for a in alerts],
        count=len(alerts),
    )


@router.post(
    "/{alert_id}/acknowledge",
    response_model=MessageResponse,
    summary="Acknowledge alert",
    description="Mark an alert as acknowledged.",
)
async def acknowledge_alert(
    alert_id: str,
    service: AlertService = Depends(get_alert_service),
) -> MessageResponse:
    service.acknowledge_alert(alert_id)

    return MessageResponse(message="Alert acknowledged")
