"""
Notifications Router - Presentation Layer
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query

from sunrise_alarm.application.dtos import NotificationDTO, NotificationsResponseDTO
from sunrise_alarm.domain.ports.notifications import INotificationSink

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=NotificationsResponseDTO)
@inject
async def list_notifications(
    limit: int = Query(20, ge=1, le=100, description="Maximum notifications"),
    notification_sink: INotificationSink = Depends(Provide["notification_sink"]),
) -> NotificationsResponseDTO:
    """List the most recent notifications, newest first."""
    return NotificationsResponseDTO(
        notifications=[
            NotificationDTO.from_domain(item)
            for item in notification_sink.recent(limit)
        ]
    )
