"""
Notification DTOs - Application Layer
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from sunrise_alarm.domain.entities.schedule import Notification
from sunrise_alarm.shared.consts import EnumNotificationLevel


class NotificationDTO(BaseModel):
    """A title/body notification."""

    title: str
    body: str
    level: EnumNotificationLevel
    created_at: datetime

    @classmethod
    def from_domain(cls, notification: Notification) -> "NotificationDTO":
        return cls(
            title=notification.title,
            body=notification.body,
            level=notification.level,
            created_at=notification.created_at,
        )


class NotificationsResponseDTO(BaseModel):
    """Most recent notifications, newest first."""

    notifications: List[NotificationDTO] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "notifications": [
                    {
                        "title": "Success",
                        "body": "Sunrise data loaded successfully",
                        "level": "success",
                        "created_at": "2024-06-01T04:00:00Z",
                    }
                ]
            }
        }
    }
