"""In-memory notification channel."""

from collections import deque
from typing import Deque, List

from sunrise_alarm.domain.entities.schedule import Notification
from sunrise_alarm.shared import EnumNotificationLevel, get_logger

logger = get_logger(__name__)


class InMemoryNotificationSink:
    """Keeps the most recent notifications, dropping the oldest beyond capacity."""

    def __init__(self, capacity: int = 50):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._notifications: Deque[Notification] = deque(maxlen=capacity)

    def notify(
        self,
        title: str,
        body: str,
        level: EnumNotificationLevel = EnumNotificationLevel.INFO,
    ) -> Notification:
        notification = Notification(title=title, body=body, level=level)
        self._notifications.append(notification)
        logger.info(
            "notification.published", title=title, body=body, level=level.value
        )
        return notification

    def recent(self, limit: int = 20) -> List[Notification]:
        if limit <= 0:
            return []
        return list(reversed(self._notifications))[:limit]

    def clear(self) -> None:
        self._notifications.clear()
