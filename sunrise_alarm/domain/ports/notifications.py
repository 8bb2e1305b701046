"""Domain port for the user facing notification channel."""

from __future__ import annotations

from typing import List, Protocol

from sunrise_alarm.domain.entities.schedule import Notification
from sunrise_alarm.shared.consts import EnumNotificationLevel


class INotificationSink(Protocol):
    """Receives title/body notifications for the user."""

    def notify(
        self,
        title: str,
        body: str,
        level: EnumNotificationLevel = EnumNotificationLevel.INFO,
    ) -> Notification:
        """Publish a notification."""
        ...

    def recent(self, limit: int = 20) -> List[Notification]:
        """Return the most recent notifications, newest first."""
        ...
