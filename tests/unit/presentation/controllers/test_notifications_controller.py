from __future__ import annotations

import pytest

from sunrise_alarm.domain.entities.errors import DomainError
from sunrise_alarm.infrastructure.services.notification_sink import (
    InMemoryNotificationSink,
)
from sunrise_alarm.presentation.controllers.error_mapping import to_http_exception
from sunrise_alarm.presentation.controllers.notifications_controller import (
    list_notifications,
)
from sunrise_alarm.shared.consts import EnumNotificationLevel


@pytest.mark.asyncio
async def test_list_notifications_newest_first() -> None:
    sink = InMemoryNotificationSink()
    sink.notify(
        "Success", "Sunrise data loaded successfully", EnumNotificationLevel.SUCCESS
    )
    sink.notify("Error", "Invalid offset: boom", EnumNotificationLevel.ERROR)

    dto = await list_notifications(limit=1, notification_sink=sink)

    assert len(dto.notifications) == 1
    assert dto.notifications[0].title == "Error"
    assert dto.notifications[0].level is EnumNotificationLevel.ERROR


def test_unknown_domain_error_maps_to_500() -> None:
    exception = to_http_exception(DomainError("unexpected"))

    assert exception.status_code == 500
    assert exception.detail == "Internal server error"
