"""
Settings Repository - Infrastructure Layer

Persists the schedule settings as one JSON document under a stable key
of the key-value store.
"""

import json
from typing import Any, Dict

from sunrise_alarm.domain.entities.errors import InvalidInputError
from sunrise_alarm.domain.entities.location import Coordinate
from sunrise_alarm.domain.entities.schedule import ScheduleSettings
from sunrise_alarm.domain.repositories.key_value_store import IKeyValueStore
from sunrise_alarm.domain.repositories.settings_repository import ISettingsRepository
from sunrise_alarm.shared import SETTINGS_KEY, get_logger

logger = get_logger(__name__)


class SettingsRepository(ISettingsRepository):
    """Key-value store implementation of the settings repository."""

    def __init__(self, store: IKeyValueStore, key: str = SETTINGS_KEY):
        self.store = store
        self.key = key

    async def load(self) -> ScheduleSettings:
        raw = await self.store.get(self.key)
        if raw is None:
            return ScheduleSettings()

        try:
            return self._to_entity(json.loads(raw))
        except (ValueError, TypeError, KeyError, InvalidInputError) as e:
            logger.warning("settings.malformed", key=self.key, error=str(e))
            return ScheduleSettings()

    async def save(self, settings: ScheduleSettings) -> None:
        await self.store.set(self.key, json.dumps(self._to_document(settings)))
        logger.debug("settings.saved", key=self.key)

    def _to_document(self, settings: ScheduleSettings) -> Dict[str, Any]:
        return {
            "offset_minutes": settings.offset_minutes,
            "location": settings.location.to_dict() if settings.location else None,
        }

    def _to_entity(self, document: Dict[str, Any]) -> ScheduleSettings:
        if not isinstance(document, dict):
            raise TypeError("Settings document must be an object")
        offset = document.get("offset_minutes", 0)
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise TypeError("offset_minutes must be an integer")

        location = document.get("location")
        return ScheduleSettings(
            offset_minutes=offset,
            location=Coordinate.parse(location) if location is not None else None,
        )
