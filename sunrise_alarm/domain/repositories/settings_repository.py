"""
Settings Repository Interface
"""

from abc import ABC, abstractmethod

from sunrise_alarm.domain.entities.schedule import ScheduleSettings


class ISettingsRepository(ABC):
    """Interface for persisting the user's schedule settings."""

    @abstractmethod
    async def load(self) -> ScheduleSettings:
        """
        Load the persisted settings.

        Returns:
            The stored settings, or defaults when nothing usable is stored
        """
        pass

    @abstractmethod
    async def save(self, settings: ScheduleSettings) -> None:
        """
        Persist the settings.

        Raises:
            StorageError: When the store cannot be written
        """
        pass
