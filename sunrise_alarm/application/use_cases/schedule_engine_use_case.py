"""
Schedule Engine - Application Layer

This module defines the orchestrator of the sunrise alarm system. It owns
the user settings (offset and location) and the last fetched forecast,
and exposes the user commands: refresh, offset and location changes,
and arming or cancelling the weekly alarms.

Every failed command publishes exactly one notification whose body ends
with the original error text, then re-raises the error.
"""

from dataclasses import replace
from typing import Any, List, NoReturn, Optional, Tuple

from sunrise_alarm.application.models import (
    EngineConfig,
    RefreshOutcome,
    ScheduleEntry,
    ScheduleView,
)
from sunrise_alarm.application.services.alarm_scheduler import AlarmScheduler
from sunrise_alarm.application.services.location_provider import LocationProvider
from sunrise_alarm.domain.entities.errors import (
    AlarmArmError,
    DomainError,
    ForecastNotAvailableError,
    InvalidInputError,
)
from sunrise_alarm.domain.entities.location import Coordinate
from sunrise_alarm.domain.entities.schedule import AlarmSlot, ScheduleSettings
from sunrise_alarm.domain.entities.sunrise import (
    UNKNOWN_TIMEZONE,
    AdjustedSunrise,
    RawSunriseRecord,
    SunriseForecast,
)
from sunrise_alarm.domain.ports.clock import IClock
from sunrise_alarm.domain.ports.notifications import INotificationSink
from sunrise_alarm.domain.repositories.settings_repository import ISettingsRepository
from sunrise_alarm.domain.repositories.sunrise_repository import ISunriseRepository
from sunrise_alarm.domain.services.schedule_computer import apply_offset, normalize
from sunrise_alarm.domain.services.weekdays import (
    format_long_date,
    weekday_for_index,
    weekday_name,
    weekday_number,
)
from sunrise_alarm.shared import EnumNotificationLevel, get_logger

logger = get_logger(__name__)

ERROR_TITLE = "Error"
SUCCESS_TITLE = "Success"
INFO_TITLE = "Info"


class ScheduleEngine:
    """Orchestrates settings, forecast retrieval and alarm arming."""

    def __init__(
        self,
        sunrise_repository: ISunriseRepository,
        settings_repository: ISettingsRepository,
        location_provider: LocationProvider,
        alarm_scheduler: AlarmScheduler,
        notification_sink: INotificationSink,
        clock: IClock,
        config: EngineConfig,
    ):
        """
        Initialize the engine with its collaborators.

        Args:
            sunrise_repository: Cached access to the seven-day forecast
            settings_repository: Persistence for offset and location
            location_provider: Device coordinate with default fallback
            alarm_scheduler: Drives the platform alarm capability
            notification_sink: User facing notification channel
            clock: Local wall clock
            config: Default location, drift threshold and offset step
        """
        self.sunrise_repository = sunrise_repository
        self.settings_repository = settings_repository
        self.location_provider = location_provider
        self.alarm_scheduler = alarm_scheduler
        self.notification_sink = notification_sink
        self.clock = clock
        self.config = config

        self._settings = ScheduleSettings()
        self._forecast: Optional[SunriseForecast] = None
        self._initialized = False
        # Set when a location change could not refresh because of a fetch
        # already in flight
        self._refresh_pending = False

    @property
    def settings(self) -> ScheduleSettings:
        return replace(self._settings)

    @property
    def forecast(self) -> Optional[SunriseForecast]:
        return self._forecast

    @property
    def timezone(self) -> str:
        return self._forecast.timezone if self._forecast else UNKNOWN_TIMEZONE

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> ScheduleSettings:
        """
        Load the persisted settings, resolving and storing a location if none
        has been saved yet.
        """
        settings = await self.settings_repository.load()

        if settings.location is None:
            location = await self.location_provider.resolve()
            settings = replace(settings, location=location)
            await self.settings_repository.save(settings)
            logger.info(
                "engine.location_initialized",
                latitude=location.latitude,
                longitude=location.longitude,
            )

        self._settings = settings
        self._initialized = True
        logger.info(
            "engine.initialized",
            offset_minutes=settings.offset_minutes,
            location=settings.location.to_dict() if settings.location else None,
        )
        return self.settings

    async def refresh(self, force_refresh: bool = False) -> RefreshOutcome:
        """
        Fetch the forecast for the current location.

        Nothing is fetched while the location is unset or still the default
        placeholder. Unparseable records are dropped and reported. A forecast
        that no longer matches the current location is discarded, and the
        refresh is repeated when a location change is waiting for it.

        Raises:
            InvalidInputError, NetworkError, InvalidResponseError,
            StorageError: From the sunrise repository, after notifying the user
        """
        location = self._settings.location
        if location is None or self.location_provider.is_default(location):
            logger.info("engine.refresh.skipped", reason="location_not_configured")
            self.notification_sink.notify(
                INFO_TITLE, "Location not available, skipping sunrise data fetch"
            )
            return RefreshOutcome(refreshed=False, reason="location_not_configured")

        try:
            forecast = await self.sunrise_repository.fetch(
                location, force_refresh=force_refresh
            )
        except DomainError as e:
            self._fail("Failed to load sunrise data: ", e)

        if forecast is None:
            logger.info("engine.refresh.skipped", reason="fetch_in_progress")
            return RefreshOutcome(refreshed=False, reason="fetch_in_progress")

        current = self._settings.location
        if current is None or not forecast.matches(
            current, self.config.drift_threshold
        ):
            logger.info(
                "engine.refresh.discarded",
                reason="location_changed",
                fetched_for=forecast.coordinate.to_dict(),
                pending=self._refresh_pending,
            )
            if self._refresh_pending:
                self._refresh_pending = False
                return await self.refresh(force_refresh=True)
            return RefreshOutcome(refreshed=False, reason="location_changed")

        dropped: List[Tuple[RawSunriseRecord, str]] = []
        entries = self._normalized(
            forecast, on_invalid=lambda record, reason: dropped.append((record, reason))
        )
        for record, reason in dropped:
            logger.warning("engine.record_dropped", date=record.date, reason=reason)
            self.notification_sink.notify(
                ERROR_TITLE,
                f"Skipped invalid sunrise record: {reason}",
                EnumNotificationLevel.ERROR,
            )

        self._forecast = forecast
        self._refresh_pending = False
        logger.info(
            "engine.refresh.completed",
            record_count=len(entries),
            dropped_count=len(dropped),
            timezone=forecast.timezone,
        )
        self.notification_sink.notify(
            SUCCESS_TITLE,
            "Sunrise data loaded successfully",
            EnumNotificationLevel.SUCCESS,
        )
        return RefreshOutcome(
            refreshed=True,
            record_count=len(entries),
            dropped_records=[record.date for record, _ in dropped],
        )

    async def set_offset(self, minutes: Any) -> ScheduleSettings:
        """
        Set the signed minute offset and persist it.

        Raises:
            InvalidInputError: When ``minutes`` is not an integer
            StorageError: When the settings cannot be saved
        """
        if isinstance(minutes, bool) or not isinstance(minutes, int):
            self._fail(
                "Invalid offset: ",
                InvalidInputError(
                    "Offset must be an integer number of minutes",
                    details={"minutes": repr(minutes)},
                ),
            )

        await self._save(replace(self._settings, offset_minutes=minutes))
        logger.info("engine.offset_updated", offset_minutes=minutes)
        return self.settings

    async def increment_offset(self) -> ScheduleSettings:
        return await self.set_offset(
            self._settings.offset_minutes + self.config.offset_step_minutes
        )

    async def decrement_offset(self) -> ScheduleSettings:
        return await self.set_offset(
            self._settings.offset_minutes - self.config.offset_step_minutes
        )

    async def set_location(self, raw: Any) -> ScheduleSettings:
        """
        Set and persist the location. A change beyond the drift threshold
        invalidates the cached forecast and forces a refresh.

        Raises:
            InvalidInputError: When the coordinate is malformed
            StorageError: When the settings cannot be saved
        """
        try:
            coordinate = Coordinate.parse(raw)
        except InvalidInputError as e:
            self._fail("Invalid location: ", e)

        previous = self._settings.location
        await self._save(replace(self._settings, location=coordinate))

        drifted = previous is None or not previous.is_within(
            coordinate, self.config.drift_threshold
        )
        logger.info(
            "engine.location_updated",
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
            drifted=drifted,
        )
        if drifted:
            await self.sunrise_repository.invalidate()
            self._forecast = None
            outcome = await self.refresh(force_refresh=True)
            if outcome.reason == "fetch_in_progress":
                self._refresh_pending = True

        return self.settings

    async def update_location_from_device(self) -> ScheduleSettings:
        """Acquire the device coordinate and apply it through ``set_location``."""
        coordinate = await self.location_provider.resolve()
        return await self.set_location(coordinate)

    async def arm_all_alarms(self) -> List[AlarmSlot]:
        """
        Arm one weekly alarm per adjusted sunrise, starting with today.
        A forecast older than the configured maximum age is refreshed first.

        Raises:
            ForecastNotAvailableError: When no current forecast is available
            AlarmArmError: For the first weekday that failed
        """
        await self._refresh_if_stale("Failed to set alarms: ")
        adjusted = self._adjusted_or_fail("Failed to set alarms: ")
        current_weekday = weekday_number(self.clock.today())

        try:
            slots = await self.alarm_scheduler.schedule_all(adjusted, current_weekday)
        except AlarmArmError as e:
            self._fail("Failed to set alarms: ", e)

        self.notification_sink.notify(
            SUCCESS_TITLE,
            "All alarms for the week have been set/updated.",
            EnumNotificationLevel.SUCCESS,
        )
        return slots

    async def arm_alarm(self, index: int) -> AlarmSlot:
        """
        Arm the alarm of a single schedule entry. The weekday comes from the
        entry's own calendar date.

        Raises:
            ForecastNotAvailableError: When no current forecast is available
            InvalidInputError: When ``index`` does not select an entry
            AlarmArmError: When the alarm capability rejects the call
        """
        await self._refresh_if_stale("Failed to set alarm: ")
        adjusted = self._adjusted_or_fail("Failed to set alarm: ")
        if isinstance(index, bool) or not 0 <= index < len(adjusted):
            self._fail(
                "Failed to set alarm: ",
                InvalidInputError(
                    f"Alarm index out of range: {index}",
                    details={"index": index, "count": len(adjusted)},
                ),
            )

        entry = adjusted[index]
        weekday = weekday_number(entry.source_date)
        try:
            slot = await self.alarm_scheduler.schedule_one(entry.absolute_time, weekday)
        except AlarmArmError as e:
            self._fail("Failed to set alarm: ", e)

        alarm_time = f"{slot.hour:02d}:{slot.minute:02d}"
        self.notification_sink.notify(
            SUCCESS_TITLE,
            f"Alarm set for {weekday_name(weekday)} at {alarm_time}",
            EnumNotificationLevel.SUCCESS,
        )
        return slot

    async def cancel_all_alarms(self) -> List[int]:
        """
        Dismiss the seven weekly sunrise alarms.

        Raises:
            AlarmArmError: For the first weekday that could not be dismissed
        """
        try:
            weekdays = await self.alarm_scheduler.cancel_all()
        except AlarmArmError as e:
            self._fail("Failed to cancel alarms: ", e)

        self.notification_sink.notify(
            SUCCESS_TITLE,
            "All alarms for the week have been cancelled.",
            EnumNotificationLevel.SUCCESS,
        )
        return weekdays

    def get_schedule(self) -> ScheduleView:
        """Current adjusted schedule, recomputed from the forecast and offset."""
        today = self.clock.today()
        adjusted = self._adjusted()
        current_weekday = weekday_number(today)

        entries = []
        for index, sunrise in enumerate(adjusted):
            weekday = weekday_for_index(current_weekday, index)
            entries.append(
                ScheduleEntry(
                    index=index,
                    weekday=weekday,
                    weekday_name=weekday_name(weekday),
                    source_date=sunrise.source_date,
                    display_date=format_long_date(sunrise.source_date),
                    alarm_time=sunrise.absolute_time.strftime("%H:%M"),
                    adjusted_at=sunrise.absolute_time,
                    is_today=sunrise.source_date == today,
                )
            )

        return ScheduleView(
            entries=entries,
            offset_minutes=self._settings.offset_minutes,
            timezone=self.timezone,
            location=self._settings.location,
            fetched_at=self._forecast.fetched_at if self._forecast else None,
        )

    def _normalized(self, forecast: SunriseForecast, on_invalid=None):
        return normalize(
            forecast.records,
            today=self.clock.today(),
            tz=self.clock.now().tzinfo,
            on_invalid=on_invalid,
        )

    def _adjusted(self) -> List[AdjustedSunrise]:
        if self._forecast is None:
            return []
        return apply_offset(
            self._normalized(self._forecast), self._settings.offset_minutes
        )

    def _adjusted_or_fail(self, prefix: str) -> List[AdjustedSunrise]:
        adjusted = self._adjusted()
        if not adjusted:
            self._fail(prefix, ForecastNotAvailableError())
        return adjusted

    async def _refresh_if_stale(self, prefix: str) -> None:
        forecast = self._forecast
        if forecast is None or forecast.is_fresh(
            self.clock.now(), self.config.forecast_max_age
        ):
            return

        logger.info(
            "engine.forecast.stale", fetched_at=forecast.fetched_at.isoformat()
        )
        await self.refresh()
        if self._forecast is forecast:
            self._fail(
                prefix,
                ForecastNotAvailableError(
                    "Sunrise forecast is out of date",
                    details={"fetched_at": forecast.fetched_at.isoformat()},
                ),
            )

    async def _save(self, settings: ScheduleSettings) -> None:
        try:
            await self.settings_repository.save(settings)
        except DomainError as e:
            self._fail("Failed to save settings: ", e)
        self._settings = settings

    def _fail(self, prefix: str, error: DomainError) -> NoReturn:
        logger.error(
            "engine.command_failed",
            error_type=type(error).__name__,
            error=error.message,
            details=error.details,
        )
        self.notification_sink.notify(
            ERROR_TITLE, f"{prefix}{error.message}", EnumNotificationLevel.ERROR
        )
        raise error
