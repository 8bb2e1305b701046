"""
Sunrise Repository - Infrastructure Layer

Fetches the seven-day sunrise forecast through the sunrise gateway and
keeps the latest one in a single cache slot of the key-value store.

The cached forecast is reused while it is younger than the TTL and was
recorded for a coordinate within the drift threshold of the requested
one. A fetch either stores all seven days or nothing.

Remote fetches are serialized twice: an in-process flag, and an optional
shared lease for processes that use the same remote service and cache.
"""

import json
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from sunrise_alarm.domain.entities.errors import (
    DomainError,
    InvalidInputError,
    InvalidResponseError,
    StorageError,
)
from sunrise_alarm.domain.entities.location import DRIFT_THRESHOLD_DEGREES, Coordinate
from sunrise_alarm.domain.entities.sunrise import (
    UNKNOWN_TIMEZONE,
    RawSunriseRecord,
    SunriseForecast,
)
from sunrise_alarm.domain.gateways.sunrise_gateway import ISunriseGateway
from sunrise_alarm.domain.ports.clock import IClock
from sunrise_alarm.domain.repositories.fetch_lock import IFetchLock
from sunrise_alarm.domain.repositories.key_value_store import IKeyValueStore
from sunrise_alarm.domain.repositories.sunrise_repository import ISunriseRepository
from sunrise_alarm.shared import (
    FORECAST_CACHE_KEY,
    FORECAST_DAYS,
    PacingPolicy,
    get_logger,
)

logger = get_logger(__name__)


class SunriseRepository(ISunriseRepository):
    """Sunrise forecasts with a single-slot cache."""

    def __init__(
        self,
        sunrise_gateway: ISunriseGateway,
        store: IKeyValueStore,
        clock: IClock,
        pacing: PacingPolicy,
        cache_key: str = FORECAST_CACHE_KEY,
        cache_ttl: timedelta = timedelta(hours=24),
        drift_threshold: float = DRIFT_THRESHOLD_DEGREES,
        forecast_days: int = FORECAST_DAYS,
        fetch_lock: Optional[IFetchLock] = None,
    ):
        """
        Initialize the repository.

        Args:
            sunrise_gateway: Per-day access to the remote sunrise service
            store: Key-value store holding the cache slot
            clock: Local wall clock, decides "today" and the cache age
            pacing: Minimum interval between consecutive remote requests
            cache_key: Key of the cache slot
            cache_ttl: Maximum age of a reusable cached forecast
            drift_threshold: Tolerance in degrees on both axes
            forecast_days: Number of consecutive days to fetch
            fetch_lock: Lease shared with other processes, none when omitted
        """
        self.sunrise_gateway = sunrise_gateway
        self.store = store
        self.clock = clock
        self.pacing = pacing
        self.cache_key = cache_key
        self.cache_ttl = cache_ttl
        self.drift_threshold = drift_threshold
        self.forecast_days = forecast_days
        self.fetch_lock = fetch_lock
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def fetch(
        self, coordinate: Any, force_refresh: bool = False
    ) -> Optional[SunriseForecast]:
        coordinate = Coordinate.parse(coordinate)

        if self._in_flight:
            logger.info(
                "sunrise.fetch.already_in_flight",
                latitude=coordinate.latitude,
                longitude=coordinate.longitude,
            )
            return None

        self._in_flight = True
        try:
            if not force_refresh:
                cached = await self._read_cache()
                if cached is not None and self._is_usable(cached, coordinate):
                    logger.info(
                        "sunrise.fetch.cache_hit",
                        latitude=coordinate.latitude,
                        longitude=coordinate.longitude,
                        fetched_at=cached.fetched_at.isoformat(),
                    )
                    return cached

            if self.fetch_lock is not None and not await self.fetch_lock.acquire():
                logger.info(
                    "sunrise.fetch.locked_elsewhere",
                    latitude=coordinate.latitude,
                    longitude=coordinate.longitude,
                )
                return None

            try:
                forecast = await self._fetch_remote(coordinate)
                await self._write_cache(forecast)
            finally:
                if self.fetch_lock is not None:
                    await self.fetch_lock.release()
            return forecast
        finally:
            self._in_flight = False

    async def invalidate(self) -> None:
        try:
            await self.store.remove(self.cache_key)
        except StorageError as e:
            logger.warning("sunrise.cache.invalidate_failed", error=e.message)
            return
        logger.info("sunrise.cache.invalidated")

    def _is_usable(self, cached: SunriseForecast, coordinate: Coordinate) -> bool:
        return cached.is_fresh(self.clock.now(), self.cache_ttl) and cached.matches(
            coordinate, self.drift_threshold
        )

    async def _fetch_remote(self, coordinate: Coordinate) -> SunriseForecast:
        today = self.clock.today()
        days = [today + timedelta(days=offset) for offset in range(self.forecast_days)]
        logger.info(
            "sunrise.fetch.started",
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
            start=today.isoformat(),
            days=len(days),
        )

        records: List[RawSunriseRecord] = []
        timezone: Optional[str] = None
        async for day in self.pacing.paced(days):
            try:
                daily = await self.sunrise_gateway.get_daily_sunrise(coordinate, day)
            except DomainError as e:
                logger.error(
                    "sunrise.fetch.failed",
                    day=day.isoformat(),
                    fetched_days=len(records),
                    error=e.message,
                )
                raise
            if not records:
                timezone = daily.timezone
            records.append(daily.record)

        forecast = SunriseForecast(
            records=tuple(records),
            timezone=timezone or UNKNOWN_TIMEZONE,
            coordinate=coordinate,
            fetched_at=self.clock.now(),
        )
        logger.info(
            "sunrise.fetch.completed",
            record_count=len(records),
            timezone=forecast.timezone,
        )
        return forecast

    async def _read_cache(self) -> Optional[SunriseForecast]:
        try:
            raw = await self.store.get(self.cache_key)
        except StorageError as e:
            logger.warning("sunrise.cache.read_failed", error=e.message)
            return None

        if raw is None:
            return None

        try:
            return self._to_entity(json.loads(raw))
        except (
            ValueError,
            TypeError,
            KeyError,
            InvalidInputError,
            InvalidResponseError,
        ) as e:
            logger.warning("sunrise.cache.malformed", error=str(e))
            return None

    async def _write_cache(self, forecast: SunriseForecast) -> None:
        try:
            await self.store.set(
                self.cache_key, json.dumps(self._to_document(forecast))
            )
        except StorageError as e:
            logger.warning("sunrise.cache.write_failed", error=e.message)

    def _to_document(self, forecast: SunriseForecast) -> Dict[str, Any]:
        """Convert a forecast to its cached JSON document."""
        return {
            "records": [
                {"date": record.date, "sunrise_time": record.sunrise_time}
                for record in forecast.records
            ],
            "timezone": forecast.timezone,
            "coordinate": forecast.coordinate.to_dict(),
            "fetched_at": forecast.fetched_at.isoformat(),
        }

    def _to_entity(self, document: Dict[str, Any]) -> SunriseForecast:
        """Convert a cached JSON document to a forecast."""
        records = []
        for item in document["records"]:
            if not isinstance(item["date"], str) or not isinstance(
                item["sunrise_time"], str
            ):
                raise TypeError("Cached record fields must be strings")
            records.append(
                RawSunriseRecord(date=item["date"], sunrise_time=item["sunrise_time"])
            )

        fetched_at = datetime.fromisoformat(document["fetched_at"])
        if fetched_at.tzinfo is None:
            raise ValueError("Cached fetched_at has no timezone")

        timezone = document.get("timezone")
        return SunriseForecast(
            records=tuple(records),
            timezone=timezone if isinstance(timezone, str) else UNKNOWN_TIMEZONE,
            coordinate=Coordinate.parse(document["coordinate"]),
            fetched_at=fetched_at,
        )
