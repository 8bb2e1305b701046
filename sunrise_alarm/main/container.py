"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager
from datetime import timedelta

from dependency_injector import containers, providers

from sunrise_alarm.application.models import EngineConfig
from sunrise_alarm.application.services import AlarmScheduler, LocationProvider
from sunrise_alarm.application.use_cases import ScheduleEngine
from sunrise_alarm.domain.entities.location import Coordinate
from sunrise_alarm.infrastructure.database import MongoDatabase
from sunrise_alarm.infrastructure.gateways import (
    AlarmHubGateway,
    IpLocationGateway,
    SunriseSunsetGateway,
)
from sunrise_alarm.infrastructure.repositories import (
    MongoFetchLock,
    MongoKeyValueStore,
    SettingsRepository,
    SunriseRepository,
)
from sunrise_alarm.infrastructure.services.notification_sink import (
    InMemoryNotificationSink,
)
from sunrise_alarm.infrastructure.services.system_clock import SystemClock
from sunrise_alarm.shared import PacingPolicy, get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
    )

    key_value_store = providers.Singleton(
        MongoKeyValueStore,
        mongo_database=mongo_database,
        collection_name=config.database.collection_name,
    )

    clock = providers.Singleton(
        SystemClock,
        timezone_name=config.schedule.timezone,
    )

    notification_sink = providers.Singleton(
        InMemoryNotificationSink,
        capacity=config.schedule.notification_capacity,
    )

    # Gateways
    sunrise_gateway = providers.Singleton(
        SunriseSunsetGateway,
        base_url=config.sunrise_api.base_url,
        timeout=config.sunrise_api.timeout,
    )

    alarm_gateway = providers.Singleton(
        AlarmHubGateway,
        hub_url=config.alarm.hub_url,
        timeout=config.alarm.timeout,
    )

    location_gateway = providers.Singleton(
        IpLocationGateway,
        lookup_url=config.location.lookup_url,
        timeout=config.location.timeout,
    )

    # Pacing of the sequential remote calls
    request_pacing = providers.Singleton(
        PacingPolicy,
        min_interval_seconds=config.sunrise_api.request_interval_seconds,
    )

    alarm_pacing = providers.Singleton(
        PacingPolicy,
        min_interval_seconds=config.alarm.arm_interval_seconds,
    )

    fetch_lock = providers.Singleton(
        MongoFetchLock,
        mongo_database=mongo_database,
        clock=clock,
        ttl=providers.Callable(
            lambda seconds: timedelta(seconds=seconds),
            config.sunrise_api.fetch_lock_ttl_seconds,
        ),
        collection_name=config.database.lock_collection_name,
    )

    # Repositories
    sunrise_repository = providers.Singleton(
        SunriseRepository,
        sunrise_gateway=sunrise_gateway,
        store=key_value_store,
        clock=clock,
        pacing=request_pacing,
        cache_ttl=providers.Callable(
            lambda hours: timedelta(hours=hours), config.schedule.cache_ttl_hours
        ),
        drift_threshold=config.location.drift_threshold,
        fetch_lock=fetch_lock,
    )

    settings_repository = providers.Singleton(
        SettingsRepository,
        store=key_value_store,
    )

    # Application
    default_location = providers.Singleton(
        Coordinate,
        latitude=config.location.default_latitude,
        longitude=config.location.default_longitude,
    )

    location_provider = providers.Singleton(
        LocationProvider,
        location_gateway=location_gateway,
        default_location=default_location,
    )

    alarm_scheduler = providers.Singleton(
        AlarmScheduler,
        alarm_gateway=alarm_gateway,
        pacing=alarm_pacing,
        label_prefix=config.alarm.label_prefix,
    )

    engine_config = providers.Singleton(
        EngineConfig,
        default_location=default_location,
        drift_threshold=config.location.drift_threshold,
        offset_step_minutes=config.schedule.offset_step_minutes,
        forecast_max_age=providers.Callable(
            lambda hours: timedelta(hours=hours), config.schedule.cache_ttl_hours
        ),
    )

    # One engine per process, it owns the settings and the held forecast
    schedule_engine = providers.Singleton(
        ScheduleEngine,
        sunrise_repository=sunrise_repository,
        settings_repository=settings_repository,
        location_provider=location_provider,
        alarm_scheduler=alarm_scheduler,
        notification_sink=notification_sink,
        clock=clock,
        config=engine_config,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    Ensures the key-value collection index exists, loads the persisted
    schedule settings into the engine and closes the MongoDB client on
    shutdown.
    """
    container = get_container()

    mongo_database = container.mongo_database()

    try:
        logger.info("container.mongo.ensure_connection")
        await mongo_database.create_indexes(container.config.database.collection_name())

        await container.schedule_engine().initialize()

        logger.info("container.resources.initialized")
        yield container

    finally:
        logger.info("container.mongo.close")
        mongo_database.close()
        logger.info("container.resources.shutdown")
