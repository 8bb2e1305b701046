#!/usr/bin/env python3
"""
Worker Entry Point - Main Layer

This module serves as the entry point for the Celery worker that re-arms
the sunrise alarms every day. The worker runs with an embedded beat
scheduler so a single process both schedules and executes the task.
"""

import os

from sunrise_alarm.main.config import get_settings
from sunrise_alarm.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

# Configure logging with basic settings first
configure_logging()

# Load settings
settings = get_settings()

# Update logging with complete settings
update_logging_from_settings(settings)

logger = get_logger(__name__)


def create_worker():
    """
    Configure and return the Celery worker.

    Similar to create_app() in app.py, this function configures
    the worker with proper settings and environment.
    """
    settings = get_settings()

    os.environ.setdefault("CELERY_BROKER_URL", settings.celery.broker_url)
    os.environ.setdefault("CELERY_RESULT_BACKEND", settings.celery.result_backend_url)
    os.environ.setdefault(
        "SCHEDULE_REARM_HOUR_UTC", str(settings.schedule.rearm_hour_utc)
    )

    from sunrise_alarm.infrastructure.services.celery_config import create_celery_app

    worker_app = create_celery_app(
        broker_url=settings.celery.broker_url,
        backend_url=settings.celery.result_backend_url,
        rearm_hour_utc=settings.schedule.rearm_hour_utc,
    )

    logger.info(
        "Configuring Celery worker",
        broker_url=settings.celery.broker_url,
        backend_url=settings.celery.result_backend_url,
        rearm_hour_utc=settings.schedule.rearm_hour_utc,
        app_name=worker_app.main,
    )

    return worker_app


def main():
    """Main entry point for Celery worker."""

    logger.info("Starting Celery worker")

    worker_app = create_worker()

    worker_app.worker_main(
        [
            "worker",
            "--beat",
            "--loglevel=info",
            "--queues=alarm_scheduling",
            "--concurrency=1",  # alarm calls must stay sequential
        ]
    )


if __name__ == "__main__":
    main()
