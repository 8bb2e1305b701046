from __future__ import annotations

from celery.schedules import crontab

from sunrise_alarm.infrastructure.services.celery_config import (
    ALARM_QUEUE,
    REARM_TASK_NAME,
    create_celery_app,
)


def test_create_celery_app_uses_env(monkeypatch) -> None:
    monkeypatch.setenv("CELERY_BROKER_URL", "amqp://env")
    monkeypatch.setenv("CELERY_RESULT_BACKEND", "rpc://env")
    monkeypatch.setenv("SCHEDULE_REARM_HOUR_UTC", "5")

    app = create_celery_app()

    assert app.conf.broker_url == "amqp://env"
    assert app.conf.result_backend == "rpc://env"
    assert app.conf.task_routes[REARM_TASK_NAME] == {"queue": ALARM_QUEUE}
    entry = app.conf.beat_schedule["rearm-sunrise-alarms-daily"]
    assert entry["schedule"] == crontab(hour=5, minute=0)


def test_create_celery_app_with_explicit_params() -> None:
    app = create_celery_app(
        broker_url="amqp://explicit",
        backend_url="rpc://",
        rearm_hour_utc=3,
    )

    assert app.conf.broker_url == "amqp://explicit"
    assert app.conf.result_backend == "rpc://"
    entry = app.conf.beat_schedule["rearm-sunrise-alarms-daily"]
    assert entry["task"] == REARM_TASK_NAME
    assert entry["schedule"] == crontab(hour=3, minute=0)
    assert entry["options"] == {"queue": ALARM_QUEUE}
