"""Celery task re-arming the weekly sunrise alarms once a day."""

from __future__ import annotations

import asyncio
from typing import Any, Dict

from celery import shared_task

from sunrise_alarm.infrastructure.services.celery_config import REARM_TASK_NAME
from sunrise_alarm.infrastructure.services.tasks.base import CallbackTask, logger


async def _rearm(engine) -> Dict[str, Any]:
    await engine.initialize()
    outcome = await engine.refresh(force_refresh=False)

    if engine.forecast is None:
        logger.info("rearm.skipped", reason=outcome.reason)
        return {"armed": 0, "skipped": outcome.reason}

    slots = await engine.arm_all_alarms()
    return {
        "armed": len(slots),
        "alarms": [
            {"weekday": slot.weekday, "time": f"{slot.hour:02d}:{slot.minute:02d}"}
            for slot in slots
        ],
    }


@shared_task(bind=True, base=CallbackTask, name=REARM_TASK_NAME)
def rearm_sunrise_alarms(self) -> Dict[str, Any]:
    """Refresh the forecast if stale and arm the seven weekly alarms."""

    from sunrise_alarm.main.config import get_settings
    from sunrise_alarm.main.container import init_container

    container = init_container(get_settings())
    try:
        result = asyncio.run(_rearm(container.schedule_engine()))
        logger.info("rearm.completed", armed=result["armed"])
        return result
    finally:
        container.mongo_database().close()
