"""
Alarm Scheduler - Application Layer

Maps adjusted sunrises to weekly alarm slots and drives the platform
alarm capability one call at a time.
"""

from datetime import datetime
from typing import List, Optional, Sequence

from sunrise_alarm.domain.entities.errors import AlarmArmError
from sunrise_alarm.domain.entities.schedule import AlarmSlot
from sunrise_alarm.domain.entities.sunrise import AdjustedSunrise
from sunrise_alarm.domain.gateways.alarm_gateway import IAlarmGateway
from sunrise_alarm.domain.services.weekdays import weekday_for_index, weekday_name
from sunrise_alarm.shared import PacingPolicy, get_logger

logger = get_logger(__name__)

DEFAULT_LABEL_PREFIX = "Sunrise Alarm"


class AlarmScheduler:
    """Arms one recurring weekly alarm per adjusted sunrise."""

    def __init__(
        self,
        alarm_gateway: IAlarmGateway,
        pacing: PacingPolicy,
        label_prefix: str = DEFAULT_LABEL_PREFIX,
    ):
        """
        Initialize the scheduler.

        Args:
            alarm_gateway: Platform alarm capability
            pacing: Minimum interval enforced between consecutive alarm calls
            label_prefix: Text placed before the weekday name in alarm labels
        """
        self.alarm_gateway = alarm_gateway
        self.pacing = pacing
        self.label_prefix = label_prefix

    def label_for(self, weekday: int) -> str:
        return f"{self.label_prefix} {weekday_name(weekday)}"

    def build_slots(
        self, sunrises: Sequence[AdjustedSunrise], current_weekday: int
    ) -> List[AlarmSlot]:
        """
        Build the alarm slots for a circularly ordered list of sunrises.

        Entry ``i`` lands on the weekday ``i`` days after ``current_weekday``.
        Only the hour and minute of each timestamp are kept.
        """
        slots = []
        for index, sunrise in enumerate(sunrises):
            weekday = weekday_for_index(current_weekday, index)
            slots.append(
                AlarmSlot(
                    weekday=weekday,
                    hour=sunrise.absolute_time.hour,
                    minute=sunrise.absolute_time.minute,
                    label=self.label_for(weekday),
                )
            )
        return slots

    async def schedule_one(
        self, time: datetime, weekday: int, label: Optional[str] = None
    ) -> AlarmSlot:
        """
        Arm a single weekly alarm.

        Raises:
            AlarmArmError: If the alarm capability rejects the call
        """
        slot = AlarmSlot(
            weekday=weekday,
            hour=time.hour,
            minute=time.minute,
            label=label or self.label_for(weekday),
        )
        await self._arm(slot)
        return slot

    async def schedule_all(
        self, sunrises: Sequence[AdjustedSunrise], current_weekday: int
    ) -> List[AlarmSlot]:
        """
        Arm one alarm per sunrise, strictly in order.

        Alarms armed before a failure stay armed. Arming again with the
        same inputs overwrites the same weekday and label keys.

        Returns:
            The armed slots, in arming order

        Raises:
            AlarmArmError: For the first weekday the capability rejects
        """
        slots = self.build_slots(sunrises, current_weekday)
        logger.info(
            "alarm.schedule_all.started",
            count=len(slots),
            current_weekday=current_weekday,
        )

        armed: List[AlarmSlot] = []
        async for slot in self.pacing.paced(slots):
            await self._arm(slot)
            armed.append(slot)

        logger.info("alarm.schedule_all.completed", count=len(armed))
        return armed

    async def cancel_all(self) -> List[int]:
        """
        Dismiss the seven labelled weekly alarms.

        Returns:
            The weekdays that were dismissed

        Raises:
            AlarmArmError: For the first weekday that could not be dismissed
        """
        dismissed: List[int] = []
        async for weekday in self.pacing.paced(range(1, 8)):
            label = self.label_for(weekday)
            try:
                await self.alarm_gateway.dismiss_alarm(weekday, label)
            except AlarmArmError as e:
                logger.error(
                    "alarm.dismiss.failed",
                    weekday=weekday,
                    label=label,
                    error=e.message,
                )
                raise
            dismissed.append(weekday)

        logger.info("alarm.cancel_all.completed", count=len(dismissed))
        return dismissed

    async def _arm(self, slot: AlarmSlot) -> None:
        try:
            await self.alarm_gateway.arm_weekly_alarm(
                hour=slot.hour,
                minute=slot.minute,
                weekday=slot.weekday,
                label=slot.label,
            )
        except AlarmArmError as e:
            logger.error(
                "alarm.arm.failed",
                weekday=slot.weekday,
                label=slot.label,
                error=e.message,
            )
            raise

        logger.debug(
            "alarm.arm.succeeded",
            weekday=slot.weekday,
            hour=slot.hour,
            minute=slot.minute,
            label=slot.label,
        )
