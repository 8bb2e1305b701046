from .engine_config import EngineConfig
from .schedule_view import RefreshOutcome, ScheduleEntry, ScheduleView

__all__ = ["EngineConfig", "RefreshOutcome", "ScheduleEntry", "ScheduleView"]
