"""
Schedule provider implementations.
"""

from src.trip_planner.adapters.data_providers.frame_schedule_provider import (
    FrameScheduleProvider,
)
from src.trip_planner.adapters.data_providers.text_schedule_provider import (
    TextScheduleProvider,
    parse_meridiem_time,
    parse_schedule,
)

__all__ = [
    "FrameScheduleProvider",
    "TextScheduleProvider",
    "parse_meridiem_time",
    "parse_schedule",
]
