from __future__ import annotations
import math
from typing import Tuple, Union

from .types import TimeConfig, TimeOfDay

Number = Union[int, float]


def whole_seconds(world_time: Number) -> int:
    """Floor a world-time value to integer seconds."""
    if isinstance(world_time, bool):
        raise TypeError("world-time must be a number, not bool")
    if isinstance(world_time, int):
        return world_time
    if not math.isfinite(world_time):
        raise ValueError(f"world-time must be finite, got {world_time!r}")
    return math.floor(world_time)


def split_seconds(total: int, time: TimeConfig) -> Tuple[int, int]:
    """Split signed seconds into (days, seconds-into-day) with 0 <= seconds < day."""
    return divmod(total, time.seconds_per_day)


def time_of_day(seconds_in_day: int, time: TimeConfig) -> TimeOfDay:
    hour, rest = divmod(seconds_in_day, time.seconds_per_hour)
    minute, second = divmod(rest, time.seconds_in_minute)
    return TimeOfDay(hour, minute, second)


def seconds_of_day(tod: TimeOfDay, time: TimeConfig) -> int:
    return tod.hour * time.seconds_per_hour + tod.minute * time.seconds_in_minute + tod.second


def time_in_range(tod: TimeOfDay, time: TimeConfig) -> bool:
    return (
        0 <= tod.hour < time.hours_in_day
        and 0 <= tod.minute < time.minutes_in_hour
        and 0 <= tod.second < time.seconds_in_minute
    )
