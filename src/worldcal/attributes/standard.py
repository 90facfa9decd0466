from __future__ import annotations
from typing import Any, Dict

from ..core.time import seconds_of_day
from .registry import register_attribute

DAWN_HOUR = 6
DUSK_HOUR = 18

SEASONS = ("spring", "summer", "autumn", "winter")


def season(info, engine) -> Dict[str, Any]:
    # Four equal bands of months; intercalary days belong to their anchor month.
    n_months = len(engine.definition.months)
    idx = int((info.date.month - 1) // (n_months / 4))
    return {"season": idx, "season_name": SEASONS[idx]}


def day_of_year(info, engine) -> Dict[str, Any]:
    return {"day_of_year": engine.day_of_year(info.date)}


def day_progress(info, engine) -> Dict[str, Any]:
    t = engine.definition.time
    return {"day_progress": seconds_of_day(info.date.time, t) / t.seconds_per_day}


def daytime(info, engine) -> Dict[str, Any]:
    return {"is_daytime": DAWN_HOUR <= info.date.time.hour < DUSK_HOUR}


def weekday_name(info, engine) -> Dict[str, Any]:
    wd = info.date.weekday
    return {"weekday_name": None if wd is None else engine.definition.weekdays[wd].name}


def leap_year(info, engine) -> Dict[str, Any]:
    return {"is_leap_year": engine.is_leap_year(info.date.year)}


register_attribute("season", season)
register_attribute("day_of_year", day_of_year)
register_attribute("day_progress", day_progress)
register_attribute("daytime", daytime)
register_attribute("weekday_name", weekday_name)
register_attribute("leap_year", leap_year)
