from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .core.engine import CalendarRegistry
from .core.time import Number, whole_seconds
from .core.types import CalendarDate, CalendarDefinition, DateInfo, EngineOptions
from .attributes.registry import compute_attributes
from .attributes import standard as _standard  # noqa: F401  (registers attributes)
from .engines.calendar import CalendarEngine
from .engines.factory import make_engine as _make_engine
from .engines.specs import load_definition
from .formatting import format_date

logger = logging.getLogger(__name__)

DEFAULT_CALENDAR = "gregorian"
_registry: Optional[CalendarRegistry] = None


def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry


# ============================================================
# Registry
# ============================================================

def list_calendars() -> List[str]:
    return _reg().list()


def calendar_info(calendar_id: str) -> Dict[str, Any]:
    return _reg().get(calendar_id).info()


def get_engine(calendar_id: str = DEFAULT_CALENDAR) -> CalendarEngine:
    return _reg().get(calendar_id)


def make_engine(defn: CalendarDefinition, options: Optional[EngineOptions] = None) -> CalendarEngine:
    return _make_engine(defn, options)


def register_calendar(
    calendar: Union[CalendarDefinition, CalendarEngine],
    *,
    name: Optional[str] = None,
    overwrite: bool = False,
) -> CalendarEngine:
    """Register a definition (built into an engine) or a ready engine."""
    engine = calendar if isinstance(calendar, CalendarEngine) else _make_engine(calendar)
    _reg().register(name or engine.id, engine, overwrite=overwrite)
    logger.info("registered calendar '%s'", name or engine.id)
    return engine


def load_calendar(path: Union[str, Path], *, overwrite: bool = False) -> CalendarEngine:
    """Load a JSON or YAML calendar document and register it under its id."""
    return register_calendar(load_definition(path), overwrite=overwrite)


# ============================================================
# Conversion (the host-facing surface)
# ============================================================

def world_time_to_date(
    world_time: Number,
    calendar_id: str = DEFAULT_CALENDAR,
    *,
    hint_year: Optional[int] = None,
) -> CalendarDate:
    return _reg().get(calendar_id).world_time_to_date(world_time, hint_year=hint_year)


def date_to_world_time(date: CalendarDate, calendar_id: str = DEFAULT_CALENDAR) -> int:
    return _reg().get(calendar_id).date_to_world_time(date)


def date_info(
    world_time: Number,
    calendar_id: str = DEFAULT_CALENDAR,
    *,
    attributes: Sequence[str] = (),
    debug: bool = False,
    hint_year: Optional[int] = None,
) -> DateInfo:
    eng = _reg().get(calendar_id)
    date = eng.world_time_to_date(world_time, hint_year=hint_year)
    info = DateInfo(
        calendar_id=eng.id,
        world_time=whole_seconds(world_time),
        date=date,
        label=format_date(eng.definition, date, include_time=True),
        debug=eng.explain(world_time) if debug else None,
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, eng, attributes))
    return info


def explain(world_time: Number, calendar_id: str = DEFAULT_CALENDAR) -> Dict[str, Any]:
    return _reg().get(calendar_id).explain(world_time)


# ============================================================
# Arithmetic
# ============================================================

def add_days(date: CalendarDate, days: int, calendar_id: str = DEFAULT_CALENDAR) -> CalendarDate:
    return _reg().get(calendar_id).add_days(date, days)


def add_weeks(date: CalendarDate, weeks: int, calendar_id: str = DEFAULT_CALENDAR) -> CalendarDate:
    return _reg().get(calendar_id).add_weeks(date, weeks)


def add_months(date: CalendarDate, months: int, calendar_id: str = DEFAULT_CALENDAR) -> CalendarDate:
    return _reg().get(calendar_id).add_months(date, months)


def add_years(date: CalendarDate, years: int, calendar_id: str = DEFAULT_CALENDAR) -> CalendarDate:
    return _reg().get(calendar_id).add_years(date, years)


def add_hours(date: CalendarDate, hours: int, calendar_id: str = DEFAULT_CALENDAR) -> CalendarDate:
    return _reg().get(calendar_id).add_hours(date, hours)


def add_minutes(date: CalendarDate, minutes: int, calendar_id: str = DEFAULT_CALENDAR) -> CalendarDate:
    return _reg().get(calendar_id).add_minutes(date, minutes)


def add_seconds(date: CalendarDate, seconds: int, calendar_id: str = DEFAULT_CALENDAR) -> CalendarDate:
    return _reg().get(calendar_id).add_seconds(date, seconds)


def days_between(a: CalendarDate, b: CalendarDate, calendar_id: str = DEFAULT_CALENDAR) -> int:
    return _reg().get(calendar_id).days_between(a, b)


def compare_dates(a: CalendarDate, b: CalendarDate, calendar_id: str = DEFAULT_CALENDAR) -> int:
    return _reg().get(calendar_id).compare_dates(a, b)


# ============================================================
# Calendar structure
# ============================================================

def weekday_for(
    year: int,
    month: Optional[int],
    day: int,
    calendar_id: str = DEFAULT_CALENDAR,
    *,
    intercalary: Optional[str] = None,
) -> Optional[int]:
    return _reg().get(calendar_id).weekday_for(year, month, day, intercalary)


def is_leap_year(year: int, calendar_id: str = DEFAULT_CALENDAR) -> bool:
    return _reg().get(calendar_id).is_leap_year(year)


def year_length(year: int, calendar_id: str = DEFAULT_CALENDAR) -> int:
    return _reg().get(calendar_id).year_length(year)


def total_year_length(year: int, calendar_id: str = DEFAULT_CALENDAR) -> int:
    return _reg().get(calendar_id).total_year_length(year)


def month_lengths(year: int, calendar_id: str = DEFAULT_CALENDAR) -> Tuple[int, ...]:
    return _reg().get(calendar_id).month_lengths(year)


def validate_date(date: CalendarDate, calendar_id: str = DEFAULT_CALENDAR) -> CalendarDate:
    return _reg().get(calendar_id).validate_date(date)

