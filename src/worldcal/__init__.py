"""worldcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    world_time_to_date,
    date_to_world_time,
    date_info,
    explain,
    list_calendars,
    calendar_info,
    get_engine,
    make_engine,
    register_calendar,
    load_calendar,
    add_days,
    add_weeks,
    add_months,
    add_years,
    add_hours,
    add_minutes,
    add_seconds,
    days_between,
    compare_dates,
    weekday_for,
    is_leap_year,
    year_length,
    total_year_length,
    month_lengths,
    validate_date,
)
from .core.errors import ConversionOverflow, DateOutOfRange, DefinitionInvalid, WorldcalError
from .core.types import NO_WEEKDAY, CalendarDate, CalendarDefinition, EngineOptions, TimeOfDay
from .formatting import format_date

__version__ = "0.1.0"

__all__ = [
    "world_time_to_date",
    "date_to_world_time",
    "date_info",
    "explain",
    "list_calendars",
    "calendar_info",
    "get_engine",
    "make_engine",
    "register_calendar",
    "load_calendar",
    "add_days",
    "add_weeks",
    "add_months",
    "add_years",
    "add_hours",
    "add_minutes",
    "add_seconds",
    "days_between",
    "compare_dates",
    "weekday_for",
    "is_leap_year",
    "year_length",
    "total_year_length",
    "month_lengths",
    "validate_date",
    "format_date",
    "CalendarDate",
    "CalendarDefinition",
    "EngineOptions",
    "TimeOfDay",
    "NO_WEEKDAY",
    "WorldcalError",
    "DefinitionInvalid",
    "DateOutOfRange",
    "ConversionOverflow",
]
