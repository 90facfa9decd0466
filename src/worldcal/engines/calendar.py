"""
worldcal.engines.calendar
-------------------------
The orchestrator. Binds the leap evaluator, intercalary resolver, year
tables, converter, weekday calculator and arithmetic for one immutable
calendar definition.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from worldcal.core.time import Number
from worldcal.core.types import CalendarDate, CalendarDefinition, EngineOptions, IntercalaryDay
from .arithmetic import DateArithmetic
from .converter import DateConverter
from .intercalary import IntercalaryResolver
from .leap import LeapYearEvaluator
from .tables import YearTables
from .weekday import WeekdayCalculator

logger = logging.getLogger(__name__)


class CalendarEngine:
    """
    All cached tables are derived from ``definition`` alone. Switching
    calendars means building a new engine (see ``with_definition``).
    """
    def __init__(self, definition: CalendarDefinition, options: Optional[EngineOptions] = None):
        self.definition = definition
        self.options = options or EngineOptions()

        self.leap = LeapYearEvaluator(definition)
        self.intercalary = IntercalaryResolver(definition, self.leap)
        self.tables = YearTables(definition, self.leap, self.intercalary)
        self.weekdays = WeekdayCalculator(definition, self.tables)
        self.converter = DateConverter(
            definition, self.leap, self.intercalary, self.tables, self.weekdays, self.options
        )
        self.arithmetic = DateArithmetic(
            self.converter, self.weekdays, self.leap, self.intercalary, self.tables
        )
        logger.debug(
            "built engine for '%s': cycle=%d years, %d days",
            definition.id, self.tables.cycle_years, self.tables.cycle_days,
        )

    @property
    def id(self) -> str:
        return self.definition.id

    def with_definition(self, definition: CalendarDefinition) -> "CalendarEngine":
        return CalendarEngine(definition, self.options)

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def world_time_to_date(self, world_time: Number, *, hint_year: Optional[int] = None) -> CalendarDate:
        return self.converter.world_time_to_date(world_time, hint_year=hint_year)

    def date_to_world_time(self, date: CalendarDate) -> int:
        return self.converter.date_to_world_time(date)

    def days_to_date(self, days: int, *, hint_year: Optional[int] = None) -> CalendarDate:
        return self.converter.days_to_date(days, hint_year=hint_year)

    def date_to_days(self, date: CalendarDate) -> int:
        return self.converter.date_to_days(date)

    def validate_date(self, date: CalendarDate) -> CalendarDate:
        """Canonical form of ``date`` with its weekday filled in; raises DateOutOfRange."""
        return self.world_time_to_date(self.date_to_world_time(date))

    # ---------------------------------------------------------
    # Structure
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        return self.leap.is_leap_year(year)

    def year_length(self, year: int) -> int:
        return self.leap.year_length(year)

    def total_year_length(self, year: int) -> int:
        return self.tables.total_days(year)

    def weekday_days_in_year(self, year: int) -> int:
        return self.tables.weekday_days(year)

    def month_lengths(self, year: int) -> Tuple[int, ...]:
        return self.leap.month_lengths(year)

    def month_length(self, year: int, month: int) -> int:
        return self.leap.month_length(year, month)

    def days_before_year(self, year: int) -> int:
        return self.tables.days_before_year(year)

    def day_of_year(self, date: CalendarDate) -> int:
        """1-based ordinal of the date within its year, intercalary days included."""
        return self.date_to_days(date) - self.days_before_year(date.year) + 1

    def intercalary_days_for_year(self, year: int) -> List[IntercalaryDay]:
        return self.intercalary.intercalary_days_for_year(year)

    def intercalary_days_after_month(self, year: int, month: int) -> List[IntercalaryDay]:
        return self.intercalary.intercalary_days_after_month(year, month)

    def weekday_for(self, year: int, month: Optional[int], day: int, intercalary: Optional[str] = None) -> Optional[int]:
        return self.weekdays.weekday_for(year, month, day, intercalary)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def add_days(self, date: CalendarDate, days: int) -> CalendarDate:
        return self.arithmetic.add_days(date, days)

    def add_weeks(self, date: CalendarDate, weeks: int) -> CalendarDate:
        return self.arithmetic.add_weeks(date, weeks)

    def add_months(self, date: CalendarDate, months: int) -> CalendarDate:
        return self.arithmetic.add_months(date, months)

    def add_years(self, date: CalendarDate, years: int) -> CalendarDate:
        return self.arithmetic.add_years(date, years)

    def add_hours(self, date: CalendarDate, hours: int) -> CalendarDate:
        return self.arithmetic.add_hours(date, hours)

    def add_minutes(self, date: CalendarDate, minutes: int) -> CalendarDate:
        return self.arithmetic.add_minutes(date, minutes)

    def add_seconds(self, date: CalendarDate, seconds: int) -> CalendarDate:
        return self.arithmetic.add_seconds(date, seconds)

    def days_between(self, a: CalendarDate, b: CalendarDate) -> int:
        return self.arithmetic.days_between(a, b)

    def compare_dates(self, a: CalendarDate, b: CalendarDate) -> int:
        return self.arithmetic.compare_dates(a, b)

    def normalize_month(self, year: int, month: int) -> Tuple[int, int]:
        return self.arithmetic.normalize_month(year, month)

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        d = self.definition
        return {
            "id": d.id,
            "label": d.display_label,
            "months": len(d.months),
            "weekdays": len(d.weekdays),
            "intercalary": [e.name for e in d.intercalary],
            "leap_rule": d.leap_year.rule,
            "epoch": d.epoch,
            "interpretation": d.world_time.interpretation,
            "anchor_year": d.anchor_year,
            "seconds_per_day": d.time.seconds_per_day,
            "cycle_years": self.tables.cycle_years,
            "cycle_days": self.tables.cycle_days,
        }

    def explain(self, world_time: Number) -> Dict[str, Any]:
        internal = self.converter.to_internal(world_time)
        days, secs = divmod(internal, self.definition.time.seconds_per_day)
        date = self.days_to_date(days)
        return {
            "world_time": world_time,
            "offset_seconds": self.converter.offset_seconds,
            "epoch_seconds": internal,
            "days_since_epoch": days,
            "seconds_into_day": secs,
            "year": date.year,
            "is_leap_year": self.is_leap_year(date.year),
            "day_of_year": days - self.days_before_year(date.year) + 1,
            "total_year_length": self.total_year_length(date.year),
            "date": date.as_dict(),
        }
