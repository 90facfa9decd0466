"""
worldcal.engines.converter
--------------------------
Bidirectional mapping between world-time seconds and calendar dates.

Day counts are signed and measured from day 1 of the epoch year. The
real-time interpretation only moves world-time zero to day 1 of the
anchor year; everything below that works on epoch-relative days.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from worldcal.core.errors import ConversionOverflow, DateOutOfRange
from worldcal.core.time import Number, seconds_of_day, split_seconds, time_in_range, time_of_day, whole_seconds
from worldcal.core.types import CalendarDate, CalendarDefinition, EngineOptions
from .intercalary import IntercalaryResolver
from .leap import LeapYearEvaluator
from .tables import YearTables
from .weekday import WeekdayCalculator

logger = logging.getLogger(__name__)


class DateConverter:
    def __init__(
        self,
        definition: CalendarDefinition,
        leap: LeapYearEvaluator,
        resolver: IntercalaryResolver,
        tables: YearTables,
        weekdays: WeekdayCalculator,
        options: EngineOptions,
    ):
        self.definition = definition
        self.leap = leap
        self.resolver = resolver
        self.tables = tables
        self.weekdays = weekdays
        self.options = options
        self.time = definition.time
        self.n_months = len(definition.months)

        # Seconds from world-time zero back to day 1 of the epoch year.
        self.offset_seconds = tables.days_before_year(definition.anchor_year) * self.time.seconds_per_day

    # ---------------------------------------------------------
    # World-time <-> internal seconds
    # ---------------------------------------------------------

    def to_internal(self, world_time: Number) -> int:
        return whole_seconds(world_time) + self.offset_seconds

    def from_internal(self, seconds: int) -> int:
        return seconds - self.offset_seconds

    # ---------------------------------------------------------
    # Forward: world-time to date
    # ---------------------------------------------------------

    def world_time_to_date(self, world_time: Number, *, hint_year: Optional[int] = None) -> CalendarDate:
        days, secs = split_seconds(self.to_internal(world_time), self.time)
        date = self.days_to_date(days, hint_year=hint_year)
        return CalendarDate(
            year=date.year,
            month=date.month,
            day=date.day,
            weekday=date.weekday,
            time=time_of_day(secs, self.time),
            intercalary=date.intercalary,
        )

    def days_to_date(self, days: int, *, hint_year: Optional[int] = None) -> CalendarDate:
        if hint_year is None:
            year, doy = self.tables.locate_year(days)
        else:
            year, doy = self.walk_years(days, hint_year)
        self.check_year(year)

        seg, day = self.tables.layout(year).locate(doy)
        name = seg.period.name if seg.period is not None else None
        return CalendarDate(
            year=year,
            month=seg.month,
            day=day,
            weekday=self.weekdays.weekday_in_segment(year, seg, day),
            intercalary=name,
        )

    def walk_years(self, days: int, hint_year: int) -> Tuple[int, int]:
        """
        Step one year at a time from ``hint_year`` until ``days`` falls inside
        the current year. Returns (year, 0-based day-of-year).
        """
        year = hint_year
        remaining = days - self.tables.days_before_year(year)
        logger.debug("walking from hint year %d with %d days remaining", year, remaining)
        steps = 0
        while remaining < 0:
            year -= 1
            remaining += self.tables.total_days(year)
            steps += 1
            self._check_steps(steps, hint_year)
        while remaining >= self.tables.total_days(year):
            remaining -= self.tables.total_days(year)
            year += 1
            steps += 1
            self._check_steps(steps, hint_year)
        return year, remaining

    # ---------------------------------------------------------
    # Inverse: date to world-time
    # ---------------------------------------------------------

    def date_to_world_time(self, date: CalendarDate) -> int:
        if not time_in_range(date.time, self.time):
            raise DateOutOfRange(f"Time of day {date.time} outside this calendar's day")
        days = self.date_to_days(date)
        return self.from_internal(days * self.time.seconds_per_day + seconds_of_day(date.time, self.time))

    def date_to_days(self, date: CalendarDate) -> int:
        self.check_year(date.year)
        seg = self.tables.segment_for(date)
        return self.tables.days_before_year(date.year) + seg.start + date.day - 1

    # ---------------------------------------------------------
    # Budgets
    # ---------------------------------------------------------

    def check_year(self, year: int) -> None:
        if abs(year - self.definition.epoch) > self.options.max_years:
            raise ConversionOverflow(
                f"Year {year} is more than {self.options.max_years} years from epoch {self.definition.epoch}"
            )

    def _check_steps(self, steps: int, hint_year: int) -> None:
        if steps > self.options.walk_budget:
            raise ConversionOverflow(
                f"Year walk from hint year {hint_year} exceeded {self.options.walk_budget} steps"
            )
