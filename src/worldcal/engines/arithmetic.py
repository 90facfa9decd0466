"""
worldcal.engines.arithmetic
---------------------------
Date arithmetic. Day-based and time-based additions round-trip through
world-time so they always agree with the canonical conversion; month and
year additions clamp the day to the target month instead of overflowing.
"""

from __future__ import annotations

from typing import Tuple

from worldcal.core.errors import DateOutOfRange
from worldcal.core.types import CalendarDate, TimeOfDay
from .converter import DateConverter
from .intercalary import IntercalaryResolver
from .leap import LeapYearEvaluator
from .tables import YearTables
from .weekday import WeekdayCalculator


class DateArithmetic:
    def __init__(
        self,
        converter: DateConverter,
        weekdays: WeekdayCalculator,
        leap: LeapYearEvaluator,
        resolver: IntercalaryResolver,
        tables: YearTables,
    ):
        self.converter = converter
        self.weekdays = weekdays
        self.leap = leap
        self.resolver = resolver
        self.tables = tables
        self.time = converter.time
        self.n_months = converter.n_months

    # ---------------------------------------------------------
    # Through world-time
    # ---------------------------------------------------------

    def add_seconds(self, date: CalendarDate, seconds: int) -> CalendarDate:
        wt = self.converter.date_to_world_time(date)
        return self.converter.world_time_to_date(wt + seconds)

    def add_minutes(self, date: CalendarDate, minutes: int) -> CalendarDate:
        return self.add_seconds(date, minutes * self.time.seconds_in_minute)

    def add_hours(self, date: CalendarDate, hours: int) -> CalendarDate:
        return self.add_seconds(date, hours * self.time.seconds_per_hour)

    def add_days(self, date: CalendarDate, days: int) -> CalendarDate:
        return self.add_seconds(date, days * self.time.seconds_per_day)

    def add_weeks(self, date: CalendarDate, weeks: int) -> CalendarDate:
        return self.add_days(date, weeks * self.weekdays.count)

    # ---------------------------------------------------------
    # Clamping
    # ---------------------------------------------------------

    def add_months(self, date: CalendarDate, months: int) -> CalendarDate:
        month, day = self._month_anchor(date)
        year, month = self.normalize_month(date.year, month + months)
        return self._clamped(year, month, day, date.time)

    def add_years(self, date: CalendarDate, years: int) -> CalendarDate:
        seg = self.tables.segment_for(date)
        year = date.year + years
        self.converter.check_year(year)

        if date.intercalary is not None:
            try:
                anchor, entry = self.resolver.find_period(year, date.intercalary, seg.month)
            except DateOutOfRange:
                # The period skips this year (leap-only); land on its anchor month's last day.
                return self._clamped(year, seg.month, self.leap.month_length(year, seg.month), date.time)
            return self._build(year, anchor, min(date.day, entry.days), date.time, entry.name)

        return self._clamped(year, seg.month, date.day, date.time)

    def normalize_month(self, year: int, month: int) -> Tuple[int, int]:
        """Wrap a month number that ran past either end of the year."""
        q, r = divmod(month - 1, self.n_months)
        return year + q, r + 1

    def _month_anchor(self, date: CalendarDate) -> Tuple[int, int]:
        """(month, day) to count from; an intercalary date counts as its anchor month's last day."""
        seg = self.tables.segment_for(date)
        if seg.period is not None:
            return seg.month, self.leap.month_length(date.year, seg.month)
        return seg.month, date.day

    def _clamped(self, year: int, month: int, day: int, time: TimeOfDay) -> CalendarDate:
        self.converter.check_year(year)
        return self._build(year, month, min(day, self.leap.month_length(year, month)), time, None)

    def _build(self, year: int, month: int, day: int, time: TimeOfDay, intercalary) -> CalendarDate:
        return CalendarDate(
            year=year,
            month=month,
            day=day,
            weekday=self.weekdays.weekday_for(year, month, day, intercalary),
            time=time,
            intercalary=intercalary,
        )

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def days_between(self, a: CalendarDate, b: CalendarDate) -> int:
        delta = self.converter.date_to_world_time(b) - self.converter.date_to_world_time(a)
        return delta // self.time.seconds_per_day

    def compare_dates(self, a: CalendarDate, b: CalendarDate) -> int:
        ta = self.converter.date_to_world_time(a)
        tb = self.converter.date_to_world_time(b)
        return (ta > tb) - (ta < tb)
