"""
worldcal.engines.tables
-----------------------
Memoized year layouts and per-cycle prefix sums.

A year's layout depends only on whether it is a leap year, so at most two
layouts exist per definition. Leap rules repeat every ``cycle_years``
years, which lets whole cycles be skipped with integer division; the
remainder is resolved against a prefix-sum table over one cycle.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from worldcal.core.errors import DateOutOfRange
from worldcal.core.types import CalendarDate, CalendarDefinition, IntercalaryEntry
from .intercalary import IntercalaryResolver
from .leap import LeapYearEvaluator


@dataclass(frozen=True)
class Segment:
    """A month, or one intercalary period, placed within its year."""
    start: int          # 0-based day-of-year of its first day
    length: int
    month: int          # 1-based; the anchor month for a period
    weekday_start: int  # weekday-counting days in the year before this segment
    counts: bool
    period: Optional[IntercalaryEntry] = None


class YearLayout:
    def __init__(self, is_leap: bool, segments: List[Segment]):
        self.is_leap = is_leap
        self.segments: Tuple[Segment, ...] = tuple(segments)
        self._starts = [s.start for s in self.segments]
        self.months: Tuple[Segment, ...] = tuple(s for s in self.segments if s.period is None)
        last = self.segments[-1]
        self.total_days = last.start + last.length
        self.weekday_days = last.weekday_start + (last.length if last.counts else 0)

    def locate(self, day_of_year: int) -> Tuple[Segment, int]:
        """Segment holding a 0-based day-of-year and the 1-based day within it."""
        if not 0 <= day_of_year < self.total_days:
            raise IndexError(f"day-of-year {day_of_year} outside 0..{self.total_days - 1}")
        seg = self.segments[bisect_right(self._starts, day_of_year) - 1]
        return seg, day_of_year - seg.start + 1

    def period(self, entry: IntercalaryEntry, month: int) -> Segment:
        for seg in self.segments:
            if seg.period is entry and seg.month == month:
                return seg
        raise KeyError(f"period '{entry.name}' not in this layout")


def build_layout(year: int, leap: LeapYearEvaluator, resolver: IntercalaryResolver) -> YearLayout:
    lengths = leap.month_lengths(year)
    periods = resolver.periods_by_month(year)

    segments: List[Segment] = []
    start = 0
    wstart = 0
    for m, length in enumerate(lengths, start=1):
        segments.append(Segment(start=start, length=length, month=m, weekday_start=wstart, counts=True))
        start += length
        wstart += length
        for entry in periods[m - 1]:
            segments.append(
                Segment(
                    start=start,
                    length=entry.days,
                    month=m,
                    weekday_start=wstart,
                    counts=entry.counts_for_weekdays,
                    period=entry,
                )
            )
            start += entry.days
            if entry.counts_for_weekdays:
                wstart += entry.days
    return YearLayout(leap.is_leap_year(year), segments)


class YearTables:
    def __init__(self, definition: CalendarDefinition, leap: LeapYearEvaluator, resolver: IntercalaryResolver):
        self.epoch = definition.epoch
        self.leap = leap
        self.resolver = resolver
        self.cycle_years = leap.cycle_years
        self._layouts: Dict[bool, YearLayout] = {}

        years = range(self.epoch, self.epoch + self.cycle_years)
        totals = np.array([self.layout(y).total_days for y in years], dtype=np.int64)
        wtotals = np.array([self.layout(y).weekday_days for y in years], dtype=np.int64)

        self._day_prefix = np.concatenate(([0], np.cumsum(totals))).astype(np.int64)
        self._weekday_prefix = np.concatenate(([0], np.cumsum(wtotals))).astype(np.int64)
        self.cycle_days = int(self._day_prefix[-1])
        self.cycle_weekday_days = int(self._weekday_prefix[-1])

    def layout(self, year: int) -> YearLayout:
        is_leap = self.leap.is_leap_year(year)
        lay = self._layouts.get(is_leap)
        if lay is None:
            lay = build_layout(year, self.leap, self.resolver)
            self._layouts[is_leap] = lay
        return lay

    def total_days(self, year: int) -> int:
        return self.layout(year).total_days

    def weekday_days(self, year: int) -> int:
        return self.layout(year).weekday_days

    def segment_for(self, date: CalendarDate) -> Segment:
        """The month or period segment a date lies in; raises DateOutOfRange."""
        layout = self.layout(date.year)
        if date.intercalary is not None:
            month, entry = self.resolver.find_period(date.year, date.intercalary, date.month)
            seg = layout.period(entry, month)
            if not 1 <= date.day <= seg.length:
                raise DateOutOfRange(
                    f"Day {date.day} outside 1..{seg.length} of '{date.intercalary}' in year {date.year}"
                )
            return seg

        n_months = len(layout.months)
        if date.month is None or not 1 <= date.month <= n_months:
            raise DateOutOfRange(f"Month {date.month} outside 1..{n_months}")
        seg = layout.months[date.month - 1]
        if not 1 <= date.day <= seg.length:
            raise DateOutOfRange(
                f"Day {date.day} outside 1..{seg.length} of month {date.month} in year {date.year}"
            )
        return seg

    # ---------------------------------------------------------
    # Cycle arithmetic (Python ints throughout; numpy only holds the table)
    # ---------------------------------------------------------

    def days_before_year(self, year: int) -> int:
        """Signed day count from day 1 of the epoch year to day 1 of ``year``."""
        q, r = divmod(year - self.epoch, self.cycle_years)
        return q * self.cycle_days + int(self._day_prefix[r])

    def weekday_days_before_year(self, year: int) -> int:
        q, r = divmod(year - self.epoch, self.cycle_years)
        return q * self.cycle_weekday_days + int(self._weekday_prefix[r])

    def locate_year(self, days: int) -> Tuple[int, int]:
        """Map a signed day count since the epoch to (year, 0-based day-of-year)."""
        q, r = divmod(days, self.cycle_days)
        k = int(np.searchsorted(self._day_prefix, r, side="right")) - 1
        return self.epoch + q * self.cycle_years + k, r - int(self._day_prefix[k])
