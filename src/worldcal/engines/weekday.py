"""
worldcal.engines.weekday
------------------------
Weekday index from the count of weekday-counting days since the epoch.

Days that do not count for weekdays still occupy a date but hold the
counter still; standing on one yields ``NO_WEEKDAY``.
"""

from __future__ import annotations

from typing import Optional

from worldcal.core.types import NO_WEEKDAY, CalendarDate, CalendarDefinition
from .tables import Segment, YearTables


class WeekdayCalculator:
    def __init__(self, definition: CalendarDefinition, tables: YearTables):
        self.tables = tables
        self.count = len(definition.weekdays)
        self.start_day = definition.year.start_day

    def counting_days_before(self, year: int, seg: Segment, day: int) -> int:
        """Weekday-counting days from day 1 of the epoch year up to (not including) this day."""
        within = day - 1 if seg.counts else 0
        return self.tables.weekday_days_before_year(year) + seg.weekday_start + within

    def weekday_in_segment(self, year: int, seg: Segment, day: int) -> Optional[int]:
        if not seg.counts:
            return NO_WEEKDAY
        return (self.counting_days_before(year, seg, day) + self.start_day) % self.count

    def weekday_for(self, year: int, month: Optional[int], day: int, intercalary: Optional[str] = None) -> Optional[int]:
        date = CalendarDate(year=year, month=month, day=day, intercalary=intercalary)
        seg = self.tables.segment_for(date)
        return self.weekday_in_segment(year, seg, day)
