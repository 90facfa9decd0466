"""
worldcal.engines.intercalary
----------------------------
Resolves which intercalary periods occur in a year and expands them into
individual days.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from worldcal.core.errors import DateOutOfRange
from worldcal.core.types import CalendarDefinition, IntercalaryDay, IntercalaryEntry
from .leap import LeapYearEvaluator


class IntercalaryResolver:
    def __init__(self, definition: CalendarDefinition, leap: LeapYearEvaluator):
        self.leap = leap
        self._n_months = len(definition.months)

        # Month-name anchors are looked up once per definition.
        self.month_index: Dict[str, int] = {m.name: i + 1 for i, m in enumerate(definition.months)}

        slots: List[List[IntercalaryEntry]] = [[] for _ in range(self._n_months)]
        for entry in definition.intercalary:
            slots[self.month_index[entry.after] - 1].append(entry)
        self._all: Tuple[Tuple[IntercalaryEntry, ...], ...] = tuple(tuple(s) for s in slots)
        self._common = tuple(tuple(e for e in s if not e.leap_year_only) for s in self._all)

    def periods_by_month(self, year: int) -> Tuple[Tuple[IntercalaryEntry, ...], ...]:
        """Per month (0-based), the periods that follow it in ``year``, in declaration order."""
        return self._all if self.leap.is_leap_year(year) else self._common

    def periods_after_month(self, year: int, month: int) -> Tuple[IntercalaryEntry, ...]:
        if not 1 <= month <= self._n_months:
            raise IndexError(f"month {month} outside 1..{self._n_months}")
        return self.periods_by_month(year)[month - 1]

    def intercalary_days_for_year(self, year: int) -> List[IntercalaryDay]:
        out: List[IntercalaryDay] = []
        for m in range(1, self._n_months + 1):
            out.extend(self.intercalary_days_after_month(year, m))
        return out

    def intercalary_days_after_month(self, year: int, month: int) -> List[IntercalaryDay]:
        out: List[IntercalaryDay] = []
        for entry in self.periods_after_month(year, month):
            for k in range(1, entry.days + 1):
                out.append(
                    IntercalaryDay(
                        name=entry.name,
                        after_month=month,
                        day_index=k,
                        period_days=entry.days,
                        counts_for_weekdays=entry.counts_for_weekdays,
                    )
                )
        return out

    def day_count(self, year: int) -> int:
        return sum(e.days for s in self.periods_by_month(year) for e in s)

    def weekday_day_count(self, year: int) -> int:
        return sum(e.days for s in self.periods_by_month(year) for e in s if e.counts_for_weekdays)

    def find_period(self, year: int, name: str, month: Optional[int] = None) -> Tuple[int, IntercalaryEntry]:
        """
        Locate a named period in ``year``; ``month`` disambiguates repeated names.
        Returns (anchor month, entry).
        """
        for m, slot in enumerate(self.periods_by_month(year), start=1):
            if month is not None and m != month:
                continue
            for entry in slot:
                if entry.name == name:
                    return m, entry
        where = f" after month {month}" if month is not None else ""
        raise DateOutOfRange(f"Intercalary period '{name}'{where} does not occur in year {year}")
