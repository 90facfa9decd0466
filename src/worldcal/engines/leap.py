"""
worldcal.engines.leap
---------------------
Leap-year rules and the month lengths they produce.
"""

from __future__ import annotations

from typing import Optional, Tuple

from worldcal.core.types import CalendarDefinition

GREGORIAN_CYCLE = 400


def gregorian_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


class LeapYearEvaluator:
    """
    Decides leap years and the extra days they add to the leap month.

    Year numbers of any sign use Python's floor modulo, so year 0 and
    negative years follow the same rule as positive ones.
    """

    def __init__(self, definition: CalendarDefinition):
        self.rule = definition.leap_year
        self._base: Tuple[int, ...] = tuple(m.days for m in definition.months)
        self._leap_month = self._resolve_leap_month(definition)

        extra = 0
        if self.rule.rule == "gregorian":
            extra = 1
        elif self.rule.rule == "custom":
            extra = self.rule.extra_days
        self._extra = extra if self._leap_month is not None else 0

        leap_lengths = list(self._base)
        if self._leap_month is not None:
            leap_lengths[self._leap_month] += self._extra
        self._leap: Tuple[int, ...] = tuple(leap_lengths)

    @staticmethod
    def _resolve_leap_month(definition: CalendarDefinition) -> Optional[int]:
        """0-based index of the month that takes the extra days, if any."""
        rule = definition.leap_year
        if rule.rule == "none":
            return None
        names = [m.name for m in definition.months]
        if rule.month is not None:
            # validated at load time; an unknown name here is a programming error
            return names.index(rule.month)
        if rule.rule == "gregorian":
            return 1 if len(names) >= 2 else 0
        return None

    # ---------------------------------------------------------
    # Rule
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        if self.rule.rule == "gregorian":
            return gregorian_leap(year)
        if self.rule.rule == "custom":
            return bool(self.rule.interval) and year % self.rule.interval == 0
        return False

    @property
    def cycle_years(self) -> int:
        """Number of years after which the leap pattern repeats."""
        if self.rule.rule == "gregorian":
            return GREGORIAN_CYCLE
        if self.rule.rule == "custom" and self.rule.interval:
            return self.rule.interval
        return 1

    @property
    def leap_month(self) -> Optional[int]:
        """1-based index of the leap month, or None."""
        return None if self._leap_month is None else self._leap_month + 1

    # ---------------------------------------------------------
    # Lengths
    # ---------------------------------------------------------

    def extra_days(self, year: int) -> int:
        return self._extra if self.is_leap_year(year) else 0

    def month_lengths(self, year: int) -> Tuple[int, ...]:
        return self._leap if self.is_leap_year(year) else self._base

    def month_length(self, year: int, month: int) -> int:
        if not 1 <= month <= len(self._base):
            raise IndexError(f"month {month} outside 1..{len(self._base)}")
        return self.month_lengths(year)[month - 1]

    def year_length(self, year: int) -> int:
        """Days across all months, leap days included, intercalary days excluded."""
        return sum(self._base) + self.extra_days(year)
