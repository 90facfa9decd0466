from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Dict, Literal, Optional, Tuple

LeapRuleKind = Literal["none", "gregorian", "custom"]
Interpretation = Literal["epoch-based", "real-time-based"]

# Weekday carried by days that do not advance the weekday cycle.
NO_WEEKDAY = None


@dataclass(frozen=True)
class Month:
    name: str
    days: int
    abbreviation: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Weekday:
    name: str
    abbreviation: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class LeapYearRule:
    rule: LeapRuleKind = "none"
    interval: Optional[int] = None
    month: Optional[str] = None
    extra_days: int = 1


@dataclass(frozen=True)
class IntercalaryEntry:
    """A run of days outside the month sequence, anchored after a named month."""
    name: str
    after: str
    leap_year_only: bool = False
    counts_for_weekdays: bool = True
    days: int = 1
    description: Optional[str] = None


@dataclass(frozen=True)
class YearConfig:
    epoch: int = 0
    current_year: int = 1
    start_day: int = 0  # weekday index of day 1 of the epoch year
    prefix: str = ""
    suffix: str = ""


@dataclass(frozen=True)
class TimeConfig:
    hours_in_day: int = 24
    minutes_in_hour: int = 60
    seconds_in_minute: int = 60

    @property
    def seconds_per_hour(self) -> int:
        return self.minutes_in_hour * self.seconds_in_minute

    @property
    def seconds_per_day(self) -> int:
        return self.hours_in_day * self.seconds_per_hour


@dataclass(frozen=True)
class WorldTimeConfig:
    interpretation: Interpretation = "epoch-based"
    current_year: Optional[int] = None  # overrides YearConfig.current_year as the anchor


@dataclass(frozen=True)
class CalendarDefinition:
    """Immutable description of one calendar. Replaced wholesale, never mutated."""
    id: str
    months: Tuple[Month, ...]
    weekdays: Tuple[Weekday, ...]
    leap_year: LeapYearRule = field(default_factory=LeapYearRule)
    intercalary: Tuple[IntercalaryEntry, ...] = ()
    year: YearConfig = field(default_factory=YearConfig)
    time: TimeConfig = field(default_factory=TimeConfig)
    world_time: WorldTimeConfig = field(default_factory=WorldTimeConfig)
    label: Optional[str] = None

    @property
    def epoch(self) -> int:
        return self.year.epoch

    @property
    def anchor_year(self) -> int:
        """Year whose first day world-time zero lands on."""
        if self.world_time.interpretation == "real-time-based":
            if self.world_time.current_year is not None:
                return self.world_time.current_year
            return self.year.current_year
        return self.year.epoch

    @property
    def display_label(self) -> str:
        return self.label or self.id


@dataclass(frozen=True)
class TimeOfDay:
    hour: int = 0
    minute: int = 0
    second: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {"hour": self.hour, "minute": self.minute, "second": self.second}


@dataclass(frozen=True)
class CalendarDate:
    """
    A structured calendar date.

    For an intercalary date, ``month`` is the index of the month the period
    follows (or None when supplied by a caller), ``day`` is the position
    within the period and ``intercalary`` holds the period name.
    The weekday is derived data and is ignored by equality.
    """
    year: int
    month: Optional[int]
    day: int
    weekday: Optional[int] = field(default=NO_WEEKDAY, compare=False)
    time: TimeOfDay = field(default_factory=TimeOfDay)
    intercalary: Optional[str] = None

    @property
    def is_intercalary(self) -> bool:
        return self.intercalary is not None

    def with_time(self, hour: int = 0, minute: int = 0, second: int = 0) -> "CalendarDate":
        return replace(self, time=TimeOfDay(hour, minute, second))

    def as_dict(self) -> Dict[str, object]:
        out: Dict[str, object] = {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "weekday": self.weekday,
            "time": self.time.as_dict(),
        }
        if self.intercalary is not None:
            out["intercalary"] = self.intercalary
        return out


@dataclass(frozen=True)
class IntercalaryDay:
    """One expanded day of an intercalary period."""
    name: str
    after_month: int
    day_index: int  # 1-based position within the period
    period_days: int
    counts_for_weekdays: bool


@dataclass(frozen=True)
class DateInfo:
    calendar_id: str
    world_time: int
    date: CalendarDate
    label: str
    attributes: Optional[Dict[str, object]] = None
    debug: Optional[Dict[str, object]] = None


@dataclass(frozen=True)
class EngineOptions:
    max_years: int = 1_000_000  # furthest year from the epoch a conversion may land on
    walk_budget: int = 10_000   # single-year steps allowed when walking from a hint year
