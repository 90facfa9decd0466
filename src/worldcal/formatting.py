"""
worldcal.formatting
-------------------
Plain text rendering of calendar dates (no localization).
"""

from __future__ import annotations
from typing import Literal

from .core.types import CalendarDate, CalendarDefinition

Style = Literal["long", "short", "numeric"]


def ordinal(n: int) -> str:
    if 11 <= n % 100 <= 13:
        return f"{n}th"
    return f"{n}" + {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def format_year(defn: CalendarDefinition, year: int) -> str:
    return f"{defn.year.prefix}{year}{defn.year.suffix}".strip()


def format_time(date: CalendarDate) -> str:
    t = date.time
    return f"{t.hour:02d}:{t.minute:02d}:{t.second:02d}"


def format_date(
    defn: CalendarDefinition,
    date: CalendarDate,
    *,
    style: Style = "long",
    include_time: bool = False,
    include_weekday: bool = True,
    include_year: bool = True,
) -> str:
    """
    ``long``:    "Thursday, 1st January, 1970"
    ``short``:   abbreviations where the calendar defines them, bare day number
    ``numeric``: "1/1, 1970"
    Intercalary dates render their period name (with the day when the
    period is longer than one day) and never a weekday.
    """
    if style not in ("long", "short", "numeric"):
        raise ValueError(f"Unknown style '{style}'")

    parts = []
    if include_weekday and not date.is_intercalary and date.weekday is not None:
        wd = defn.weekdays[date.weekday]
        parts.append(wd.abbreviation if style == "short" and wd.abbreviation else wd.name)

    if date.is_intercalary:
        name = date.intercalary
        if date.day > 1 or _period_days(defn, name) > 1:
            name = f"{name} {date.day if style != 'long' else ordinal(date.day)}"
        parts.append(name)
    elif style == "numeric":
        parts.append(f"{date.month}/{date.day}")
    else:
        month = defn.months[date.month - 1]
        month_name = month.abbreviation if style == "short" and month.abbreviation else month.name
        day = ordinal(date.day) if style == "long" else str(date.day)
        parts.append(f"{day} {month_name}")

    if include_year:
        parts.append(format_year(defn, date.year))
    if include_time:
        parts.append(format_time(date))
    return ", ".join(parts)


def _period_days(defn: CalendarDefinition, name: str) -> int:
    for e in defn.intercalary:
        if e.name == name:
            return e.days
    return 1
