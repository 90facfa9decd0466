from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import worldcal
from worldcal.core.types import CalendarDate
from worldcal.engines.calendar import CalendarEngine


def cell(top: str, w: int = 6) -> str:
    return top[:w].ljust(w)


def dow_header(engine: CalendarEngine, w: int = 6) -> str:
    names = [wd.abbreviation or wd.name for wd in engine.definition.weekdays]
    return " ".join(cell(n, w) for n in names)


def month_weeks(engine: CalendarEngine, year: int, month: int) -> List[List[str]]:
    n_wd = len(engine.definition.weekdays)
    first = engine.weekday_for(year, month, 1)

    weeks: List[List[str]] = []
    wk: List[str] = [cell("") for _ in range(first)]
    for day in range(1, engine.month_length(year, month) + 1):
        wk.append(cell(f"{day:2d}"))
        if len(wk) == n_wd:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < n_wd:
            wk.append(cell(""))
        weeks.append(wk)
    return weeks


def festival_lines(engine: CalendarEngine, year: int, month: int) -> List[str]:
    out = []
    for d in engine.intercalary_days_after_month(year, month):
        tag = "" if d.counts_for_weekdays else "  (outside the week)"
        label = d.name if d.period_days == 1 else f"{d.name} {d.day_index}/{d.period_days}"
        out.append(f"  + {label}{tag}")
    return out


def print_month(engine: CalendarEngine, year: int, month: int) -> None:
    defn = engine.definition
    name = defn.months[month - 1].name
    leap = "  leap year" if engine.is_leap_year(year) else ""
    print(f"{defn.display_label}  {name} {year}{leap}")
    header = dow_header(engine)
    print(header)
    print("-" * len(header))
    for wk in month_weeks(engine, year, month):
        print(" ".join(wk))
    for line in festival_lines(engine, year, month):
        print(line)
    print()


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print a month grid with weekday columns and trailing festival days.")
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("year", type=int, nargs="?")
    p.add_argument("month", type=int, nargs="?", help="1-based month; omit to print the whole year")
    args = p.parse_args(argv)

    engine = worldcal.get_engine(args.calendar)
    year = args.year if args.year is not None else engine.definition.year.current_year

    months: Tuple[int, ...]
    if args.month is not None:
        months = (args.month,)
    else:
        months = tuple(range(1, len(engine.definition.months) + 1))
    for m in months:
        engine.validate_date(CalendarDate(year, m, 1))
        print_month(engine, year, m)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
