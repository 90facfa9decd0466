#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

import numpy as np

import worldcal
from worldcal.engines.calendar import CalendarEngine


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "worldcal[plot]"') from e


def year_columns(engine: CalendarEngine, start: int, end: int):
    """Per-year lengths over [start, end] as int64 arrays."""
    years = np.arange(start, end + 1, dtype=np.int64)
    total = np.array([engine.total_year_length(int(y)) for y in years], dtype=np.int64)
    counting = np.array([engine.weekday_days_in_year(int(y)) for y in years], dtype=np.int64)
    leap = np.array([engine.is_leap_year(int(y)) for y in years], dtype=bool)
    first_wd = np.array([engine.weekday_for(int(y), 1, 1) for y in years], dtype=np.int64)
    return years, total, counting, leap, first_wd


def print_table(engine: CalendarEngine, start: int, end: int) -> None:
    years, total, counting, leap, first_wd = year_columns(engine, start, end)
    names = engine.definition.weekdays

    print(f"{'Year':>8}  {'Days':>5}  {'Counted':>7}  {'Leap':>4}  First weekday")
    for y, t, c, lp, w in zip(years, total, counting, leap, first_wd):
        print(f"{int(y):>8}  {int(t):>5}  {int(c):>7}  {'yes' if lp else '':>4}  {names[int(w)].name}")

    print()
    print(f"years: {len(years)}  leap: {int(leap.sum())}  mean length: {float(total.mean()):.4f} days")


def plot_table(engine: CalendarEngine, start: int, end: int, out: Optional[str]) -> None:
    plt = _need_matplotlib()
    years, total, counting, leap, _ = year_columns(engine, start, end)

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.step(years, total, where="mid", label="days in year")
    ax.step(years, counting, where="mid", label="weekday-counting days")
    ax.scatter(years[leap], total[leap], s=12, color="red", label="leap year", zorder=3)
    ax.set_xlabel("year")
    ax.set_ylabel("days")
    ax.set_title(engine.definition.display_label)
    ax.legend(loc="best")
    fig.tight_layout()
    if out:
        fig.savefig(out, dpi=150)
        print(f"wrote {out}")
    else:
        plt.show()


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Year length / leap / first-weekday table for a calendar.")
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--from-year", type=int, default=None)
    p.add_argument("--to-year", type=int, default=None)
    p.add_argument("--plot", action="store_true", help="Plot year lengths (needs matplotlib).")
    p.add_argument("--out", default=None, help="Save the plot to this file instead of showing it.")
    args = p.parse_args(argv)

    engine = worldcal.get_engine(args.calendar)
    y0 = args.from_year if args.from_year is not None else engine.definition.year.current_year
    y1 = args.to_year if args.to_year is not None else y0 + 15
    if y1 < y0:
        raise SystemExit("--to-year must be >= --from-year")

    print_table(engine, y0, y1)
    if args.plot:
        plot_table(engine, y0, y1, args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
