from __future__ import annotations

import argparse
import importlib
import inspect
import json
import logging
import re
import sys
from typing import List, Optional

from .core.errors import WorldcalError
from .core.types import CalendarDate, TimeOfDay

# YEAR-MONTH-DAY[THH:MM:SS]; the year may be negative
_DATE_RE = re.compile(r"^(-?\d+)-(\d+)-(\d+)(?:[T ](\d+):(\d+)(?::(\d+))?)?$")
# YEAR-Festival Name[-DAY]
_FESTIVAL_RE = re.compile(r"^(-?\d+)-([^\d].*?)(?:-(\d+))?$")


def _parse_date(s: str) -> CalendarDate:
    m = _DATE_RE.match(s)
    if m:
        y, mo, d, hh, mm, ss = m.groups()
        time = TimeOfDay(int(hh or 0), int(mm or 0), int(ss or 0))
        return CalendarDate(int(y), int(mo), int(d), time=time)
    m = _FESTIVAL_RE.match(s)
    if m:
        y, name, d = m.groups()
        return CalendarDate(int(y), None, int(d or 1), intercalary=name)
    raise argparse.ArgumentTypeError(f"not a date: {s!r} (expected YEAR-MONTH-DAY or YEAR-Festival[-DAY])")


def _run_module_main(modpath: str, argv: List[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _print_date(calendar: str, date: CalendarDate, *, as_json: bool) -> None:
    import worldcal

    if as_json:
        print(json.dumps(date.as_dict()))
    else:
        print(worldcal.format_date(worldcal.get_engine(calendar).definition, date, include_time=True))


def cmd_date(argv: List[str]) -> int:
    import worldcal

    p = argparse.ArgumentParser(prog="worldcal date", description="world-time seconds -> calendar date")
    p.add_argument("seconds", type=int)
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--hint-year", type=int, default=None)
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = worldcal.date_info(
        args.seconds, args.calendar, attributes=tuple(args.attr), debug=args.debug, hint_year=args.hint_year
    )
    print(info.label)
    if args.attr:
        print(json.dumps(info.attributes))
    if args.debug:
        print(json.dumps(info.debug, indent=2))
    return 0


def cmd_time(argv: List[str]) -> int:
    import worldcal

    p = argparse.ArgumentParser(prog="worldcal time", description="calendar date -> world-time seconds")
    p.add_argument("date", type=_parse_date, help="YEAR-MONTH-DAY[THH:MM:SS] or YEAR-Festival[-DAY]")
    p.add_argument("--calendar", default="gregorian")
    args = p.parse_args(argv)

    print(worldcal.date_to_world_time(args.date, args.calendar))
    return 0


def cmd_add(argv: List[str]) -> int:
    import worldcal
    from . import api

    p = argparse.ArgumentParser(prog="worldcal add", description="Date arithmetic")
    p.add_argument("date", type=_parse_date)
    p.add_argument("amount", type=int)
    p.add_argument("unit", choices=["seconds", "minutes", "hours", "days", "weeks", "months", "years"])
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--json", action="store_true")
    args = p.parse_args(argv)

    fn = getattr(api, f"add_{args.unit}")
    out = fn(worldcal.validate_date(args.date, args.calendar), args.amount, args.calendar)
    _print_date(args.calendar, out, as_json=args.json)
    return 0


def cmd_list(argv: List[str]) -> int:
    import worldcal

    p = argparse.ArgumentParser(prog="worldcal list", description="List registered calendars")
    p.parse_args(argv)
    for name in worldcal.list_calendars():
        print(f"{name:<16} {worldcal.calendar_info(name)['label']}")
    return 0


def cmd_info(argv: List[str]) -> int:
    import worldcal

    p = argparse.ArgumentParser(prog="worldcal info", description="Show a calendar's structure")
    p.add_argument("calendar")
    args = p.parse_args(argv)
    print(json.dumps(worldcal.calendar_info(args.calendar), indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="worldcal", description="Fantasy and real-world calendar toolkit CLI.")
    p.add_argument("--load", action="append", default=[], metavar="PATH",
                   help="load a JSON/YAML calendar file before running (repeatable)")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("date", help="world-time seconds -> calendar date")
    sub.add_parser("time", help="calendar date -> world-time seconds")
    sub.add_parser("add", help="add an amount of time to a date")
    sub.add_parser("list", help="list registered calendars")
    sub.add_parser("info", help="show a calendar's structure")

    # diagnostics
    sub.add_parser("pretty-month", help="Print month grids (diagnostics)")
    sub.add_parser("year-table", help="Print year lengths and leap years (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.load:
            import worldcal
            for path in args.load:
                worldcal.load_calendar(path, overwrite=True)

        if args.cmd == "date":
            return cmd_date(rest)
        if args.cmd == "time":
            return cmd_time(rest)
        if args.cmd == "add":
            return cmd_add(rest)
        if args.cmd == "list":
            return cmd_list(rest)
        if args.cmd == "info":
            return cmd_info(rest)

        if args.cmd == "pretty-month":
            return _run_module_main("worldcal.diagnostics.pretty_month", rest)
        if args.cmd == "year-table":
            return _run_module_main("worldcal.diagnostics.year_table", rest)
        if args.cmd == "diag":
            tool_map = {
                "round-trip": "worldcal.diagnostics.round_trip",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except WorldcalError as e:
        print(f"worldcal: error: {e}", file=sys.stderr)
        return 2
    except KeyError as e:
        print(f"worldcal: error: {e.args[0]}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
