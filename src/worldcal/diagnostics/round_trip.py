from __future__ import annotations

import argparse
import random
from typing import List, Optional

import worldcal


def parse_calendars(s: str) -> List[str]:
    # "gregorian,harptos" -> ["gregorian", "harptos"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(calendar: str, N: int, span: int, seed: int, *, max_failures: int) -> int:
    """world-time -> date -> world-time over random instants in [-span, span] seconds."""
    random.seed(seed)
    engine = worldcal.get_engine(calendar)
    failures = 0

    prev = None
    for t in sorted(random.randint(-span, span) for _ in range(N)):
        d = engine.world_time_to_date(t)
        back = engine.date_to_world_time(d)
        if back != t:
            failures += 1
            print("\nFAIL (round-trip)")
            print("calendar:", calendar)
            print("t:", t, "back:", back)
            print("date:", d.as_dict())
            print("explain:", engine.explain(t))
        elif prev is not None and engine.compare_dates(prev, d) > 0:
            failures += 1
            print("\nFAIL (monotonic)")
            print("calendar:", calendar)
            print("prev:", prev.as_dict(), "date:", d.as_dict())
        prev = d
        if failures >= max_failures:
            break
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: world-time -> date -> world-time.")
    p.add_argument("--calendars", type=str, default="", help="Comma-separated calendar list (default: all).")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--span-years", type=int, default=1000, help="Sample within +/- this many 365-day years.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars) if args.calendars else worldcal.list_calendars()

    total = 0
    for name in calendars:
        spd = worldcal.get_engine(name).definition.time.seconds_per_day
        f = roundtrip_test(name, args.N, args.span_years * 365 * spd, args.seed, max_failures=args.max_failures)
        status = "OK" if f == 0 else f"{f} failure(s)"
        print(f"{name:>16}: {args.N} trials  {status}")
        total += f
    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())
