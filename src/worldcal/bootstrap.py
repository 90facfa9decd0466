from __future__ import annotations
from worldcal.core.engine import CalendarRegistry
from worldcal.engines.specs import builtin_definitions
from worldcal.engines.factory import make_engine


def build_registry() -> CalendarRegistry:
    engines = {}
    for name, defn in builtin_definitions().items():
        engines[name] = make_engine(defn)
    return CalendarRegistry(engines)
