"""
worldcal.engines.factory
------------------------
Transforms immutable definitions into live, executable engines.
"""

from __future__ import annotations
from typing import Optional

from worldcal.core.types import CalendarDefinition, EngineOptions
from .calendar import CalendarEngine
from .validator import ensure_valid


def make_engine(defn: CalendarDefinition, options: Optional[EngineOptions] = None) -> CalendarEngine:
    """The universal entry point."""
    return CalendarEngine(ensure_valid(defn), options)
