from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from .types import CalendarDate, CalendarDefinition


class CalendarEngineProtocol(Protocol):
    definition: CalendarDefinition

    def info(self) -> Dict[str, Any]: ...
    def world_time_to_date(self, world_time: int, *, hint_year: Optional[int] = None) -> CalendarDate: ...
    def date_to_world_time(self, date: CalendarDate) -> int: ...
    def explain(self, world_time: int) -> Dict[str, Any]: ...


@dataclass
class CalendarRegistry:
    _engines: Dict[str, CalendarEngineProtocol]

    def get(self, name: str) -> CalendarEngineProtocol:
        if name not in self._engines:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngineProtocol, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine

    def __contains__(self, name: str) -> bool:
        return name in self._engines
