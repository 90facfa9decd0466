"""
worldcal.engines.specs
----------------------
Configuration documents (JSON or YAML) to immutable CalendarDefinitions,
plus the built-in calendars shipped with the package.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple, Union

import yaml

from worldcal.core.errors import DefinitionInvalid
from worldcal.core.types import (
    CalendarDefinition,
    IntercalaryEntry,
    LeapYearRule,
    Month,
    TimeConfig,
    Weekday,
    WorldTimeConfig,
    YearConfig,
)
from .validator import ensure_valid, ensure_valid_document

logger = logging.getLogger(__name__)

BUILTIN_DIR = Path(__file__).resolve().parent.parent / "calendars"

BUILTIN_CALENDARS: Tuple[str, ...] = (
    "gregorian",
    "golarion-pf2e",
    "warhammer",
    "dark-sun",
    "harptos",
)

PathLike = Union[str, Path]


def definition_from_dict(doc: Mapping[str, Any]) -> CalendarDefinition:
    """Validate a configuration document and build its definition."""
    ensure_valid_document(doc)

    year = doc.get("year", {})
    leap = doc.get("leapYear", {})
    time = doc.get("time", {})
    world = doc.get("worldTime", {})

    label = None
    translations = doc.get("translations")
    if isinstance(translations, dict) and isinstance(translations.get("en"), dict):
        label = translations["en"].get("label")

    defn = CalendarDefinition(
        id=doc["id"],
        label=label,
        months=tuple(
            Month(name=m["name"], days=m["days"], abbreviation=m.get("abbreviation"),
                  description=m.get("description"))
            for m in doc["months"]
        ),
        weekdays=tuple(
            Weekday(name=w["name"], abbreviation=w.get("abbreviation"), description=w.get("description"))
            for w in doc["weekdays"]
        ),
        leap_year=LeapYearRule(
            rule=leap.get("rule", "none"),
            interval=leap.get("interval"),
            month=leap.get("month"),
            extra_days=leap.get("extraDays", 1),
        ),
        intercalary=tuple(
            IntercalaryEntry(
                name=e["name"],
                after=e["after"],
                leap_year_only=e.get("leapYearOnly", False),
                counts_for_weekdays=e.get("countsForWeekdays", True),
                days=e.get("days", 1),
                description=e.get("description"),
            )
            for e in doc.get("intercalary", [])
        ),
        year=YearConfig(
            epoch=year.get("epoch", 0),
            current_year=year.get("currentYear", 1),
            start_day=year.get("startDay", 0),
            prefix=year.get("prefix", ""),
            suffix=year.get("suffix", ""),
        ),
        time=TimeConfig(
            hours_in_day=time.get("hoursInDay", 24),
            minutes_in_hour=time.get("minutesInHour", 60),
            seconds_in_minute=time.get("secondsInMinute", 60),
        ),
        world_time=WorldTimeConfig(
            interpretation=world.get("interpretation", "epoch-based"),
            current_year=world.get("currentYear"),
        ),
    )
    return ensure_valid(defn)


def read_document(path: PathLike) -> Dict[str, Any]:
    path = Path(path)
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
        if suffix == ".json":
            doc = json.loads(text)
        elif suffix in (".yaml", ".yml"):
            doc = yaml.safe_load(text)
        else:
            raise DefinitionInvalid(f"Unsupported calendar file type '{suffix}' ({path})")
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise DefinitionInvalid(f"Cannot parse calendar file {path}", [str(e)]) from e
    return doc


def load_definition(path: PathLike) -> CalendarDefinition:
    defn = definition_from_dict(read_document(path))
    logger.info("loaded calendar '%s' from %s", defn.id, path)
    return defn


def like(name: str) -> CalendarDefinition:
    """A built-in definition by name."""
    if name not in BUILTIN_CALENDARS:
        raise KeyError(f"Unknown built-in calendar '{name}'. Available: {sorted(BUILTIN_CALENDARS)}")
    return load_definition(BUILTIN_DIR / f"{name}.json")


def tweak(defn: CalendarDefinition, **kwargs) -> CalendarDefinition:
    """Copy of ``defn`` with fields replaced, re-validated."""
    return ensure_valid(replace(defn, **kwargs))


def builtin_definitions() -> Dict[str, CalendarDefinition]:
    return {name: like(name) for name in BUILTIN_CALENDARS}
