"""
worldcal.engines.validator
--------------------------
Load-time validation. Problems are accumulated and reported together;
warnings are logged and never fail a load.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, List

from worldcal.core.errors import DefinitionInvalid
from worldcal.core.types import CalendarDefinition

logger = logging.getLogger(__name__)

ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
VALID_RULES = ("none", "gregorian", "custom")
VALID_INTERPRETATIONS = ("epoch-based", "real-time-based")


@dataclass
class ValidationResult:
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


# ============================================================
# Documents
# ============================================================

def validate_document(doc: Any) -> ValidationResult:
    """Structural checks on a raw configuration document (required fields and types)."""
    result = ValidationResult()
    if not isinstance(doc, dict):
        result.errors.append("Calendar must be a mapping")
        return result

    for key in ("id", "months", "weekdays"):
        if key not in doc:
            result.errors.append(f"Missing required field: {key}")
    if result.errors:
        return result

    if not isinstance(doc["id"], str):
        result.errors.append("Calendar id must be a string")

    _check_list(doc, "months", result, int_fields=("days",))
    _check_list(doc, "weekdays", result)
    if "intercalary" in doc:
        _check_list(doc, "intercalary", result, str_fields=("after",), int_fields=("days",),
                    bool_fields=("leapYearOnly", "countsForWeekdays"), optional_int=("days",))

    _check_section(doc, "year", result, ints=("epoch", "currentYear", "startDay"), strs=("prefix", "suffix"))
    _check_section(doc, "leapYear", result, ints=("interval", "extraDays"), strs=("rule", "month"))
    _check_section(doc, "time", result, ints=("hoursInDay", "minutesInHour", "secondsInMinute"))
    _check_section(doc, "worldTime", result, ints=("currentYear",), strs=("interpretation",))

    year = doc.get("year") if isinstance(doc.get("year"), dict) else {}
    if "epoch" not in year:
        result.warnings.append("Year epoch not specified, defaulting to 0")
    if "currentYear" not in year:
        result.warnings.append("Current year not specified, defaulting to 1")
    if "time" not in doc:
        result.warnings.append("Time configuration not specified, using 24-hour day")
    if "leapYear" not in doc:
        result.warnings.append("Leap year configuration not specified, no leap years will occur")
    return result


def _check_list(doc, key, result, *, str_fields=(), int_fields=(), bool_fields=(), optional_int=()):
    items = doc[key]
    if not isinstance(items, list):
        result.errors.append(f"{key} must be a list")
        return
    label = key.rstrip("s") if key != "intercalary" else "intercalary entry"
    for i, item in enumerate(items, start=1):
        if not isinstance(item, dict):
            result.errors.append(f"{label} {i} must be a mapping")
            continue
        if not isinstance(item.get("name"), str) or not item.get("name"):
            result.errors.append(f"{label} {i} missing required field: name")
        for f in str_fields:
            if not isinstance(item.get(f), str) or not item.get(f):
                result.errors.append(f"{label} {i} missing required field: {f}")
        for f in int_fields:
            if f in optional_int and f not in item:
                continue
            if not _is_int(item.get(f)):
                result.errors.append(f"{label} {i} field '{f}' must be an integer")
        for f in bool_fields:
            if f in item and not isinstance(item[f], bool):
                result.errors.append(f"{label} {i} field '{f}' must be a boolean")


def _check_section(doc, key, result, *, ints=(), strs=()):
    if key not in doc:
        return
    section = doc[key]
    if not isinstance(section, dict):
        result.errors.append(f"{key} must be a mapping")
        return
    for f in ints:
        if f in section and not _is_int(section[f]):
            result.errors.append(f"{key}.{f} must be an integer")
    for f in strs:
        if f in section and not isinstance(section[f], str):
            result.errors.append(f"{key}.{f} must be a string")


# ============================================================
# Definitions
# ============================================================

def check_definition(defn: CalendarDefinition) -> List[str]:
    """Constraint and cross-reference checks on a built definition."""
    errors: List[str] = []

    if not isinstance(defn.id, str) or not ID_PATTERN.match(defn.id):
        errors.append("Calendar id must contain only alphanumeric characters, hyphens, and underscores")

    if not defn.months:
        errors.append("Calendar must have at least one month")
    for i, m in enumerate(defn.months, start=1):
        if not _is_int(m.days):
            errors.append(f"Month {i} ({m.name}) day count must be an integer, got {m.days!r}")
        elif m.days < 1:
            errors.append(f"Month {i} ({m.name}) must have a positive day count, got {m.days}")
    if not defn.weekdays:
        errors.append("Calendar must have at least one weekday")

    month_names = [m.name for m in defn.months]
    if len(set(month_names)) != len(month_names):
        errors.append("Month names must be unique")
    weekday_names = [w.name for w in defn.weekdays]
    if len(set(weekday_names)) != len(weekday_names):
        errors.append("Weekday names must be unique")

    # (name, after) identifies a period; a repeat could never be addressed as a date
    seen = set()
    for i, e in enumerate(defn.intercalary, start=1):
        if e.after not in month_names:
            errors.append(f"Intercalary entry {i} ({e.name}) references non-existent month '{e.after}'")
        if not _is_int(e.days):
            errors.append(f"Intercalary entry {i} ({e.name}) day count must be an integer, got {e.days!r}")
        elif e.days < 1:
            errors.append(f"Intercalary entry {i} ({e.name}) must span at least one day")
        if (e.name, e.after) in seen:
            errors.append(f"Intercalary entry {i} duplicates '{e.name}' after '{e.after}'")
        seen.add((e.name, e.after))

    rule = defn.leap_year
    if rule.rule not in VALID_RULES:
        errors.append(f"Leap year rule must be one of: {', '.join(VALID_RULES)}")
    if rule.month is not None and rule.month not in month_names:
        errors.append(f"Leap year month '{rule.month}' does not exist in months list")
    if rule.interval is not None and not _is_int(rule.interval):
        errors.append(f"Leap year interval must be an integer, got {rule.interval!r}")
    if not _is_int(rule.extra_days):
        errors.append(f"Leap year extraDays must be an integer, got {rule.extra_days!r}")
    elif rule.rule == "custom":
        if rule.interval is None or (_is_int(rule.interval) and rule.interval < 1):
            errors.append("Custom leap year rule requires an interval of at least 1")
        if rule.extra_days < 0:
            errors.append("Leap year extraDays must not be negative")
        if rule.extra_days > 0 and rule.month is None:
            errors.append("Custom leap year rule with extra days requires a month")

    t = defn.time
    for name, value in (("hoursInDay", t.hours_in_day), ("minutesInHour", t.minutes_in_hour),
                        ("secondsInMinute", t.seconds_in_minute)):
        if not _is_int(value):
            errors.append(f"Time {name} must be an integer, got {value!r}")
        elif value < 1:
            errors.append(f"Time {name} must be at least 1")

    y = defn.year
    for name, value in (("epoch", y.epoch), ("currentYear", y.current_year)):
        if not _is_int(value):
            errors.append(f"Year {name} must be an integer, got {value!r}")
    if defn.world_time.current_year is not None and not _is_int(defn.world_time.current_year):
        errors.append(f"World-time currentYear must be an integer, got {defn.world_time.current_year!r}")
    if not _is_int(y.start_day):
        errors.append(f"Year startDay must be an integer, got {y.start_day!r}")
    elif defn.weekdays and not 0 <= y.start_day < len(defn.weekdays):
        errors.append(f"Year startDay must be between 0 and {len(defn.weekdays) - 1}")

    if defn.world_time.interpretation not in VALID_INTERPRETATIONS:
        errors.append(f"World-time interpretation must be one of: {', '.join(VALID_INTERPRETATIONS)}")
    return errors


def ensure_valid(defn: CalendarDefinition) -> CalendarDefinition:
    errors = check_definition(defn)
    if errors:
        raise DefinitionInvalid(f"Invalid calendar definition '{defn.id}'", errors)
    return defn


def ensure_valid_document(doc: Any) -> ValidationResult:
    result = validate_document(doc)
    ident = doc.get("id", "?") if isinstance(doc, dict) else "?"
    if not result.is_valid:
        raise DefinitionInvalid(f"Invalid calendar document '{ident}'", result.errors)
    for w in result.warnings:
        logger.warning("calendar '%s': %s", ident, w)
    return result
