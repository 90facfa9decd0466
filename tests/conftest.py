# tests/conftest.py

import copy

import pytest

from worldcal import api
from worldcal.bootstrap import build_registry
from worldcal.engines.factory import make_engine
from worldcal.engines.specs import definition_from_dict

MONTH_NAMES = [
    "One", "Two", "Three", "Four", "Five", "Six",
    "Seven", "Eight", "Nine", "Ten", "Eleven", "Twelve",
]

THIRTY_DAY_DOC = {
    "id": "thirty",
    "months": [{"name": n, "days": 30} for n in MONTH_NAMES],
    "weekdays": [{"name": f"Day {i}"} for i in range(1, 8)],
    "leapYear": {"rule": "none"},
    "year": {"epoch": 1, "currentYear": 1},
    "time": {"hoursInDay": 24, "minutesInHour": 60, "secondsInMinute": 60},
}


def doc_with(**changes):
    """Deep copy of the twelve 30-day month document with top-level keys replaced."""
    doc = copy.deepcopy(THIRTY_DAY_DOC)
    doc.update(copy.deepcopy(changes))
    return doc


def engine_from(doc, options=None):
    return make_engine(definition_from_dict(doc), options)


@pytest.fixture
def thirty():
    return engine_from(doc_with())


@pytest.fixture
def midwinter():
    """Twelve 30-day months and a yearly Midwinter day after the last month."""
    return engine_from(doc_with(
        id="midwinter",
        intercalary=[{"name": "Midwinter", "after": "Twelve", "leapYearOnly": False, "countsForWeekdays": False}],
    ))


@pytest.fixture
def festival():
    """A 7-day festival that does not advance the week, after month Two."""
    return engine_from(doc_with(
        id="festival",
        intercalary=[{"name": "Feast", "after": "Two", "days": 7, "countsForWeekdays": False}],
    ))


@pytest.fixture
def counting_festival():
    """A 2-day festival that is part of the week, after month Three."""
    return engine_from(doc_with(
        id="counting-festival",
        intercalary=[{"name": "Fair", "after": "Three", "days": 2, "countsForWeekdays": True}],
    ))


@pytest.fixture
def fresh_registry(monkeypatch):
    """A private registry of the built-in calendars, so tests may register freely."""
    reg = build_registry()
    monkeypatch.setattr(api, "_registry", reg)
    return reg
