# tests/test_definitions.py

import json
import logging
from dataclasses import replace

import pytest

from worldcal import DefinitionInvalid
from worldcal.core.types import Month, TimeConfig
from worldcal.engines.factory import make_engine
from worldcal.engines.specs import (
    BUILTIN_CALENDARS,
    builtin_definitions,
    definition_from_dict,
    like,
    load_definition,
    tweak,
)
from worldcal.engines.validator import check_definition, validate_document

from conftest import THIRTY_DAY_DOC, doc_with


def _errors(doc):
    with pytest.raises(DefinitionInvalid) as exc:
        definition_from_dict(doc)
    return exc.value.errors


def test_builtins_load():
    defs = builtin_definitions()
    assert sorted(defs) == sorted(BUILTIN_CALENDARS)
    for name, defn in defs.items():
        assert defn.id == name
        assert check_definition(defn) == []


def test_builtin_labels_come_from_translations():
    assert like("gregorian").display_label == "Gregorian Calendar"
    assert definition_from_dict(doc_with()).display_label == "thirty"


def test_unknown_builtin():
    with pytest.raises(KeyError, match="Available"):
        like("discworld")


def test_document_fields_are_mapped():
    defn = like("harptos")
    assert len(defn.months) == 12
    assert defn.months[6].name == "Flamerule"
    assert defn.months[6].description == "Summertide"
    assert defn.leap_year.rule == "custom"
    assert defn.leap_year.interval == 4
    assert defn.leap_year.extra_days == 0
    shieldmeet = [e for e in defn.intercalary if e.name == "Shieldmeet"][0]
    assert shieldmeet.after == "Flamerule"
    assert shieldmeet.leap_year_only
    assert not shieldmeet.counts_for_weekdays
    assert defn.year.suffix == " DR"


def test_defaults(caplog):
    doc = {
        "id": "bare",
        "months": [{"name": "Only", "days": 10}],
        "weekdays": [{"name": "Day"}],
    }
    with caplog.at_level(logging.WARNING, logger="worldcal.engines.validator"):
        defn = definition_from_dict(doc)
    assert defn.epoch == 0
    assert defn.year.current_year == 1
    assert defn.leap_year.rule == "none"
    assert defn.time.seconds_per_day == 86400
    assert defn.world_time.interpretation == "epoch-based"
    messages = " ".join(r.getMessage() for r in caplog.records)
    assert "epoch not specified" in messages
    assert "Time configuration not specified" in messages


def test_intercalary_defaults():
    defn = definition_from_dict(doc_with(intercalary=[{"name": "Fest", "after": "Six"}]))
    entry = defn.intercalary[0]
    assert entry.days == 1
    assert entry.counts_for_weekdays
    assert not entry.leap_year_only


class TestInvalid:
    def test_non_positive_month(self):
        months = [dict(m) for m in THIRTY_DAY_DOC["months"]]
        months[3]["days"] = 0
        errors = _errors(doc_with(months=months))
        assert any("Four" in e and "positive" in e for e in errors)

    def test_empty_weekdays(self):
        assert any("at least one weekday" in e for e in _errors(doc_with(weekdays=[])))

    def test_empty_months(self):
        assert any("at least one month" in e for e in _errors(doc_with(months=[])))

    def test_intercalary_references_missing_month(self):
        errors = _errors(doc_with(intercalary=[{"name": "Fest", "after": "Thirteen"}]))
        assert any("non-existent month 'Thirteen'" in e for e in errors)

    def test_custom_leap_month_missing(self):
        errors = _errors(doc_with(leapYear={"rule": "custom", "interval": 4, "month": "Smarch"}))
        assert any("'Smarch' does not exist" in e for e in errors)

    def test_custom_leap_needs_interval_and_month(self):
        errors = _errors(doc_with(leapYear={"rule": "custom", "interval": 0}))
        assert any("interval" in e for e in errors)
        assert any("requires a month" in e for e in errors)

    def test_unknown_rule_and_interpretation(self):
        errors = _errors(doc_with(leapYear={"rule": "julian"}, worldTime={"interpretation": "sideways"}))
        assert len(errors) == 2

    def test_errors_accumulate(self):
        months = [dict(m) for m in THIRTY_DAY_DOC["months"]]
        months[0]["days"] = -1
        months[1]["name"] = "One"
        errors = _errors(doc_with(
            id="bad id!",
            months=months,
            weekdays=[{"name": "A"}, {"name": "A"}],
            year={"epoch": 0, "currentYear": 1, "startDay": 5},
            time={"hoursInDay": 0, "minutesInHour": 60, "secondsInMinute": 60},
        ))
        assert len(errors) == 6

    def test_missing_required_fields(self):
        errors = _errors({"months": []})
        assert "Missing required field: id" in errors
        assert "Missing required field: weekdays" in errors

    def test_wrong_types(self):
        errors = _errors(doc_with(
            months=[{"name": "One", "days": "thirty"}],
            year={"epoch": 1.5},
            intercalary=[{"name": "Fest", "after": "One", "leapYearOnly": "yes"}],
        ))
        assert "month 1 field 'days' must be an integer" in errors
        assert "year.epoch must be an integer" in errors
        assert "intercalary entry 1 field 'leapYearOnly' must be a boolean" in errors

    def test_duplicate_festival_after_same_month(self):
        errors = _errors(doc_with(intercalary=[
            {"name": "Fest", "after": "Two"},
            {"name": "Fest", "after": "Two"},
        ]))
        assert errors == ["Intercalary entry 2 duplicates 'Fest' after 'Two'"]

    def test_non_integer_fields_built_in_code(self):
        defn = like("gregorian")
        with pytest.raises(DefinitionInvalid) as exc:
            make_engine(replace(defn, months=(Month("January", 30.5),) + defn.months[1:]))
        assert any("must be an integer, got 30.5" in e for e in exc.value.errors)

        with pytest.raises(DefinitionInvalid):
            make_engine(replace(defn, months=(Month("January", True),) + defn.months[1:]))
        with pytest.raises(DefinitionInvalid):
            tweak(defn, time=TimeConfig(24.0, 60, 60))
        with pytest.raises(DefinitionInvalid):
            tweak(defn, year=replace(defn.year, start_day="4"))
        with pytest.raises(DefinitionInvalid):
            tweak(defn, year=replace(defn.year, epoch=1970.5))

    def test_non_integer_leap_and_festival_fields(self):
        defn = like("harptos")
        with pytest.raises(DefinitionInvalid) as exc:
            tweak(defn, leap_year=replace(defn.leap_year, interval=4.0, extra_days=0.5))
        assert len(exc.value.errors) == 2
        fest = replace(defn.intercalary[0], days=1.5)
        with pytest.raises(DefinitionInvalid):
            tweak(defn, intercalary=(fest,) + defn.intercalary[1:])

    def test_not_a_mapping(self):
        assert validate_document(["id"]).errors == ["Calendar must be a mapping"]

    def test_message_lists_errors(self):
        with pytest.raises(ValueError) as exc:
            definition_from_dict(doc_with(weekdays=[]))
        assert "  - Calendar must have at least one weekday" in str(exc.value)


def test_tweak_revalidates():
    defn = like("gregorian")
    assert tweak(defn, id="gregorian-copy").id == "gregorian-copy"
    with pytest.raises(DefinitionInvalid):
        tweak(defn, weekdays=())


class TestFiles:
    def test_json(self, tmp_path):
        path = tmp_path / "thirty.json"
        path.write_text(json.dumps(THIRTY_DAY_DOC), encoding="utf-8")
        defn = load_definition(path)
        assert defn.id == "thirty"
        assert len(defn.months) == 12

    def test_yaml(self, tmp_path):
        path = tmp_path / "moons.yaml"
        path.write_text(
            "\n".join([
                "id: moons",
                "translations:",
                "  en:",
                "    label: Two Moons",
                "months:",
                "  - {name: Waxing, days: 20}",
                "  - {name: Waning, days: 21}",
                "weekdays:",
                "  - name: Bright",
                "  - name: Dark",
                "leapYear: {rule: custom, interval: 3, month: Waning, extraDays: 2}",
                "intercalary:",
                "  - {name: Eclipse, after: Waning, days: 3, countsForWeekdays: false}",
                "year: {epoch: 0, currentYear: 7}",
                "time: {hoursInDay: 10, minutesInHour: 100, secondsInMinute: 100}",
                "",
            ]),
            encoding="utf-8",
        )
        defn = load_definition(path)
        assert defn.display_label == "Two Moons"
        assert defn.leap_year.extra_days == 2
        assert defn.intercalary[0].days == 3
        assert defn.time.seconds_per_day == 100000

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "thirty.txt"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(DefinitionInvalid, match="Unsupported"):
            load_definition(path)

    def test_unparseable(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{ months: ", encoding="utf-8")
        with pytest.raises(DefinitionInvalid, match="Cannot parse"):
            load_definition(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes('{"id": "caf\xe9"}'.encode("latin-1"))
        with pytest.raises(DefinitionInvalid, match="Cannot parse"):
            load_definition(path)
