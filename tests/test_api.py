# tests/test_api.py

import json

import pytest

import worldcal
from worldcal import CalendarDate, TimeOfDay, format_date
from worldcal.engines.specs import like, tweak
from worldcal.formatting import ordinal

from conftest import THIRTY_DAY_DOC


def test_builtins_registered():
    assert set(worldcal.list_calendars()) >= {"gregorian", "golarion-pf2e", "warhammer", "dark-sun", "harptos"}


def test_host_surface():
    d = worldcal.world_time_to_date(86400 + 3661)
    assert d == CalendarDate(1970, 1, 2, time=TimeOfDay(1, 1, 1))
    assert d.weekday == 5
    assert worldcal.date_to_world_time(d) == 86400 + 3661
    assert worldcal.world_time_to_date(0, "golarion-pf2e").year == 4725


def test_unknown_calendar():
    with pytest.raises(KeyError, match="Available"):
        worldcal.get_engine("discworld")


def test_calendar_info():
    info = worldcal.calendar_info("harptos")
    assert info["id"] == "harptos"
    assert info["weekdays"] == 10
    assert info["cycle_years"] == 4
    assert info["cycle_days"] == 365 * 3 + 366


class TestRegistration:
    def test_register_definition(self, fresh_registry):
        defn = tweak(like("gregorian"), id="mars")
        eng = worldcal.register_calendar(defn)
        assert "mars" in worldcal.list_calendars()
        assert worldcal.get_engine("mars") is eng

    def test_refuses_overwrite(self, fresh_registry):
        with pytest.raises(KeyError, match="overwrite"):
            worldcal.register_calendar(like("harptos"))
        worldcal.register_calendar(like("harptos"), overwrite=True)

    def test_register_engine_under_name(self, fresh_registry):
        eng = worldcal.make_engine(like("warhammer"))
        worldcal.register_calendar(eng, name="empire")
        assert worldcal.world_time_to_date(0, "empire") == CalendarDate(0, 1, 1)

    def test_load_calendar(self, fresh_registry, tmp_path):
        path = tmp_path / "thirty.json"
        path.write_text(json.dumps(THIRTY_DAY_DOC), encoding="utf-8")
        worldcal.load_calendar(path)
        assert worldcal.add_days(CalendarDate(1, 1, 1), 30, "thirty") == CalendarDate(1, 2, 1)


class TestDateInfo:
    def test_label(self):
        info = worldcal.date_info(0)
        assert info.calendar_id == "gregorian"
        assert info.label == "Thursday, 1st January, 1970 CE, 00:00:00"
        assert info.attributes is None
        assert info.debug is None

    def test_attributes(self):
        noon = 12 * 3600
        info = worldcal.date_info(noon, attributes=("season", "day_of_year", "day_progress", "daytime"))
        assert info.attributes == {
            "season": 0,
            "season_name": "spring",
            "day_of_year": 1,
            "day_progress": 0.5,
            "is_daytime": True,
        }
        night = worldcal.date_info(3 * 3600, attributes=("daytime",))
        assert night.attributes == {"is_daytime": False}

    def test_season_bands(self):
        eng = worldcal.get_engine("gregorian")
        seasons = []
        for month in range(1, 13):
            t = eng.date_to_world_time(CalendarDate(2024, month, 1))
            seasons.append(worldcal.date_info(t, attributes=("season",)).attributes["season"])
        assert seasons == [0, 0, 0, 1, 1, 1, 2, 2, 2, 3, 3, 3]

    def test_festival_attributes(self):
        eng = worldcal.get_engine("warhammer")
        t = eng.date_to_world_time(CalendarDate(2522, None, 1, intercalary="Hexenstag"))
        info = worldcal.date_info(t, "warhammer", attributes=("weekday_name", "leap_year"))
        assert info.attributes == {"weekday_name": None, "is_leap_year": False}

    def test_unknown_attribute(self):
        with pytest.raises(KeyError, match="Unknown attribute"):
            worldcal.date_info(0, attributes=("phase_of_moon",))

    def test_debug(self):
        info = worldcal.date_info(0, "golarion-pf2e", debug=True)
        assert info.debug["year"] == 4725


class TestFormatting:
    def test_ordinals(self):
        assert [ordinal(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 23, 101, 111, 112)] == [
            "1st", "2nd", "3rd", "4th", "11th", "12th", "13th", "21st", "22nd", "23rd", "101st", "111th", "112th",
        ]

    def test_styles(self):
        defn = like("gregorian")
        d = worldcal.validate_date(CalendarDate(1970, 1, 1, time=TimeOfDay(9, 5, 0)))
        assert format_date(defn, d) == "Thursday, 1st January, 1970 CE"
        assert format_date(defn, d, style="short") == "Thu, 1 Jan, 1970 CE"
        assert format_date(defn, d, style="numeric", include_weekday=False) == "1/1, 1970 CE"
        assert format_date(defn, d, include_year=False, include_time=True) == "Thursday, 1st January, 09:05:00"

    def test_festivals(self):
        harptos = worldcal.get_engine("harptos")
        d = harptos.validate_date(CalendarDate(1372, None, 1, intercalary="Shieldmeet"))
        assert format_date(harptos.definition, d) == "Shieldmeet, 1372 DR"
        dark_sun = worldcal.get_engine("dark-sun")
        d = dark_sun.validate_date(CalendarDate(5, None, 3, intercalary="Cooling Sun"))
        assert format_date(dark_sun.definition, d) == "Cooling Sun 3rd, Year 5 FY"
        assert format_date(dark_sun.definition, d, style="numeric") == "Cooling Sun 3, Year 5 FY"

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            format_date(like("gregorian"), CalendarDate(1970, 1, 1), style="fancy")
