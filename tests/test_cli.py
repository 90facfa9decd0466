# tests/test_cli.py

import json

from worldcal.cli import main

from conftest import THIRTY_DAY_DOC


def test_date(capsys):
    assert main(["date", "0"]) == 0
    assert capsys.readouterr().out.strip() == "Thursday, 1st January, 1970 CE, 00:00:00"


def test_date_negative_seconds(capsys):
    assert main(["date", "-86400", "--calendar", "gregorian"]) == 0
    assert "31st December, 1969" in capsys.readouterr().out


def test_date_with_attributes(capsys):
    assert main(["date", "43200", "--attr", "day_progress"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert json.loads(lines[1]) == {"day_progress": 0.5}


def test_time(capsys):
    assert main(["time", "1970-01-02T01:00:00"]) == 0
    assert capsys.readouterr().out.strip() == str(86400 + 3600)


def test_time_festival(capsys):
    assert main(["time", "1372-Shieldmeet", "--calendar", "harptos"]) == 0
    t = int(capsys.readouterr().out.strip())
    assert main(["date", str(t), "--calendar", "harptos"]) == 0
    assert capsys.readouterr().out.startswith("Shieldmeet, 1372 DR")


def test_add(capsys):
    assert main(["add", "2024-01-31", "1", "months", "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert (out["year"], out["month"], out["day"]) == (2024, 2, 29)


def test_invalid_date_exits_2(capsys):
    assert main(["time", "1970-02-30"]) == 2
    assert "error" in capsys.readouterr().err


def test_unknown_calendar_exits_2(capsys):
    assert main(["info", "discworld"]) == 2
    assert "discworld" in capsys.readouterr().err


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "harptos" in out
    assert "Gregorian Calendar" in out


def test_load_and_info(capsys, tmp_path, fresh_registry):
    path = tmp_path / "thirty.json"
    path.write_text(json.dumps(THIRTY_DAY_DOC), encoding="utf-8")
    assert main(["--load", str(path), "info", "thirty"]) == 0
    info = json.loads(capsys.readouterr().out)
    assert info["months"] == 12


def test_pretty_month(capsys):
    assert main(["pretty-month", "--calendar", "harptos", "1372", "7"]) == 0
    out = capsys.readouterr().out
    assert "Flamerule 1372" in out
    assert "Midsummer" in out
    assert "Shieldmeet" in out


def test_year_table(capsys):
    assert main(["year-table", "--calendar", "harptos", "--from-year", "1370", "--to-year", "1377"]) == 0
    out = capsys.readouterr().out
    assert "leap: 2" in out


def test_round_trip_diag(capsys):
    assert main(["diag", "round-trip", "--calendars", "gregorian,dark-sun", "--N", "200"]) == 0
    assert "OK" in capsys.readouterr().out
