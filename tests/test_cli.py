import csv
import io
import json

import pytest

from pitchside.cli import load_lineup, main

from tests.payloads import lineup_payload


def _write(tmp_path, data, name="lineup.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_lineup_accepts_bare_list(tmp_path):
    path = _write(tmp_path, [{"id": 1, "name": "Keeper", "position": "GK"}])

    players, formation = load_lineup(path)

    assert formation is None
    assert players[0].position == "GK"


def test_load_lineup_accepts_upstream_lineup(tmp_path):
    path = _write(tmp_path, lineup_payload())

    players, formation = load_lineup(path)

    assert formation == "4-3-3"
    assert len(players) == 11
    assert players[1].position == "LB"


def test_load_lineup_rejects_bad_files(tmp_path):
    with pytest.raises(SystemExit):
        load_lineup(_write(tmp_path, {"players": "nope"}))
    with pytest.raises(SystemExit):
        load_lineup(_write(tmp_path, [{"name": "No id"}], name="missing.json"))
    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    with pytest.raises(SystemExit):
        load_lineup(broken)


def test_main_writes_csv(tmp_path, capsys):
    lineup = _write(tmp_path, lineup_payload())
    output = tmp_path / "layout.csv"

    main([str(lineup), "--output", str(output)])

    assert "Placed 11 players (4-3-3)" in capsys.readouterr().out
    rows = list(csv.DictReader(output.open(encoding="utf-8")))
    assert len(rows) == 11
    assert rows[0]["slot"] == "GK"
    assert rows[0]["goalkeeper"] == "yes"
    assert rows[0]["x"] == "50.0"
    assert rows[1]["slot"] == "LB"


def test_main_formation_override_to_stdout(tmp_path, capsys):
    lineup = _write(tmp_path, [{"id": idx, "name": f"P{idx}"} for idx in range(3)])

    main([str(lineup), "--formation", "5-3-2"])

    rows = list(csv.DictReader(io.StringIO(capsys.readouterr().out)))
    assert [row["slot"] for row in rows] == ["GK", "LWB", "LCB"]
    assert rows[1]["goalkeeper"] == "no"


def test_main_placeholders(capsys):
    main(["--placeholders", "4"])

    rows = list(csv.reader(io.StringIO(capsys.readouterr().out)))
    assert rows[0] == ["slot", "x", "y"]
    assert [row[0] for row in rows[1:]] == ["GK", "DEF1", "DEF2", "DEF3"]


def test_main_placeholders_to_output_file(tmp_path, capsys):
    output = tmp_path / "empty.csv"

    main(["--placeholders", "3", "--output", str(output)])

    assert capsys.readouterr().out.strip() == f"Wrote 3 placeholder slots -> {output}"
    rows = list(csv.reader(output.open(encoding="utf-8")))
    assert rows[0] == ["slot", "x", "y"]
    assert [row[0] for row in rows[1:]] == ["GK", "DEF1", "DEF2"]


def test_main_requires_lineup():
    with pytest.raises(SystemExit, match="lineup file is required"):
        main([])
