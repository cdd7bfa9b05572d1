"""Tests for JSON artifacts and the flat standings table."""

import json

import pandas as pd

from league_standings.data.export import STANDINGS_COLUMNS, standings_frame, write_standings_csv
from league_standings.data.loader import DataLoader
from league_standings.engine.orchestrator import StandingsResult, build_standings
from conftest import make_game


def _standings(topology):
    results = {
        0: {
            0: [make_game("a", "b", 5, 3), make_game("d", "e", 1, 2), make_game("g", "h", 4, 3)],
            1: [make_game("b", "a", 6, 5, day=1), make_game("c", "a", 0, 2, day=1)],
        }
    }
    return build_standings(results, topology)


def test_game_results_written_tab_indented_and_sorted(tmp_path):
    path = tmp_path / "nested" / "gameResults.json"
    DataLoader.save_game_results({10: {1: []}, 2: {11: [], 3: [make_game("a", "b", 1, 0)]}}, path)

    text = path.read_text()
    assert text.endswith("\n")
    assert '\n\t"2": {' in text
    data = json.loads(text)
    assert list(data) == ["2", "10"]
    assert list(data["2"]) == ["3", "11"]

    loaded = DataLoader.load_game_results(path)
    assert loaded[2][3][0]["homeTeam"] == "a"
    assert set(loaded) == {2, 10}


def test_topology_saved_with_timestamp(tmp_path, topology):
    path = tmp_path / "leaguesAndDivisions.json"
    DataLoader.save_topology(topology, path, 1234)

    data = json.loads(path.read_text())
    assert data["lastUpdatedAt"] == 1234
    assert {d["id"] for d in data["divisions"]} == {"d1", "d2", "d3", "d4"}
    assert DataLoader.load_topology(path).league_for("i").id == "evil"


def test_standings_file_shape(tmp_path, topology):
    path = tmp_path / "standings" / "standings.json"
    DataLoader.save_standings(_standings(topology), path)

    data = json.loads(path.read_text())
    assert list(data) == ["0"]
    assert set(data["0"]) == {"d1", "d2", "d3"}
    first = data["0"]["d1"][0]
    assert first["teamId"] == "a"
    assert first["divisionRank"] == 1
    assert first["splitRecords"]["home"]["type"] == "home"

    reloaded = DataLoader.load_standings(path)
    assert isinstance(reloaded, StandingsResult)
    assert reloaded.to_dict() == data


def test_standings_frame(topology):
    df = standings_frame(_standings(topology))

    assert list(df.columns) == STANDINGS_COLUMNS
    assert len(df) == 7
    d1 = df[df["division_id"] == "d1"]
    assert list(d1["team_id"]) == ["a", "b", "c"]
    a = d1.iloc[0]
    assert (a["wins"], a["losses"]) == (2, 1)
    assert a["home"] == "1-0"
    assert a["away"] == "1-1"
    assert a["one_run"] == "0-1"
    assert a["winning_percentage"] == 0.667


def test_empty_standings_frame():
    df = standings_frame(StandingsResult())
    assert df.empty
    assert list(df.columns) == STANDINGS_COLUMNS


def test_write_standings_csv(tmp_path, topology):
    path = write_standings_csv(_standings(topology), tmp_path / "out" / "standings.csv")
    df = pd.read_csv(path)
    assert len(df) == 7
    assert df.loc[0, "season"] == 0
