from league_standings.data.ingestion.validators import (
    validate_game_record,
    validate_game_results_payload,
    validate_topology_payload,
)
from conftest import make_game


def test_game_record_valid():
    assert validate_game_record(make_game("a", "b", 3, 2, weather=4)) == []


def test_game_record_errors_are_labelled():
    row = make_game("a", "", None, "x", weather="rain")
    errors = validate_game_record(row, "games[3]")

    assert "games[3] missing 'awayTeam'" in errors
    assert any("homeScore" in e for e in errors)
    assert any("awayScore" in e for e in errors)
    assert any("weather" in e for e in errors)
    assert all(e.startswith("games[3]") for e in errors)


def test_game_record_must_be_object():
    assert validate_game_record("nope") == ["game must be an object"]


def test_game_results_payload():
    payload = {
        "0": {"0": [make_game("a", "b", 1, 0)], "1": []},
        "1": {"x": []},
        "y": {},
        "2": {"0": "not-a-list"},
        "3": [],
    }
    errors = validate_game_results_payload(payload)

    assert "season 1 day key 'x' is not numeric" in errors
    assert "season key 'y' is not numeric" in errors
    assert "season 2 day 0 must be a list of games" in errors
    assert "season 3 must be an object keyed by day" in errors
    assert len(errors) == 4


def test_game_results_payload_reports_bad_games():
    errors = validate_game_results_payload({"0": {"5": [{"homeTeam": "a"}]}})
    assert any(e.startswith("season 0 day 5 games[0] missing 'awayTeam'") for e in errors)


def test_topology_payload(topology):
    assert validate_topology_payload(topology.to_dict()) == []


def test_topology_payload_errors():
    payload = {
        "divisions": [
            {"id": "d1", "name": "North", "subleague": "nowhere", "teams": []},
            {"id": "d2", "teams": []},
            {"id": "d3", "name": "South", "subleague": "lg"},
        ],
        "subleagues": [{"id": "lg", "teams": []}, {"name": "anonymous"}],
    }
    errors = validate_topology_payload(payload)

    assert "divisions[0] references unknown subleague nowhere" in errors
    assert "divisions[1] missing fields: name, subleague" in errors
    assert "divisions[2] missing teams list" in errors
    assert "subleagues[1] missing id" in errors


def test_topology_payload_requires_lists():
    errors = validate_topology_payload({})
    assert len(errors) == 2
