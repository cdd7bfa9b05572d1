"""Tests for the incremental game results collector."""

import json

import pytest

from league_standings.data.ingestion.collector import (
    CollectorConfig,
    GameResultsCollector,
    merge_game_results,
)
from league_standings.data.loader import DataLoader
from conftest import make_game


class StubProvider:
    def __init__(self, results):
        self.results = results
        self.calls = []

    def fetch_game_results(self, start_season=0, start_day=0):
        self.calls.append((start_season, start_day))
        return self.results


def _write_cache(path, results):
    DataLoader.save_game_results(results, path)


def test_fresh_run_starts_at_beginning(tmp_path):
    provider = StubProvider({0: {0: [make_game("a", "b", 1, 0)]}})
    collector = GameResultsCollector(CollectorConfig(data_dir=str(tmp_path)), provider=provider)

    results = collector.run()

    assert provider.calls == [(0, 0)]
    assert results == {0: {0: [make_game("a", "b", 1, 0)]}}
    saved = json.loads((tmp_path / "gameResults.json").read_text())
    assert list(saved) == ["0"]
    assert list(saved["0"]) == ["0"]


def test_resumes_from_last_cached_day_and_replaces_it(tmp_path):
    config = CollectorConfig(data_dir=str(tmp_path))
    _write_cache(
        config.games_path,
        {
            0: {0: [make_game("a", "b", 1, 0)]},
            1: {
                0: [make_game("a", "b", 2, 0, season=1)],
                4: [make_game("a", "b", 0, 0, season=1, day=4, gameComplete=False)],
            },
        },
    )
    provider = StubProvider(
        {
            1: {
                4: [make_game("a", "b", 5, 4, season=1, day=4)],
                5: [make_game("b", "a", 1, 0, season=1, day=5)],
            }
        }
    )

    results = GameResultsCollector(config, provider=provider).run()

    assert provider.calls == [(1, 4)]
    assert sorted(results[1]) == [0, 4, 5]
    assert results[1][4][0]["homeScore"] == 5
    assert results[0][0][0]["homeScore"] == 1
    assert DataLoader.load_game_results(config.games_path) == results


def test_offline_run_returns_cache_without_fetching(tmp_path):
    config = CollectorConfig(data_dir=str(tmp_path), fetch_new=False)
    _write_cache(config.games_path, {2: {0: [make_game("a", "b", 1, 0, season=2)]}})
    provider = StubProvider({})

    results = GameResultsCollector(config, provider=provider).run()

    assert provider.calls == []
    assert list(results) == [2]


def test_unreadable_cache_is_ignored(tmp_path):
    config = CollectorConfig(data_dir=str(tmp_path), fetch_new=False)
    config.games_path.write_text("[1, 2, 3]")
    assert GameResultsCollector(config, provider=StubProvider({})).run() == {}


def test_strict_validation_rejects_bad_results(tmp_path):
    provider = StubProvider({0: {0: [{"homeTeam": "a", "homeScore": 1}]}})
    config = CollectorConfig(data_dir=str(tmp_path), strict_validation=True)

    with pytest.raises(ValueError, match="validation failed"):
        GameResultsCollector(config, provider=provider).run()
    assert not config.games_path.exists()


def test_lenient_validation_warns_and_saves(tmp_path, caplog):
    provider = StubProvider({0: {0: [{"homeTeam": "a", "homeScore": 1}]}})
    config = CollectorConfig(data_dir=str(tmp_path))

    GameResultsCollector(config, provider=provider).run()

    assert "validation reported" in caplog.text
    assert config.games_path.exists()


@pytest.mark.parametrize(
    "results,expected",
    [
        ({}, (0, 0)),
        ({3: {}}, (3, 0)),
        ({2: {9: []}, 10: {1: [], 12: []}}, (10, 12)),
    ],
)
def test_resume_point(results, expected):
    assert GameResultsCollector.resume_point(results) == expected


def test_merge_is_per_day():
    base = {0: {0: ["x"], 1: ["y"]}}
    update = {0: {1: ["z"]}, 1: {0: ["w"]}}
    merged = merge_game_results(base, update)

    assert merged == {0: {0: ["x"], 1: ["z"]}, 1: {0: ["w"]}}
    assert base == {0: {0: ["x"], 1: ["y"]}}
