"""Season-by-season driver for the standings engine."""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..data.weather import WeatherLookup
from ..models.game import Game, MalformedGameError
from ..models.team import TeamRecord
from ..models.topology import LeagueTopology
from .config import StandingsConfig
from .finalizer import StandingsFinalizer
from .processor import GameProcessor
from .record_store import RecordStore

logger = logging.getLogger(__name__)

GameInput = Union[Game, Dict]
DaySchedule = Mapping[Union[int, str], Iterable[GameInput]]
GameResults = Mapping[Union[int, str], DaySchedule]
DivisionStandings = Dict[str, List[TeamRecord]]


class StandingsResult:
    """Finalized standings keyed by season id, then division id."""

    def __init__(self, seasons: Optional[Dict[int, DivisionStandings]] = None):
        self.seasons: Dict[int, DivisionStandings] = dict(seasons or {})

    def __getitem__(self, season: int) -> DivisionStandings:
        return self.seasons[season]

    def __contains__(self, season: int) -> bool:
        return season in self.seasons

    def __len__(self) -> int:
        return len(self.seasons)

    def season_ids(self) -> List[int]:
        return sorted(self.seasons)

    def team_records(self, season: int) -> List[TeamRecord]:
        """All finalized records of a season, in division order."""
        return [record for records in self.seasons.get(season, {}).values() for record in records]

    def to_dict(self) -> Dict[str, Dict[str, List[dict]]]:
        """Convert to the standings JSON shape."""
        return {
            str(season): {
                division_id: [record.to_dict() for record in records]
                for division_id, records in self.seasons[season].items()
            }
            for season in self.season_ids()
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "StandingsResult":
        return cls(
            {
                int(season): {
                    division_id: [TeamRecord.from_dict(r) for r in records]
                    for division_id, records in divisions.items()
                }
                for season, divisions in data.items()
            }
        )


def _sorted_keys(mapping: Mapping) -> List:
    return sorted(mapping, key=lambda key: int(key))


class SeasonOrchestrator:
    """Feeds every season's games through the processor and finalizer."""

    def __init__(
        self,
        topology: LeagueTopology,
        config: Optional[StandingsConfig] = None,
        weather: Optional[WeatherLookup] = None,
    ):
        self.topology = topology
        self.config = config or StandingsConfig()
        self.weather = weather or WeatherLookup()
        self.processor = GameProcessor(topology, weather=self.weather, config=self.config)
        self.finalizer = StandingsFinalizer(self.config)

    def run(self, game_results: GameResults) -> StandingsResult:
        """
        Compute standings for every season in the game results.

        Args:
            game_results: Games keyed by season id, then day id

        Returns:
            Finalized standings for each season, ascending
        """
        seasons = [(int(season), game_results[season]) for season in _sorted_keys(game_results)]
        if self.config.parallel_workers > 1 and len(seasons) > 1:
            return self._run_parallel(seasons)

        result = StandingsResult()
        store = RecordStore()
        for season, days in seasons:
            result.seasons[season] = self.run_season(store, season, days)
            store.reset()
        return result

    def run_season(self, store: RecordStore, season: int, days: DaySchedule) -> DivisionStandings:
        """Process one season into ``store`` and return its division standings."""
        applied = 0
        skipped = 0
        for day in _sorted_keys(days):
            for raw in days[day]:
                game = self._coerce_game(raw, season, int(day))
                if game is None or not self.processor.process(store, game):
                    skipped += 1
                    continue
                applied += 1

        self.finalizer.finalize(store)
        logger.info(
            "Season %s: %d games applied, %d skipped, %d teams",
            season,
            applied,
            skipped,
            len(store.teams),
        )
        return store.division_snapshot()

    @staticmethod
    def _coerce_game(raw: GameInput, season: int, day: int) -> Optional[Game]:
        if isinstance(raw, Game):
            return raw
        if isinstance(raw, dict):
            raw = {"season": season, "day": day, **raw}
        try:
            return Game.from_dict(raw)
        except MalformedGameError as exc:
            logger.warning("Skipping malformed game in season %s day %s: %s", season, day, exc)
            return None

    def _run_parallel(self, seasons: List[Tuple[int, DaySchedule]]) -> StandingsResult:
        jobs = [
            (self.topology, self.config, self.weather.names, season, _materialize(days))
            for season, days in seasons
        ]
        result = StandingsResult()
        with ProcessPoolExecutor(max_workers=self.config.parallel_workers) as executor:
            for season, divisions in executor.map(_run_season_job, jobs):
                result.seasons[season] = divisions
        return result


def _materialize(days: DaySchedule) -> Dict:
    return {day: list(games) for day, games in days.items()}


def _run_season_job(job) -> Tuple[int, DivisionStandings]:
    topology, config, weather_names, season, days = job
    orchestrator = SeasonOrchestrator(topology, config, WeatherLookup(weather_names))
    return season, orchestrator.run_season(RecordStore(), season, days)


def build_standings(
    game_results: GameResults,
    topology: LeagueTopology,
    config: Optional[StandingsConfig] = None,
    weather: Optional[WeatherLookup] = None,
) -> StandingsResult:
    """Compute standings for all seasons in ``game_results``."""
    return SeasonOrchestrator(topology, config=config, weather=weather).run(game_results)
