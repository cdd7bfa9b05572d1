"""Incremental game results ingestion."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..loader import DataLoader
from .providers import GameResultProvider, ProviderConfig
from .validators import validate_game_results_payload

logger = logging.getLogger(__name__)

GameResults = Dict[int, Dict[int, List[Dict]]]


@dataclass
class CollectorConfig:
    data_dir: str = "data"
    games_file: str = "gameResults.json"
    topology_file: str = "leaguesAndDivisions.json"
    fetch_new: bool = True
    strict_validation: bool = False

    @property
    def games_path(self) -> Path:
        return Path(self.data_dir) / self.games_file

    @property
    def topology_path(self) -> Path:
        return Path(self.data_dir) / self.topology_file


class GameResultsCollector:
    """Keeps the on-disk game results cache current with the feed."""

    def __init__(
        self,
        config: Optional[CollectorConfig] = None,
        provider: Optional[GameResultProvider] = None,
        provider_config: Optional[ProviderConfig] = None,
    ):
        self.config = config or CollectorConfig()
        self.provider = provider or GameResultProvider(config=provider_config)

    def run(self) -> GameResults:
        """
        Load cached results, fetch newer days, merge and write back.

        Returns:
            Merged game results keyed by season, then day
        """
        cached = self.load_cached()
        if not self.config.fetch_new:
            return cached

        season, day = self.resume_point(cached)
        logger.info("Resuming game results fetch at season %s day %s", season, day)
        fresh = self.provider.fetch_game_results(season, day)
        merged = merge_game_results(cached, fresh)

        errors = validate_game_results_payload(
            {str(s): {str(d): games for d, games in days.items()} for s, days in merged.items()}
        )
        self._assert_valid(errors)

        DataLoader.save_game_results(merged, self.config.games_path)
        return merged

    def load_cached(self) -> GameResults:
        path = self.config.games_path
        if not path.exists():
            return {}
        try:
            return DataLoader.load_game_results(path)
        except (ValueError, AttributeError) as exc:
            logger.warning("Ignoring unreadable game results cache %s: %s", path, exc)
            return {}

    @staticmethod
    def resume_point(game_results: GameResults) -> Tuple[int, int]:
        """Last cached ``(season, day)``, refetched in case it was partial."""
        if not game_results:
            return 0, 0
        season = max(game_results)
        days = game_results[season]
        return season, (max(days) if days else 0)

    def _assert_valid(self, errors: List[str]) -> None:
        if not errors:
            return
        if self.config.strict_validation:
            raise ValueError(f"game results validation failed: {errors[:5]}")
        logger.warning("game results validation reported %d issues: %s", len(errors), errors[:5])


def merge_game_results(base: GameResults, update: GameResults) -> GameResults:
    """Merge per ``(season, day)``; days present in ``update`` replace ``base``."""
    merged: GameResults = {season: dict(days) for season, days in base.items()}
    for season, days in update.items():
        target = merged.setdefault(season, {})
        for day, games in days.items():
            target[day] = games
    return merged
