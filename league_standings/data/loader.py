"""Data loader for game results, topology and standings files."""

import json
from pathlib import Path
from typing import Dict, List, Union

from ..engine.orchestrator import StandingsResult
from ..models.topology import LeagueTopology

PathLike = Union[str, Path]


class DataLoader:
    """Loads and saves the JSON artifacts around the standings engine."""

    @staticmethod
    def load_game_results(file_path: PathLike) -> Dict[int, Dict[int, List[dict]]]:
        """
        Load cached game results.

        Args:
            file_path: Path to JSON file keyed by season, then day

        Returns:
            Game records keyed by integer season and day
        """
        with open(file_path, "r") as f:
            data = json.load(f)

        results: Dict[int, Dict[int, List[dict]]] = {}
        for season, days in data.items():
            results[int(season)] = {int(day): list(games) for day, games in days.items()}
        return results

    @staticmethod
    def save_game_results(game_results: Dict, file_path: PathLike) -> None:
        """Save game results keyed by season, then day."""
        payload = {
            str(season): {str(day): games for day, games in sorted(days.items(), key=lambda kv: int(kv[0]))}
            for season, days in sorted(game_results.items(), key=lambda kv: int(kv[0]))
        }
        _write_json(file_path, payload)

    @staticmethod
    def load_topology(file_path: PathLike) -> LeagueTopology:
        """Load league topology (divisions and subleagues) from JSON."""
        with open(file_path, "r") as f:
            data = json.load(f)
        return LeagueTopology.from_dict(data)

    @staticmethod
    def save_topology(topology: LeagueTopology, file_path: PathLike, last_updated_at: int) -> None:
        """
        Save league topology with its fetch timestamp.

        Args:
            topology: Topology to save
            file_path: Output file path
            last_updated_at: Fetch time in epoch milliseconds
        """
        payload = topology.to_dict()
        payload["lastUpdatedAt"] = last_updated_at
        _write_json(file_path, payload)

    @staticmethod
    def load_standings(file_path: PathLike) -> StandingsResult:
        with open(file_path, "r") as f:
            data = json.load(f)
        return StandingsResult.from_dict(data)

    @staticmethod
    def save_standings(standings: StandingsResult, file_path: PathLike) -> None:
        """Save standings keyed by season, then division."""
        _write_json(file_path, standings.to_dict())


def _write_json(file_path: PathLike, payload) -> None:
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(payload, f, indent="\t")
        f.write("\n")
