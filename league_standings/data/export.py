"""Flat standings table export."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

from ..engine.orchestrator import StandingsResult

STANDINGS_COLUMNS = [
    "season",
    "division_id",
    "team_id",
    "team_name",
    "wins",
    "losses",
    "winning_percentage",
    "games_played",
    "runs_scored",
    "runs_allowed",
    "run_differential",
    "streak",
    "division_rank",
    "division_games_back",
    "league_rank",
    "league_games_back",
    "sport_rank",
    "sport_games_back",
    "magic_number",
    "elimination_number",
    "clinched",
    "home",
    "away",
    "extra_innings",
    "one_run",
    "vs_winners",
    "shame",
]

_SPLIT_COLUMNS = {
    "home": "home",
    "away": "away",
    "extra_innings": "extraInnings",
    "one_run": "oneRun",
    "vs_winners": "winners",
    "shame": "shame",
}


def standings_frame(standings: StandingsResult) -> pd.DataFrame:
    """One row per team per season, split records rendered as ``W-L``."""
    rows: List[Dict] = []
    for season in standings.season_ids():
        for division_id, records in standings[season].items():
            for r in records:
                row = {
                    "season": season,
                    "division_id": division_id,
                    "team_id": r.team_id,
                    "team_name": r.team_name,
                    "wins": r.wins,
                    "losses": r.losses,
                    "winning_percentage": round(r.winning_percentage, 3),
                    "games_played": r.games_played,
                    "runs_scored": r.runs_scored,
                    "runs_allowed": r.runs_allowed,
                    "run_differential": r.run_differential,
                    "streak": r.streak_code,
                    "division_rank": r.division_rank,
                    "division_games_back": r.division_games_back,
                    "league_rank": r.league_rank,
                    "league_games_back": r.league_games_back,
                    "sport_rank": r.sport_rank,
                    "sport_games_back": r.sport_games_back,
                    "magic_number": r.magic_number,
                    "elimination_number": r.elimination_number,
                    "clinched": r.clinched,
                }
                for column, split_type in _SPLIT_COLUMNS.items():
                    split = r.split_records[split_type]
                    row[column] = f"{split.wins}-{split.losses}"
                rows.append(row)

    df = pd.DataFrame(rows, columns=STANDINGS_COLUMNS)
    if df.empty:
        return df
    return df.sort_values(["season", "division_id", "division_rank"], kind="stable").reset_index(drop=True)


def write_standings_csv(standings: StandingsResult, file_path: Union[str, Path]) -> str:
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    standings_frame(standings).to_csv(path, index=False)
    return str(path)
