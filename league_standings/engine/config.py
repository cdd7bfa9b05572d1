"""Configuration for the standings engine."""

from dataclasses import dataclass


@dataclass
class StandingsConfig:
    """Season shape and engine options."""

    # Full regular-season game count per team.
    total_season_games: int = 99
    # Teams per league that reach the postseason.
    playoff_spots: int = 4
    # Games going past this inning count as extra innings.
    extra_innings_threshold: int = 8
    parallel_workers: int = 1

    def __post_init__(self):
        if self.playoff_spots < 1:
            raise ValueError(f"playoff_spots must be positive, got {self.playoff_spots}")
        if self.parallel_workers < 1:
            raise ValueError(f"parallel_workers must be positive, got {self.parallel_workers}")
