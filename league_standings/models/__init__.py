"""Domain models."""

from .game import Game, MalformedGameError
from .team import SplitRecord, TeamRecord, winning_pct
from .topology import Division, League, LeagueTopology

__all__ = [
    "Division",
    "Game",
    "League",
    "LeagueTopology",
    "MalformedGameError",
    "SplitRecord",
    "TeamRecord",
    "winning_pct",
]
