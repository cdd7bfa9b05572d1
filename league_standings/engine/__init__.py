"""Standings computation engine."""

from .config import StandingsConfig
from .finalizer import StandingsFinalizer
from .orchestrator import SeasonOrchestrator, StandingsResult, build_standings
from .processor import GameProcessor
from .record_store import RecordStore

__all__ = [
    "GameProcessor",
    "RecordStore",
    "SeasonOrchestrator",
    "StandingsConfig",
    "StandingsFinalizer",
    "StandingsResult",
    "build_standings",
]
