"""Data ingestion workflows for the league feed."""

from .collector import CollectorConfig, GameResultsCollector, merge_game_results
from .providers import FeedClient, GameResultProvider, ProviderConfig, TopologyProvider

__all__ = [
    "CollectorConfig",
    "FeedClient",
    "GameResultProvider",
    "GameResultsCollector",
    "ProviderConfig",
    "TopologyProvider",
    "merge_game_results",
]
