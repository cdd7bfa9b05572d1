"""Main CLI interface for the league standings generator."""

import argparse
import logging
import sys
from pathlib import Path

from .data.export import write_standings_csv
from .data.ingestion.collector import CollectorConfig, GameResultsCollector
from .data.ingestion.providers import GameResultProvider, ProviderConfig, TopologyProvider
from .data.loader import DataLoader
from .engine.config import StandingsConfig
from .engine.orchestrator import build_standings


def _provider_config(args) -> ProviderConfig:
    return ProviderConfig(
        base_url=args.base_url,
        min_request_interval=args.request_interval,
        max_retries=args.max_retries,
    )


def _standings_config(args) -> StandingsConfig:
    return StandingsConfig(
        total_season_games=args.season_games,
        playoff_spots=args.playoff_spots,
        parallel_workers=args.workers,
    )


def _write_outputs(standings, args) -> None:
    DataLoader.save_standings(standings, args.output)
    print(f"✓ Standings for {len(standings)} seasons written to {args.output}")
    if args.csv:
        write_standings_csv(standings, args.csv)
        print(f"✓ Standings table written to {args.csv}")


def generate_standings(args):
    """Refresh topology and game results, then compute standings."""
    collector_config = CollectorConfig(
        data_dir=args.data_dir,
        fetch_new=not args.offline,
        strict_validation=args.strict,
    )
    provider_config = _provider_config(args)

    if args.offline:
        if not collector_config.topology_path.exists():
            print(f"Error: topology file not found: {collector_config.topology_path}")
            return 1
        topology = DataLoader.load_topology(collector_config.topology_path)
    else:
        topology = TopologyProvider(
            cache_path=str(collector_config.topology_path),
            config=provider_config,
        ).get_topology(force_refresh=args.refresh_topology)
    print(f"Loaded {len(topology.divisions)} divisions in {len(topology.leagues)} leagues")

    collector = GameResultsCollector(
        collector_config,
        provider=GameResultProvider(config=provider_config),
    )
    game_results = collector.run()
    print(f"Loaded game results for {len(game_results)} seasons")

    standings = build_standings(game_results, topology, _standings_config(args))
    _write_outputs(standings, args)
    return 0


def compute_standings(args):
    """Compute standings from files already on disk."""
    for label, path in (("game results", args.games), ("topology", args.topology)):
        if not Path(path).exists():
            print(f"Error: {label} file not found: {path}")
            return 1

    game_results = DataLoader.load_game_results(args.games)
    topology = DataLoader.load_topology(args.topology)
    standings = build_standings(game_results, topology, _standings_config(args))
    _write_outputs(standings, args)
    return 0


def fetch_games(args):
    """Update the game results cache only."""
    config = CollectorConfig(data_dir=args.data_dir, strict_validation=args.strict)
    collector = GameResultsCollector(config, provider=GameResultProvider(config=_provider_config(args)))
    game_results = collector.run()
    print(f"✓ Game results for {len(game_results)} seasons saved to {config.games_path}")
    return 0


def _add_engine_arguments(parser):
    parser.add_argument("--output", "-o", default="data/standings/standings.json", help="Standings JSON output")
    parser.add_argument("--csv", default=None, help="Optional flat standings CSV output")
    parser.add_argument("--season-games", type=int, default=99, help="Regular-season games per team (default: 99)")
    parser.add_argument("--playoff-spots", type=int, default=4, help="Playoff teams per league (default: 4)")
    parser.add_argument("--workers", type=int, default=1, help="Seasons computed in parallel (default: 1)")


def _add_feed_arguments(parser):
    parser.add_argument("--data-dir", default="data", help="Directory for cached feed data")
    parser.add_argument("--base-url", default=None, help="Feed base URL (default: $LEAGUE_API_BASE_URL or public feed)")
    parser.add_argument("--request-interval", type=float, default=0.25, help="Minimum seconds between requests")
    parser.add_argument("--max-retries", type=int, default=5, help="Retries on rate limits and server errors")
    parser.add_argument("--strict", action="store_true", help="Fail when cached game results do not validate")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="League Standings Generator - season standings, splits and clinch numbers from game results"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    generate_parser = subparsers.add_parser("generate", help="Fetch new results and compute standings")
    _add_feed_arguments(generate_parser)
    _add_engine_arguments(generate_parser)
    generate_parser.add_argument("--offline", action="store_true", help="Use cached data only")
    generate_parser.add_argument("--refresh-topology", action="store_true", help="Ignore the topology cache")

    compute_parser = subparsers.add_parser("compute", help="Compute standings from local files")
    compute_parser.add_argument("--games", default="data/gameResults.json", help="Game results JSON")
    compute_parser.add_argument("--topology", default="data/leaguesAndDivisions.json", help="Topology JSON")
    _add_engine_arguments(compute_parser)

    fetch_parser = subparsers.add_parser("fetch-games", help="Update the cached game results")
    _add_feed_arguments(fetch_parser)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        return generate_standings(args)
    elif args.command == "compute":
        return compute_standings(args)
    elif args.command == "fetch-games":
        return fetch_games(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
