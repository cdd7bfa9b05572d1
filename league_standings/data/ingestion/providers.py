"""HTTP providers for game results and league topology."""

from __future__ import annotations

import json
import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

import requests

from ...models.topology import Division, League, LeagueTopology
from ..loader import DataLoader
from .validators import validate_topology_payload

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.blaseball.com/database"
DEFAULT_LEAGUE_ID = "d8545021-e9fc-48a3-af74-48685950a183"
ONE_DAY_SECONDS = 24 * 60 * 60


@dataclass
class ProviderConfig:
    """Connection settings shared by the feed providers."""

    base_url: Optional[str] = None
    league_id: str = DEFAULT_LEAGUE_ID
    timeout: float = 30.0
    min_request_interval: float = 0.25
    max_retries: int = 5
    # Seasons whose feed marks finished games as incomplete.
    incomplete_flag_exempt_seasons: Tuple[int, ...] = (3,)

    def __post_init__(self):
        if self.base_url is None:
            self.base_url = os.getenv("LEAGUE_API_BASE_URL", DEFAULT_BASE_URL)
        self.base_url = self.base_url.rstrip("/")


class FeedClient:
    """Throttled JSON client with retry on rate limits and server errors."""

    def __init__(self, config: Optional[ProviderConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or ProviderConfig()
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self._last_request_ts: Optional[float] = None

    def get_json(self, path: str, params: Optional[Dict] = None):
        """
        GET ``base_url + path`` and decode the JSON body.

        Args:
            path: Endpoint path such as ``/games``
            params: Query parameters

        Returns:
            Decoded JSON payload

        Raises:
            requests.HTTPError: On non-retryable errors or exhausted retries
        """
        url = f"{self.config.base_url}{path}"
        attempt_429 = 0
        attempt_5xx = 0
        while True:
            self._throttle()
            resp = self.session.get(url, params=params or {}, timeout=self.config.timeout)
            self._last_request_ts = time.monotonic()
            status = resp.status_code

            if status == 429:
                attempt_429 += 1
                if attempt_429 > self.config.max_retries:
                    resp.raise_for_status()
                delay = self._retry_after(resp)
                if delay is None:
                    delay = min(2 ** attempt_429, 60)
                logger.warning("Rate limited on %s; retrying in %.1fs", path, delay)
                time.sleep(delay)
                continue

            if 500 <= status < 600:
                attempt_5xx += 1
                if attempt_5xx > self.config.max_retries:
                    resp.raise_for_status()
                delay = min(2 ** attempt_5xx, 60)
                logger.warning("Server error %s on %s; retrying in %.1fs", status, path, delay)
                time.sleep(delay)
                continue

            resp.raise_for_status()
            return resp.json()

    def _throttle(self):
        if self._last_request_ts is None:
            return
        elapsed = time.monotonic() - self._last_request_ts
        if elapsed < self.config.min_request_interval:
            time.sleep(self.config.min_request_interval - elapsed)

    @staticmethod
    def _retry_after(resp) -> Optional[float]:
        value = resp.headers.get("Retry-After")
        if value is None:
            return None
        try:
            return max(float(value), 0.0)
        except (TypeError, ValueError):
            return None


class GameResultProvider:
    """Walks the games feed day by day, rolling over to the next season."""

    def __init__(self, client: Optional[FeedClient] = None, config: Optional[ProviderConfig] = None):
        self.client = client or FeedClient(config)
        self.config = self.client.config

    def fetch_day(self, season: int, day: int) -> List[Dict]:
        payload = self.client.get_json("/games", params={"season": season, "day": day})
        if not isinstance(payload, list):
            logger.warning("Unexpected games payload for season %s day %s", season, day)
            return []
        return [g for g in payload if isinstance(g, dict)]

    def iter_days(self, start_season: int = 0, start_day: int = 0) -> Iterator[Tuple[int, int, List[Dict]]]:
        """
        Yield ``(season, day, games)`` for every finished day from the start
        point onward.

        Stops at the first day holding an unfinished game, or when the first
        day of a season comes back empty. An empty day mid-season moves on to
        day 0 of the next season.
        """
        season, day = start_season, start_day
        try:
            games = self.fetch_day(season, day)
        except requests.RequestException as exc:
            logger.warning("Could not fetch season %s day %s: %s", season, day, exc)
            return

        while games:
            if self._has_active_game(season, games):
                logger.info("Season %s day %s still in progress; stopping", season, day)
                return

            logger.info("Fetched results for season %s day %s", season, day)
            yield season, day, games

            day += 1
            try:
                games = self.fetch_day(season, day)
                if not games:
                    season += 1
                    day = 0
                    games = self.fetch_day(season, day)
            except requests.RequestException as exc:
                logger.warning("Could not fetch season %s day %s: %s", season, day, exc)
                return

    def fetch_game_results(self, start_season: int = 0, start_day: int = 0) -> Dict[int, Dict[int, List[Dict]]]:
        results: Dict[int, Dict[int, List[Dict]]] = {}
        for season, day, games in self.iter_days(start_season, start_day):
            results.setdefault(season, {})[day] = games
        return results

    def _has_active_game(self, season: int, games: List[Dict]) -> bool:
        if season in self.config.incomplete_flag_exempt_seasons:
            return False
        return any(game.get("gameComplete") is False for game in games)


class TopologyProvider:
    """Builds the league topology from the feed, cached on disk for a day."""

    def __init__(
        self,
        cache_path: Optional[str] = None,
        client: Optional[FeedClient] = None,
        config: Optional[ProviderConfig] = None,
        cache_max_age_seconds: int = ONE_DAY_SECONDS,
    ):
        self.client = client or FeedClient(config)
        self.config = self.client.config
        self.cache_path = Path(cache_path) if cache_path else None
        self.cache_max_age_seconds = cache_max_age_seconds

    def get_topology(self, force_refresh: bool = False) -> LeagueTopology:
        if not force_refresh:
            cached = self._load_cache()
            if cached is not None:
                return cached

        topology = self.fetch_topology()
        if self.cache_path:
            DataLoader.save_topology(topology, self.cache_path, int(time.time() * 1000))
        return topology

    def fetch_topology(self) -> LeagueTopology:
        """Fetch league -> subleagues -> divisions from the feed."""
        league = self.client.get_json("/league", params={"id": self.config.league_id})
        divisions: List[Division] = []
        leagues: List[League] = []

        for subleague_id in league.get("subleagues", []):
            subleague = self.client.get_json("/subleague", params={"id": subleague_id})
            entry = League(
                id=subleague["id"],
                name=subleague.get("name", ""),
                divisions=list(subleague.get("divisions", [])),
            )
            for division_id in entry.divisions:
                division = self.client.get_json("/division", params={"id": division_id})
                teams = list(division.get("teams", []))
                entry.teams.extend(teams)
                divisions.append(
                    Division(id=division["id"], name=division.get("name", ""), league=entry.id, teams=teams)
                )
            leagues.append(entry)

        logger.info("Fetched topology: %d subleagues, %d divisions", len(leagues), len(divisions))
        return LeagueTopology(divisions=divisions, leagues=leagues)

    def _load_cache(self) -> Optional[LeagueTopology]:
        if not self.cache_path or not self.cache_path.exists():
            return None
        try:
            with open(self.cache_path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable topology cache %s: %s", self.cache_path, exc)
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring topology cache %s: not a JSON object", self.cache_path)
            return None

        last_updated = data.get("lastUpdatedAt")
        if not isinstance(last_updated, (int, float)):
            return None
        age_seconds = time.time() - last_updated / 1000.0
        if age_seconds > self.cache_max_age_seconds:
            logger.info("Topology cache is %.0fs old; refetching", age_seconds)
            return None

        errors = validate_topology_payload(data)
        if errors:
            logger.warning("Ignoring invalid topology cache: %s", errors[:5])
            return None
        return LeagueTopology.from_dict(data)
