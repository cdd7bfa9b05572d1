"""Per-game update of the season's team records."""

import logging
from typing import Optional

from ..data.weather import WeatherLookup
from ..models.game import Game
from ..models.topology import LeagueTopology
from .config import StandingsConfig
from .record_store import RecordStore

logger = logging.getLogger(__name__)


class GameProcessor:
    """Applies one completed regular-season game to a RecordStore."""

    def __init__(
        self,
        topology: LeagueTopology,
        weather: Optional[WeatherLookup] = None,
        config: Optional[StandingsConfig] = None,
    ):
        self.topology = topology
        self.weather = weather or WeatherLookup()
        self.config = config or StandingsConfig()

    def process(self, store: RecordStore, game: Game) -> bool:
        """
        Apply a game's effect to both teams' records.

        Args:
            store: Record store of the game's season
            game: Completed game

        Returns:
            True if the game was applied, False if it was skipped
        """
        if not game.game_complete or game.is_postseason:
            return False

        win_side = game.winner_side
        lose_side = game.loser_side
        winner_id = game.team(win_side)
        loser_id = game.team(lose_side)

        winner_division = self.topology.division_for(winner_id)
        loser_division = self.topology.division_for(loser_id)
        winner_league = self.topology.league_for(winner_id)
        loser_league = self.topology.league_for(loser_id)

        winner = store.get_or_create(winner_id, game.team_name(win_side), game.season)
        loser = store.get_or_create(loser_id, game.team_name(lose_side), game.season)

        # Opponent quality is judged on the record going into this game.
        winner_pct_before = winner.winning_percentage
        loser_pct_before = loser.winning_percentage

        winner_runs = game.score(win_side)
        loser_runs = game.score(lose_side)
        winner.record_win(winner_runs, loser_runs)
        loser.record_loss(loser_runs, winner_runs)

        if winner_league is not None and loser_league is not None and winner_league.id == loser_league.id:
            winner.league_record.add_win()
            loser.league_record.add_loss()

        if winner_division is not None and loser_division is not None and winner_division.id == loser_division.id:
            winner.division_record.add_win()
            loser.division_record.add_loss()

        winner.split_records[win_side].add_win()
        loser.split_records[lose_side].add_loss()

        if game.inning > self.config.extra_innings_threshold:
            winner.split_records["extraInnings"].add_win()
            loser.split_records["extraInnings"].add_loss()

        if loser_pct_before > 0.5:
            winner.split_records["winners"].add_win()
        if winner_pct_before > 0.5:
            loser.split_records["winners"].add_loss()

        if game.score_margin == 1:
            winner.split_records["oneRun"].add_win()
            loser.split_records["oneRun"].add_loss()

        if game.shame:
            winner.split_records["shame"].add_win()
            loser.split_records["shame"].add_loss()

        if winner_division is not None and loser_division is not None:
            winner.division_record_vs(loser_division.id, loser_division.name).add_win()
            loser.division_record_vs(winner_division.id, winner_division.name).add_loss()

        if winner_league is not None and loser_league is not None:
            winner.league_record_vs(loser_league.id, loser_league.name).add_win()
            loser.league_record_vs(winner_league.id, winner_league.name).add_loss()

        if game.weather is not None:
            label = self.weather.label(game.weather)
            winner.weather_record(game.weather, label).add_win()
            loser.weather_record(game.weather, label).add_loss()

        store.register(winner, winner_division, winner_league)
        store.register(loser, loser_division, loser_league)

        unplaced = [
            team_id
            for team_id, division in ((winner_id, winner_division), (loser_id, loser_division))
            if division is None
        ]
        if unplaced:
            logger.debug("Game %s: no division for %s", game.game_id, ", ".join(unplaced))
        return True

