"""End-of-season ranking, games-back and clinch computation."""

import logging
from typing import List, Optional

from ..models.team import TeamRecord
from .config import StandingsConfig
from .record_store import RecordStore

logger = logging.getLogger(__name__)

LEADER_GAMES_BACK = "-"
CLINCHED_MAGIC_NUMBER = "-"


def sort_by_wins(records: List[TeamRecord]) -> List[TeamRecord]:
    """Sort records by wins, most first, in place.

    Ties keep their encounter order; losses are not used as a tie-break.
    """
    records.sort(key=lambda r: r.wins, reverse=True)
    return records


def format_games_back(value: float) -> str:
    """Render games back the way the standings feed does ("3", "2.5")."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def games_back(leader: TeamRecord, record: TeamRecord) -> str:
    if record is leader:
        return LEADER_GAMES_BACK
    return format_games_back((leader.win_differential - record.win_differential) / 2)


class StandingsFinalizer:
    """Ranks a finished season sport-wide, per division and per league."""

    def __init__(self, config: Optional[StandingsConfig] = None):
        self.config = config or StandingsConfig()

    def finalize(self, store: RecordStore):
        """
        Populate rank, games-back, leader and clinch fields of every record.

        Args:
            store: Record store holding the completed season
        """
        if store.is_empty:
            return

        self.rank_sport(store.teams)
        for records in store.by_division.values():
            self.rank_division(records)
        for league_id, records in store.by_league.items():
            self.rank_league(league_id, records)

    def rank_sport(self, records: List[TeamRecord]):
        ranked = sort_by_wins(list(records))
        leader = ranked[0]
        leader.sport_leader = True
        for index, record in enumerate(ranked):
            record.sport_rank = index + 1
            record.sport_games_back = games_back(leader, record)

    def rank_division(self, records: List[TeamRecord]):
        if not records:
            return
        sort_by_wins(records)
        leader = records[0]
        leader.division_leader = True
        for index, record in enumerate(records):
            record.division_rank = index + 1
            record.division_games_back = games_back(leader, record)

    def rank_league(self, league_id: str, records: List[TeamRecord]):
        if not records:
            return
        sort_by_wins(records)
        leader = records[0]
        leader.league_leader = True

        self.apply_clinch_numbers(league_id, records)

        for index, record in enumerate(records):
            record.league_rank = index + 1
            record.league_games_back = games_back(leader, record)
            record.games_back = record.league_games_back

    def apply_clinch_numbers(self, league_id: str, ranked: List[TeamRecord]):
        """
        Set magic numbers for playoff-position teams and elimination numbers
        for the rest.

        Magic number for a team in a playoff spot counts against the first
        team outside the spots; elimination number for a team outside counts
        against the last team inside.

        Args:
            league_id: League being ranked (for logging)
            ranked: League records sorted by wins
        """
        spots = self.config.playoff_spots
        if len(ranked) <= spots:
            logger.debug(
                "League %s has %d teams for %d playoff spots; skipping clinch numbers",
                league_id,
                len(ranked),
                spots,
            )
            return

        remaining = self.config.total_season_games + 1
        first_out = ranked[spots]
        last_in = ranked[spots - 1]

        for record in ranked[:spots]:
            magic_number = remaining - record.wins - first_out.losses
            if magic_number <= 0:
                record.magic_number = CLINCHED_MAGIC_NUMBER
                record.clinched = True
            else:
                record.magic_number = str(magic_number)
                record.clinched = False

        for record in ranked[spots:]:
            record.elimination_number = str(remaining - last_in.wins - record.losses)
