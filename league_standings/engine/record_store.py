"""Per-season store of team aggregate records and their groupings."""

from typing import Dict, List, Optional

from ..data.normalize import slugify_team_name
from ..models.team import TeamRecord
from ..models.topology import Division, League


class RecordStore:
    """Owns every team record of one season plus the division/league groupings.

    Records are kept in first-encounter order; the finalizer relies on that
    order when wins are tied.
    """

    def __init__(self):
        self._records: Dict[str, TeamRecord] = {}
        self.teams: List[TeamRecord] = []
        self.by_division: Dict[str, List[TeamRecord]] = {}
        self.by_league: Dict[str, List[TeamRecord]] = {}

    def get(self, team_id: str) -> Optional[TeamRecord]:
        return self._records.get(team_id)

    def get_or_create(self, team_id: str, team_name: str, season: int) -> TeamRecord:
        """
        Get the team's record for the season, creating an empty one if needed.

        Args:
            team_id: Team identifier
            team_name: Display name used when the record is created
            season: Season the record belongs to

        Returns:
            The team's record
        """
        record = self._records.get(team_id)
        if record is None:
            record = TeamRecord(
                team_id=team_id,
                team_name=team_name,
                team_slug=slugify_team_name(team_name),
                season=season,
            )
            self._records[team_id] = record
        return record

    def register(
        self,
        record: TeamRecord,
        division: Optional[Division] = None,
        league: Optional[League] = None,
    ):
        """Add a record to the season, division and league groupings once."""
        if not any(r is record for r in self.teams):
            self.teams.append(record)
        if division is not None:
            self._add_member(self.by_division, division.id, record)
        if league is not None:
            self._add_member(self.by_league, league.id, record)

    @staticmethod
    def _add_member(groups: Dict[str, List[TeamRecord]], key: str, record: TeamRecord):
        members = groups.setdefault(key, [])
        if not any(r.team_id == record.team_id for r in members):
            members.append(record)

    @property
    def is_empty(self) -> bool:
        return not self.teams

    def division_snapshot(self) -> Dict[str, List[TeamRecord]]:
        return {division_id: list(records) for division_id, records in self.by_division.items()}

    def reset(self):
        self._records = {}
        self.teams = []
        self.by_division = {}
        self.by_league = {}
