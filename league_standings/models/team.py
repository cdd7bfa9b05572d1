"""Team aggregate record model for season standings."""

from dataclasses import dataclass, field
from typing import Dict, Optional

SPLIT_TYPES = ("home", "away", "extraInnings", "winners", "oneRun", "shame")

WIN_STREAK = "wins"
LOSS_STREAK = "losses"


@dataclass
class SplitRecord:
    """Wins/losses tuple scoped to one game category."""

    wins: int = 0
    losses: int = 0
    pct: float = 0
    type: str = ""
    division_id: Optional[str] = None
    division_name: Optional[str] = None
    league_id: Optional[str] = None
    league_name: Optional[str] = None

    def add_win(self):
        self.wins += 1
        self.pct = winning_pct(self.wins, self.losses)

    def add_loss(self):
        self.losses += 1
        self.pct = winning_pct(self.wins, self.losses)

    def to_dict(self) -> dict:
        out = {"wins": self.wins, "losses": self.losses, "pct": self.pct, "type": self.type}
        if self.division_id is not None:
            out["divisionId"] = self.division_id
            out["divisionName"] = self.division_name
        if self.league_id is not None:
            out["leagueId"] = self.league_id
            out["leagueName"] = self.league_name
        return out

    @classmethod
    def from_dict(cls, data: dict) -> "SplitRecord":
        return cls(
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            pct=data.get("pct", 0),
            type=data.get("type", ""),
            division_id=data.get("divisionId"),
            division_name=data.get("divisionName"),
            league_id=data.get("leagueId"),
            league_name=data.get("leagueName"),
        )


def winning_pct(wins: int, losses: int) -> float:
    """Return wins / (wins + losses), or 0 when no games were played."""
    total = wins + losses
    if total == 0:
        return 0
    return wins / total


def _default_splits() -> Dict[str, SplitRecord]:
    return {split_type: SplitRecord(type=split_type) for split_type in SPLIT_TYPES}


@dataclass
class TeamRecord:
    """Aggregate regular-season record for one team in one season."""

    team_id: str
    team_name: str = ""
    team_slug: str = ""
    season: Optional[int] = None

    streak_type: str = ""
    streak_number: int = 0
    streak_code: str = ""

    games_played: int = 0
    wins: int = 0
    losses: int = 0
    winning_percentage: float = 0
    runs_scored: float = 0
    runs_allowed: float = 0
    run_differential: float = 0

    sport_rank: int = 0
    sport_games_back: str = ""
    division_rank: int = 0
    division_games_back: str = ""
    league_rank: int = 0
    league_games_back: str = ""
    games_back: str = ""

    sport_leader: bool = False
    division_leader: bool = False
    league_leader: bool = False
    division_champ: bool = False
    clinched: bool = False
    magic_number: str = ""
    elimination_number: str = ""

    league_record: SplitRecord = field(default_factory=SplitRecord)
    division_record: SplitRecord = field(default_factory=SplitRecord)
    split_records: Dict[str, SplitRecord] = field(default_factory=_default_splits)
    division_records: Dict[str, SplitRecord] = field(default_factory=dict)
    league_records: Dict[str, SplitRecord] = field(default_factory=dict)
    weather_records: Dict[int, SplitRecord] = field(default_factory=dict)

    def record_win(self, runs_for: float, runs_against: float):
        """
        Apply a win to the core tallies and the streak.

        Args:
            runs_for: Runs scored by this team
            runs_against: Runs scored by the opponent
        """
        if self.streak_type == WIN_STREAK:
            self.streak_number += 1
        else:
            self.streak_type = WIN_STREAK
            self.streak_number = 1
        self.streak_code = f"W{self.streak_number}"

        self.wins += 1
        self._record_game(runs_for, runs_against)

    def record_loss(self, runs_for: float, runs_against: float):
        """Apply a loss to the core tallies and the streak."""
        if self.streak_type == LOSS_STREAK:
            self.streak_number += 1
        else:
            self.streak_type = LOSS_STREAK
            self.streak_number = 1
        self.streak_code = f"L{self.streak_number}"

        self.losses += 1
        self._record_game(runs_for, runs_against)

    def _record_game(self, runs_for: float, runs_against: float):
        self.games_played += 1
        self.winning_percentage = winning_pct(self.wins, self.losses)
        self.runs_scored += runs_for
        self.runs_allowed += runs_against
        self.run_differential += runs_for - runs_against

    def division_record_vs(self, division_id: str, division_name: str) -> SplitRecord:
        """Get or create the record against an opposing division."""
        record = self.division_records.get(division_id)
        if record is None:
            record = SplitRecord(division_id=division_id, division_name=division_name)
            self.division_records[division_id] = record
        return record

    def league_record_vs(self, league_id: str, league_name: str) -> SplitRecord:
        """Get or create the record against an opposing league."""
        record = self.league_records.get(league_id)
        if record is None:
            record = SplitRecord(league_id=league_id, league_name=league_name)
            self.league_records[league_id] = record
        return record

    def weather_record(self, weather: int, label: str) -> SplitRecord:
        """Get or create the record for games played in a weather condition."""
        record = self.weather_records.get(weather)
        if record is None:
            record = SplitRecord(type=label)
            self.weather_records[weather] = record
        return record

    @property
    def win_differential(self) -> int:
        return self.wins - self.losses

    def to_dict(self) -> dict:
        """Convert record to the standings JSON shape."""
        return {
            "teamId": self.team_id,
            "teamName": self.team_name,
            "teamSlug": self.team_slug,
            "season": self.season,
            "streak": {
                "streakType": self.streak_type,
                "streakNumber": self.streak_number,
                "streakCode": self.streak_code,
            },
            "divisionRank": self.division_rank,
            "leagueRank": self.league_rank,
            "sportRank": self.sport_rank,
            "gamesPlayed": self.games_played,
            "gamesBack": self.games_back,
            "leagueGamesBack": self.league_games_back,
            "sportGamesBack": self.sport_games_back,
            "divisionGamesBack": self.division_games_back,
            "leagueRecord": _intra_record_dict(self.league_record),
            "divisionRecord": _intra_record_dict(self.division_record),
            "splitRecords": {k: v.to_dict() for k, v in self.split_records.items()},
            "weatherRecords": {str(k): v.to_dict() for k, v in self.weather_records.items()},
            "leagueRecords": {k: v.to_dict() for k, v in self.league_records.items()},
            "divisionRecords": {k: v.to_dict() for k, v in self.division_records.items()},
            "runsAllowed": self.runs_allowed,
            "runsScored": self.runs_scored,
            "eliminationNumber": self.elimination_number,
            "divisionChamp": self.division_champ,
            "divisionLeader": self.division_leader,
            "leagueLeader": self.league_leader,
            "sportLeader": self.sport_leader,
            "clinched": self.clinched,
            "magicNumber": self.magic_number,
            "wins": self.wins,
            "losses": self.losses,
            "runDifferential": self.run_differential,
            "winningPercentage": self.winning_percentage,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TeamRecord":
        """Create a record from the standings JSON shape."""
        streak = data.get("streak", {})
        splits = _default_splits()
        for key, value in data.get("splitRecords", {}).items():
            splits[key] = SplitRecord.from_dict(value)
        return cls(
            team_id=data["teamId"],
            team_name=data.get("teamName", ""),
            team_slug=data.get("teamSlug", ""),
            season=data.get("season"),
            streak_type=streak.get("streakType", ""),
            streak_number=streak.get("streakNumber", 0),
            streak_code=streak.get("streakCode", ""),
            games_played=data.get("gamesPlayed", 0),
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            winning_percentage=data.get("winningPercentage", 0),
            runs_scored=data.get("runsScored", 0),
            runs_allowed=data.get("runsAllowed", 0),
            run_differential=data.get("runDifferential", 0),
            sport_rank=data.get("sportRank", 0),
            sport_games_back=data.get("sportGamesBack", ""),
            division_rank=data.get("divisionRank", 0),
            division_games_back=data.get("divisionGamesBack", ""),
            league_rank=data.get("leagueRank", 0),
            league_games_back=data.get("leagueGamesBack", ""),
            games_back=data.get("gamesBack", ""),
            sport_leader=data.get("sportLeader", False),
            division_leader=data.get("divisionLeader", False),
            league_leader=data.get("leagueLeader", False),
            division_champ=data.get("divisionChamp", False),
            clinched=data.get("clinched", False),
            magic_number=data.get("magicNumber", ""),
            elimination_number=data.get("eliminationNumber", ""),
            league_record=SplitRecord.from_dict(data.get("leagueRecord", {})),
            division_record=SplitRecord.from_dict(data.get("divisionRecord", {})),
            split_records=splits,
            division_records={
                k: SplitRecord.from_dict(v) for k, v in data.get("divisionRecords", {}).items()
            },
            league_records={
                k: SplitRecord.from_dict(v) for k, v in data.get("leagueRecords", {}).items()
            },
            weather_records={
                int(k): SplitRecord.from_dict(v) for k, v in data.get("weatherRecords", {}).items()
            },
        )


def _intra_record_dict(record: SplitRecord) -> dict:
    return {"wins": record.wins, "losses": record.losses, "pct": record.pct}
