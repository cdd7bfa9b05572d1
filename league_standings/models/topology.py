"""League topology: teams grouped into divisions and leagues (subleagues)."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional


@dataclass
class Division:
    """A named group of teams nested under exactly one league."""

    id: str
    name: str
    league: str
    teams: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "subleague": self.league, "teams": list(self.teams)}

    @classmethod
    def from_dict(cls, data: dict) -> "Division":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            league=data.get("subleague") or data.get("league") or "",
            teams=list(data.get("teams", [])),
        )


@dataclass
class League:
    """A subleague: a named group of divisions and their teams."""

    id: str
    name: str
    divisions: List[str] = field(default_factory=list)
    teams: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "divisions": list(self.divisions),
            "teams": list(self.teams),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "League":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            divisions=list(data.get("divisions", [])),
            teams=list(data.get("teams", [])),
        )


class LeagueTopology:
    """Read-only team -> division -> league lookup."""

    def __init__(self, divisions: Iterable[Division] = (), leagues: Iterable[League] = ()):
        self.divisions: List[Division] = list(divisions)
        self.leagues: List[League] = list(leagues)
        self._division_by_team: Dict[str, Division] = {}
        self._league_by_team: Dict[str, League] = {}

        # First listing wins when a team appears in more than one group.
        for division in self.divisions:
            for team_id in division.teams:
                self._division_by_team.setdefault(team_id, division)
        for league in self.leagues:
            for team_id in league.teams:
                self._league_by_team.setdefault(team_id, league)

    def division_for(self, team_id: str) -> Optional[Division]:
        return self._division_by_team.get(team_id)

    def league_for(self, team_id: str) -> Optional[League]:
        return self._league_by_team.get(team_id)

    def to_dict(self) -> dict:
        """Convert topology to the cached JSON shape."""
        return {
            "divisions": [d.to_dict() for d in self.divisions],
            "subleagues": [league.to_dict() for league in self.leagues],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LeagueTopology":
        """Create topology from the cached JSON shape."""
        return cls(
            divisions=[Division.from_dict(d) for d in data.get("divisions", [])],
            leagues=[League.from_dict(s) for s in data.get("subleagues", data.get("leagues", []))],
        )
