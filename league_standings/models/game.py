"""Game model for completed regular-season results."""

from dataclasses import dataclass
from typing import Optional


class MalformedGameError(ValueError):
    """Raised when an upstream game record is missing team or score fields."""


def _to_int(value, field_name: str) -> int:
    if value is None or isinstance(value, bool):
        raise MalformedGameError(f"game missing numeric field '{field_name}'")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise MalformedGameError(f"game field '{field_name}' is not numeric: {value!r}")


def _to_score(value, field_name: str):
    if value is None or isinstance(value, bool):
        raise MalformedGameError(f"game missing score field '{field_name}'")
    try:
        score = float(value)
    except (TypeError, ValueError):
        raise MalformedGameError(f"game field '{field_name}' is not numeric: {value!r}")
    return int(score) if score.is_integer() else score


@dataclass(frozen=True)
class Game:
    """Represents a single game as reported by the game results feed."""

    season: int
    day: int
    home_team: str
    away_team: str
    home_score: float
    away_score: float
    home_team_name: str = ""
    away_team_name: str = ""
    inning: int = 0
    is_postseason: bool = False
    game_complete: bool = True
    shame: bool = False
    weather: Optional[int] = None
    game_id: str = ""

    @property
    def winner_side(self) -> str:
        """Side credited with the win; equal scores go to the away side."""
        return "home" if self.home_score > self.away_score else "away"

    @property
    def loser_side(self) -> str:
        return "away" if self.winner_side == "home" else "home"

    @property
    def score_margin(self) -> float:
        return abs(self.home_score - self.away_score)

    def team(self, side: str) -> str:
        return self.home_team if side == "home" else self.away_team

    def team_name(self, side: str) -> str:
        return self.home_team_name if side == "home" else self.away_team_name

    def score(self, side: str) -> float:
        return self.home_score if side == "home" else self.away_score

    @classmethod
    def from_dict(cls, data: dict) -> "Game":
        """
        Create a game from an upstream feed record.

        Args:
            data: Raw game record (camelCase keys)

        Returns:
            Game instance

        Raises:
            MalformedGameError: If team ids or scores are missing or invalid
        """
        if not isinstance(data, dict):
            raise MalformedGameError("game record must be an object")

        home_team = data.get("homeTeam")
        away_team = data.get("awayTeam")
        if not home_team or not away_team:
            raise MalformedGameError("game missing homeTeam/awayTeam")

        weather = data.get("weather")
        return cls(
            season=_to_int(data.get("season", 0), "season"),
            day=_to_int(data.get("day", 0), "day"),
            home_team=str(home_team),
            away_team=str(away_team),
            home_score=_to_score(data.get("homeScore"), "homeScore"),
            away_score=_to_score(data.get("awayScore"), "awayScore"),
            home_team_name=str(data.get("homeTeamName") or ""),
            away_team_name=str(data.get("awayTeamName") or ""),
            inning=_to_int(data.get("inning") or 0, "inning"),
            is_postseason=data.get("isPostseason") is True,
            game_complete=data.get("gameComplete") is not False,
            shame=data.get("shame") is True,
            weather=None if weather is None else _to_int(weather, "weather"),
            game_id=str(data.get("id") or data.get("_id") or ""),
        )
