"""Shared fixtures for standings tests."""

import pytest

from league_standings.models.topology import Division, League, LeagueTopology


def make_game(home, away, home_score, away_score, season=0, day=0, **extra):
    """Build an upstream-shaped game record."""
    game = {
        "id": f"{season}-{day}-{home}-{away}",
        "season": season,
        "day": day,
        "homeTeam": home,
        "awayTeam": away,
        "homeTeamName": f"{home} Team",
        "awayTeamName": f"{away} Team",
        "homeScore": home_score,
        "awayScore": away_score,
        "inning": 8,
        "isPostseason": False,
        "gameComplete": True,
        "shame": False,
        "weather": None,
    }
    game.update(extra)
    return game


@pytest.fixture
def topology():
    """Two leagues with two divisions each.

    good: d1 (a, b, c), d2 (d, e, f)
    evil: d3 (g, h), d4 (i, j)
    """
    divisions = [
        Division(id="d1", name="Good High", league="good", teams=["a", "b", "c"]),
        Division(id="d2", name="Good Low", league="good", teams=["d", "e", "f"]),
        Division(id="d3", name="Evil High", league="evil", teams=["g", "h"]),
        Division(id="d4", name="Evil Low", league="evil", teams=["i", "j"]),
    ]
    leagues = [
        League(id="good", name="The Good League", divisions=["d1", "d2"], teams=list("abcdef")),
        League(id="evil", name="The Evil League", divisions=["d3", "d4"], teams=list("ghij")),
    ]
    return LeagueTopology(divisions=divisions, leagues=leagues)
