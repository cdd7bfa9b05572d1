"""Schema validators for ingested artifacts."""

from __future__ import annotations

from typing import Dict, List, Optional


def _to_float(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def validate_game_record(row, label: str = "game") -> List[str]:
    errors: List[str] = []
    if not isinstance(row, dict):
        return [f"{label} must be an object"]

    for key in ("homeTeam", "awayTeam"):
        if not row.get(key):
            errors.append(f"{label} missing '{key}'")
    for key in ("homeScore", "awayScore"):
        if _to_float(row.get(key)) is None:
            errors.append(f"{label} missing/invalid numeric field '{key}'")
    weather = row.get("weather")
    if weather is not None and _to_float(weather) is None:
        errors.append(f"{label} has non-numeric weather {weather!r}")
    return errors


def validate_game_results_payload(payload: Dict) -> List[str]:
    """Validate game results keyed by season, then day."""
    if not isinstance(payload, dict):
        return ["game results must be an object keyed by season"]

    errors: List[str] = []
    for season, days in payload.items():
        if _to_float(season) is None:
            errors.append(f"season key {season!r} is not numeric")
            continue
        if not isinstance(days, dict):
            errors.append(f"season {season} must be an object keyed by day")
            continue
        for day, games in days.items():
            if _to_float(day) is None:
                errors.append(f"season {season} day key {day!r} is not numeric")
                continue
            if not isinstance(games, list):
                errors.append(f"season {season} day {day} must be a list of games")
                continue
            for idx, game in enumerate(games):
                errors.extend(validate_game_record(game, f"season {season} day {day} games[{idx}]"))
    return errors


def validate_topology_payload(payload: Dict) -> List[str]:
    errors: List[str] = []
    divisions = payload.get("divisions")
    subleagues = payload.get("subleagues")
    if not isinstance(divisions, list) or not divisions:
        errors.append("topology payload must include non-empty 'divisions' list")
        divisions = []
    if not isinstance(subleagues, list) or not subleagues:
        errors.append("topology payload must include non-empty 'subleagues' list")
        subleagues = []

    subleague_ids = set()
    for idx, row in enumerate(subleagues):
        if not isinstance(row, dict):
            errors.append(f"subleagues[{idx}] must be an object")
            continue
        if not row.get("id"):
            errors.append(f"subleagues[{idx}] missing id")
        else:
            subleague_ids.add(row["id"])
        if not isinstance(row.get("teams", []), list):
            errors.append(f"subleagues[{idx}] teams must be a list")

    for idx, row in enumerate(divisions):
        if not isinstance(row, dict):
            errors.append(f"divisions[{idx}] must be an object")
            continue
        missing = [k for k in ("id", "name", "subleague") if not row.get(k)]
        if missing:
            errors.append(f"divisions[{idx}] missing fields: {', '.join(missing)}")
        elif subleague_ids and row["subleague"] not in subleague_ids:
            errors.append(f"divisions[{idx}] references unknown subleague {row['subleague']}")
        if not isinstance(row.get("teams"), list):
            errors.append(f"divisions[{idx}] missing teams list")
    return errors
