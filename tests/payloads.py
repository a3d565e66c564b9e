"""Canned API-Football payloads shared by the ingest and API tests."""

from __future__ import annotations

from typing import Any

HOME_ID = 40
AWAY_ID = 50


def _team(team_id: int, name: str, logo: str | None = "https://media.example/team.png") -> dict[str, Any]:
    return {"id": team_id, "name": name, "logo": logo, "winner": None}


def fixture_payload(fixture_id: int = 1001, date: str = "2024-08-17T14:00:00+00:00", **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "fixture": {
            "id": fixture_id,
            "referee": "M. Oliver",
            "timezone": "UTC",
            "date": date,
            "timestamp": 0,
            "venue": {"id": 1, "name": "Anfield", "city": "Liverpool"},
            "status": {"long": "Match Finished", "short": "FT", "elapsed": 90},
        },
        "league": {
            "id": 39,
            "name": "Premier League",
            "country": "England",
            "logo": "https://media.example/league.png",
            "flag": None,
            "season": 2024,
            "round": "Regular Season - 1",
        },
        "teams": {"home": _team(HOME_ID, "Liverpool"), "away": _team(AWAY_ID, "Everton", logo=None)},
        "goals": {"home": 2, "away": 1},
        "score": {
            "halftime": {"home": 1, "away": 0},
            "fulltime": {"home": 2, "away": 1},
            "extratime": {"home": None, "away": None},
            "penalty": {"home": None, "away": None},
        },
    }
    payload.update(overrides)
    return payload


FOUR_THREE_THREE_POSITIONS = ["GK", "LB", "CB", "CB", "RB", "CM", "CM", "CM", "LW", "ST", "RW"]


def lineup_payload(team_id: int = HOME_ID, name: str = "Liverpool", formation: str | None = "4-3-3") -> dict[str, Any]:
    start_xi = [
        {"player": {"id": team_id * 100 + idx, "name": f"Player {idx}", "number": idx, "pos": pos, "grid": None}}
        for idx, pos in enumerate(FOUR_THREE_THREE_POSITIONS, start=1)
    ]
    return {
        "team": {
            "id": team_id,
            "name": name,
            "logo": "https://media.example/team.png",
            "colors": {"player": {"primary": "c8102e", "number": "ffffff", "border": "c8102e"}},
        },
        "coach": {"id": 7, "name": "A. Slot", "photo": None},
        "formation": formation,
        "startXI": start_xi,
        "substitutes": [{"player": {"id": team_id * 100 + 50, "name": "Bench Guy", "number": 30, "pos": None, "grid": None}}],
    }


def event_payload(minute: int, event_type: str, extra: int | None = None, team_id: int = HOME_ID) -> dict[str, Any]:
    return {
        "time": {"elapsed": minute, "extra": extra},
        "team": _team(team_id, "Liverpool" if team_id == HOME_ID else "Everton"),
        "player": {"id": 4001, "name": "M. Salah"},
        "assist": {"id": None, "name": None},
        "type": event_type,
        "detail": "Normal Goal" if event_type == "Goal" else "Yellow Card",
        "comments": None,
    }


def stats_payload(team_id: int, values: list[tuple[str, Any]]) -> dict[str, Any]:
    return {
        "team": _team(team_id, "Liverpool" if team_id == HOME_ID else "Everton"),
        "statistics": [{"type": stat_type, "value": value} for stat_type, value in values],
    }


def squad_payload(team_id: int) -> dict[str, Any]:
    return {
        "response": [
            {
                "team": {"id": team_id},
                "players": [
                    {"id": team_id * 100 + 1, "name": "Player 1", "photo": f"https://media.example/{team_id}01.png"},
                    {"id": team_id * 100 + 2, "name": "Player 2", "photo": None},
                ],
            }
        ]
    }


def envelope(response: Any, errors: Any = None) -> dict[str, Any]:
    return {
        "get": "fixtures",
        "parameters": {},
        "errors": errors if errors is not None else [],
        "results": len(response) if isinstance(response, list) else 1,
        "paging": {"current": 1, "total": 1},
        "response": response,
    }
