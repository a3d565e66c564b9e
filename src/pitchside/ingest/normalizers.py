"""Reshape raw API-Football payloads into display records."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from pitchside.models import (
    Coach,
    EventPerson,
    KitColors,
    LeagueInfo,
    LineupPair,
    MatchDetails,
    MatchEvent,
    MatchHeader,
    MatchStat,
    MatchSummary,
    RosterPlayer,
    Score,
    TeamColors,
    TeamInfo,
    TeamLineup,
)


logger = logging.getLogger(__name__)

PLACEHOLDER_LOGO = (
    "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' width='64' height='64' "
    "viewBox='0 0 64 64'%3E%3Crect fill='%231f2937' width='64' height='64' rx='8'/%3E"
    "%3Ctext x='32' y='38' text-anchor='middle' fill='%2394a3b8' font-size='20' "
    "font-family='sans-serif'%3E?%3C/text%3E%3C/svg%3E"
)

UNKNOWN_POSITION = "?"

_EVENT_TYPES = {
    "Goal": "goal",
    "Card": "card",
    "subst": "subst",
    "Var": "var",
}


def _section(raw: Any, key: str) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        return {}
    value = raw.get(key)
    return value if isinstance(value, Mapping) else {}


def _as_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _team_info(raw: Mapping[str, Any]) -> TeamInfo:
    return TeamInfo(
        id=_as_int(raw.get("id")) or 0,
        name=str(raw.get("name") or ""),
        logo=raw.get("logo") or PLACEHOLDER_LOGO,
    )


def _league_info(raw: Mapping[str, Any]) -> Optional[LeagueInfo]:
    if not raw:
        return None
    return LeagueInfo(
        id=_as_int(raw.get("id")) or 0,
        name=str(raw.get("name") or ""),
        logo=raw.get("logo") or PLACEHOLDER_LOGO,
        country=raw.get("country"),
        season=_as_int(raw.get("season")),
    )


def _summary_fields(raw: Mapping[str, Any]) -> dict[str, Any]:
    fixture = _section(raw, "fixture")
    status = _section(fixture, "status")
    teams = _section(raw, "teams")
    goals = _section(raw, "goals")
    halftime = _section(_section(raw, "score"), "halftime")
    return {
        "id": _as_int(fixture.get("id")) or 0,
        "date": str(fixture.get("date") or ""),
        "status": str(status.get("long") or ""),
        "status_short": str(status.get("short") or ""),
        "home": _team_info(_section(teams, "home")),
        "away": _team_info(_section(teams, "away")),
        "score": Score(
            home=_as_int(goals.get("home")),
            away=_as_int(goals.get("away")),
            ht_home=_as_int(halftime.get("home")),
            ht_away=_as_int(halftime.get("away")),
        ),
        "league": _league_info(_section(raw, "league")),
        "venue": _section(fixture, "venue").get("name") or None,
    }


def normalize_fixture_to_summary(raw: Mapping[str, Any]) -> MatchSummary:
    return MatchSummary(**_summary_fields(raw))


def normalize_player(raw: Mapping[str, Any], photos: Mapping[int, str] | None = None) -> RosterPlayer:
    photos = photos or {}
    player_id = raw.get("id")
    return RosterPlayer(
        id=player_id if player_id is not None else str(raw.get("name") or ""),
        name=str(raw.get("name") or ""),
        number=_as_int(raw.get("number")),
        position=raw.get("pos") or UNKNOWN_POSITION,
        photo=photos.get(player_id) if player_id is not None else None,
        grid=raw.get("grid") or None,
    )


def _kit(raw: Mapping[str, Any]) -> Optional[KitColors]:
    if not raw:
        return None
    return KitColors(primary=raw.get("primary"), number=raw.get("number"), border=raw.get("border"))


def _players(entries: Any, photos: Mapping[int, str]) -> List[RosterPlayer]:
    players: List[RosterPlayer] = []
    for entry in entries or []:
        player = _section(entry, "player")
        if player:
            players.append(normalize_player(player, photos))
    return players


def normalize_lineup(raw: Mapping[str, Any], photos: Mapping[int, str] | None = None) -> TeamLineup:
    photos = photos or {}
    team = _section(raw, "team")
    coach = _section(raw, "coach")
    colors = _section(team, "colors")
    return TeamLineup(
        team=_team_info(team),
        formation=raw.get("formation") or None,
        coach=(
            Coach(id=_as_int(coach.get("id")), name=str(coach.get("name") or ""), photo=coach.get("photo") or None)
            if coach
            else None
        ),
        starting_xi=_players(raw.get("startXI"), photos),
        substitutes=_players(raw.get("substitutes"), photos),
        colors=(
            TeamColors(player=_kit(_section(colors, "player")), goalkeeper=_kit(_section(colors, "goalkeeper")))
            if colors
            else None
        ),
    )


def normalize_event(raw: Mapping[str, Any], index: int) -> MatchEvent:
    time = _section(raw, "time")
    minute = _as_int(time.get("elapsed")) or 0
    raw_type = str(raw.get("type") or "")
    player = _section(raw, "player")
    assist = _section(raw, "assist")
    return MatchEvent(
        id=f"{minute}-{raw_type}-{index}",
        minute=minute,
        extra_minute=_as_int(time.get("extra")),
        type=_EVENT_TYPES.get(raw_type, "other"),
        detail=str(raw.get("detail") or ""),
        team=_team_info(_section(raw, "team")),
        player=EventPerson(id=player["id"], name=player.get("name")) if player.get("id") else None,
        assist=(
            EventPerson(id=assist["id"], name=assist["name"])
            if assist.get("id") and assist.get("name")
            else None
        ),
        comments=raw.get("comments"),
    )


def sort_events(events: Iterable[MatchEvent]) -> List[MatchEvent]:
    return sorted(events, key=lambda event: (event.minute, event.extra_minute or 0))


def normalize_events(raw_events: Sequence[Mapping[str, Any]]) -> List[MatchEvent]:
    return sort_events(normalize_event(event, index) for index, event in enumerate(raw_events or []))


def normalize_stats(
    home: Optional[Mapping[str, Any]],
    away: Optional[Mapping[str, Any]],
) -> Optional[List[MatchStat]]:
    """Pair up both teams' statistics by type, keeping first-seen order."""

    if not home or not away:
        return None

    merged: dict[str, MatchStat] = {}
    for entry in home.get("statistics") or []:
        stat_type = entry.get("type")
        if stat_type:
            merged[stat_type] = MatchStat(type=stat_type, home=entry.get("value"))
    for entry in away.get("statistics") or []:
        stat_type = entry.get("type")
        if not stat_type:
            continue
        if stat_type in merged:
            merged[stat_type] = merged[stat_type].model_copy(update={"away": entry.get("value")})
        else:
            merged[stat_type] = MatchStat(type=stat_type, away=entry.get("value"))

    return list(merged.values()) or None


def _for_team(entries: Sequence[Mapping[str, Any]] | None, team_id: int) -> Optional[Mapping[str, Any]]:
    for entry in entries or []:
        if _as_int(_section(entry, "team").get("id")) == team_id:
            return entry
    return None


def normalize_match_details(
    fixture: Mapping[str, Any],
    lineups: Sequence[Mapping[str, Any]] | None,
    events: Sequence[Mapping[str, Any]] | None,
    stats: Sequence[Mapping[str, Any]] | None,
    photos: Mapping[int, str] | None = None,
) -> MatchDetails:
    fields = _summary_fields(fixture)
    header = MatchHeader(**fields, referee=_section(fixture, "fixture").get("referee") or None)
    home_id = header.home.id
    away_id = header.away.id

    home_lineup = _for_team(lineups, home_id)
    away_lineup = _for_team(lineups, away_id)
    lineup_pair = None
    if home_lineup or away_lineup:
        lineup_pair = LineupPair(
            home=normalize_lineup(home_lineup, photos) if home_lineup else None,
            away=normalize_lineup(away_lineup, photos) if away_lineup else None,
        )
    if lineups and lineup_pair is None:
        logger.info("Fixture %s lineups do not match either team", header.id)

    return MatchDetails(
        header=header,
        lineups=lineup_pair,
        events=[normalize_event(event, index) for index, event in enumerate(events or [])],
        stats=normalize_stats(_for_team(stats, home_id), _for_team(stats, away_id)) if stats else None,
    )
