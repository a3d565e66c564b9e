"""REST API and HTML views for pitchside."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from html import escape
from typing import Any, Optional

from fastapi import FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import HTMLResponse, JSONResponse

from pitchside.api.schemas import ErrorEnvelope, LayoutPairResponse, LayoutRequest, SuccessEnvelope
from pitchside.config_loader import ConfigurationError, Settings
from pitchside.ingest import (
    normalize_events,
    normalize_fixture_to_summary,
    normalize_lineup,
    normalize_match_details,
    normalize_stats,
)
from pitchside.layout import assign_positions, layout_lineup, placeholder_slots
from pitchside.models import LineupPair, PitchLayout, TeamLineup
from pitchside.upstream import ApiFootballClient, UpstreamError, current_season


logger = logging.getLogger("uvicorn.error")

MAX_RECENT_LIMIT = 100
LIVE_STATUSES = "NS-1H-HT-2H-ET-P-BT-SUSP-INT-LIVE"
UPSTREAM_UNREACHABLE = "Failed to reach API-Football"
DEFAULT_KIT_COLOR = "#4ade80"


def _cache_headers(max_age: int, stale_while_revalidate: int) -> dict[str, str]:
    return {"Cache-Control": f"s-maxage={max_age}, stale-while-revalidate={stale_while_revalidate}"}


def _error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(
        content=ErrorEnvelope(error=message).model_dump(),
        status_code=status_code,
        headers=_cache_headers(0, 0),
    )


def _valid_fixture_id(fixture_id: str) -> Optional[int]:
    return int(fixture_id) if fixture_id.isascii() and fixture_id.isdigit() else None


def _date_key(value: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return datetime.min.replace(tzinfo=timezone.utc)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def short_name(name: str, max_length: int = 12) -> str:
    """Shorten a player name to fit under a pitch marker."""

    if len(name) <= max_length:
        return name
    parts = name.split()
    if len(parts) > 1:
        last_name = parts[-1]
        if len(last_name) <= max_length:
            return last_name
        abbreviated = f"{parts[0][0]}. {last_name}"
        if len(abbreviated) <= max_length:
            return abbreviated
    return name[: max_length - 1] + "…"


def initials(name: str) -> str:
    parts = name.split()
    if not parts:
        return "?"
    if len(parts) == 1:
        return parts[0][:2].upper()
    return (parts[0][0] + parts[-1][0]).upper()


def _render_page(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang=\"en\">
<head>
    <meta charset=\"utf-8\">
    <title>{escape(title)}</title>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 2rem; background: #0f172a; color: #e2e8f0; }}
        main {{ display: flex; gap: 2rem; flex-wrap: wrap; }}
        section {{ flex: 1 1 320px; max-width: 420px; }}
        h2 {{ font-size: 1rem; margin-bottom: 0.5rem; }}
        .pitch {{ position: relative; width: 100%; aspect-ratio: 2 / 3; border-radius: 16px; overflow: hidden;
                  background: linear-gradient(#15803d, #166534); border: 1px solid rgba(255,255,255,0.1); }}
        .pitch .halfway {{ position: absolute; top: 50%; left: 6%; right: 6%; height: 1px; background: rgba(255,255,255,0.25); }}
        .pitch .circle {{ position: absolute; top: 50%; left: 50%; width: 18%; aspect-ratio: 1; transform: translate(-50%, -50%);
                          border: 1px solid rgba(255,255,255,0.25); border-radius: 50%; }}
        .marker {{ position: absolute; transform: translate(-50%, -50%); text-align: center; font-size: 0.7rem; width: 72px; }}
        .marker .shirt {{ width: 30px; height: 30px; margin: 0 auto 2px; border-radius: 50%; line-height: 30px;
                          font-weight: 700; color: #0f172a; }}
        .marker.keeper .shirt {{ background: #facc15; }}
        .marker.empty .shirt {{ background: rgba(255,255,255,0.15); color: #cbd5e1; border: 1px dashed #cbd5e1; }}
        .notice {{ position: absolute; inset: 0; display: flex; align-items: center; justify-content: center;
                   background: rgba(0,0,0,0.3); font-size: 0.85rem; }}
        .coach {{ margin-top: 0.5rem; color: #94a3b8; font-size: 0.85rem; }}
    </style>
</head>
<body>
    <main>{body}</main>
</body>
</html>"""


def _render_pitch(title: str, lineup: Optional[TeamLineup], layout: PitchLayout) -> str:
    color = DEFAULT_KIT_COLOR
    if lineup and lineup.colors and lineup.colors.player and lineup.colors.player.primary:
        color = f"#{lineup.colors.player.primary}"

    markers = "".join(
        f"<div class=\"marker{' keeper' if player.is_goalkeeper else ''}\" style=\"left:{player.x:.1f}%;top:{player.y:.1f}%\" "
        f"title=\"{escape(player.name)} ({escape(player.slot_label)})\">"
        f"<div class=\"shirt\" style=\"{'' if player.is_goalkeeper else f'background:{escape(color)}'}\">"
        f"{escape(str(player.number) if player.number is not None else initials(player.name))}</div>"
        f"{escape(short_name(player.name))}</div>"
        for player in layout.players
    )
    markers += "".join(
        f"<div class=\"marker empty\" style=\"left:{slot.x:.1f}%;top:{slot.y:.1f}%\">"
        f"<div class=\"shirt\">{escape(slot.slot_label)}</div></div>"
        for slot in layout.placeholders
    )
    notice = "" if layout.players else "<div class=\"notice\">Lineups not available for this match</div>"
    heading = escape(title)
    if layout.formation:
        heading += f" <small>{escape(layout.formation)}</small>"
    coach = ""
    if lineup and lineup.coach:
        coach = f"<p class=\"coach\">Coach: {escape(lineup.coach.name)}</p>"
    return f"""
    <section>
        <h2>{heading}</h2>
        <div class=\"pitch\"><div class=\"halfway\"></div><div class=\"circle\"></div>{markers}{notice}</div>
        {coach}
    </section>
    """


def create_app(settings: Settings | None = None, client: ApiFootballClient | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    client = client or ApiFootballClient(settings)
    app = FastAPI(title="pitchside")
    app.state.settings = settings
    app.state.football_client = client

    def _success(data: Any, max_age: int | None = None) -> JSONResponse:
        age = settings.default_cache_seconds if max_age is None else max_age
        return JSONResponse(
            content=SuccessEnvelope(data=jsonable_encoder(data)).model_dump(),
            headers=_cache_headers(age, settings.stale_while_revalidate),
        )

    @app.exception_handler(UpstreamError)
    async def _upstream_error(request: Request, exc: UpstreamError) -> JSONResponse:
        return _error_response(exc.message, exc.status_code)

    @app.exception_handler(ConfigurationError)
    async def _configuration_error(request: Request, exc: ConfigurationError) -> JSONResponse:
        logger.error("Upstream API key is not configured")
        return _error_response("API key not configured", 500)

    async def _fetch_lineups(fixture_id: int) -> Optional[LineupPair]:
        raw_lineups = await client.fixture_lineups(fixture_id)
        if not raw_lineups:
            return None
        team_ids = [(lineup.get("team") or {}).get("id") for lineup in raw_lineups]
        photos = await client.squad_photos_for_teams(team_id for team_id in team_ids if team_id)
        lineups = [normalize_lineup(lineup, photos) for lineup in raw_lineups]
        return LineupPair(
            home=lineups[0] if lineups else None,
            away=lineups[1] if len(lineups) > 1 else None,
        )

    async def _passthrough(endpoint: str, params: dict[str, Any]) -> JSONResponse:
        try:
            status_code, body = await client.request(endpoint, params)
        except ConfigurationError:
            return JSONResponse({"error": "API key not configured"}, status_code=500)
        except UpstreamError as exc:
            return JSONResponse({"error": UPSTREAM_UNREACHABLE, "details": exc.message}, status_code=500)
        return JSONResponse(body, status_code=200 if status_code < 400 else status_code)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/recent")
    async def recent(
        league: str | None = None,
        team: str | None = None,
        season: str | None = None,
        limit: int = Query(25),
        status: str = "FT",
        upcoming: bool = False,
    ):
        if not league and not team:
            return _error_response("Missing league or team parameter", 400)
        limit = max(1, min(limit, MAX_RECENT_LIMIT))

        params: dict[str, Any] = {"season": season or current_season(), "league": league, "team": team}
        if upcoming:
            if team:
                params["next"] = limit
            else:
                params["status"] = LIVE_STATUSES
        elif team:
            params["last"] = limit
        else:
            params["status"] = status

        matches = [normalize_fixture_to_summary(raw) for raw in await client.fixtures(**params)]
        matches.sort(key=lambda match: _date_key(match.date), reverse=not upcoming)
        return _success(matches[:limit], 120)

    @app.get("/fixture/{fixture_id}")
    async def fixture(fixture_id: str):
        fixture_key = _valid_fixture_id(fixture_id)
        if fixture_key is None:
            return _error_response("Invalid fixture ID", 400)
        raw = await client.fixture(fixture_key)
        if raw is None:
            return _error_response("Fixture not found", 404)
        return _success(normalize_fixture_to_summary(raw), 300)

    @app.get("/fixture/{fixture_id}/events")
    async def fixture_events(fixture_id: str):
        fixture_key = _valid_fixture_id(fixture_id)
        if fixture_key is None:
            return _error_response("Invalid fixture ID", 400)
        events = normalize_events(await client.fixture_events(fixture_key))
        return _success(events, 600)

    @app.get("/fixture/{fixture_id}/statistics")
    async def fixture_statistics(fixture_id: str):
        fixture_key = _valid_fixture_id(fixture_id)
        if fixture_key is None:
            return _error_response("Invalid fixture ID", 400)
        raw_stats = await client.fixture_statistics(fixture_key)
        if len(raw_stats) < 2:
            return _success(None, 600)
        return _success(normalize_stats(raw_stats[0], raw_stats[1]), 600)

    @app.get("/fixture/{fixture_id}/lineups")
    async def fixture_lineups(fixture_id: str):
        fixture_key = _valid_fixture_id(fixture_id)
        if fixture_key is None:
            return _error_response("Invalid fixture ID", 400)
        lineups = await _fetch_lineups(fixture_key)
        if lineups is None:
            return _success(LineupPair(), 300)
        return _success(lineups, 600)

    @app.get("/fixture/{fixture_id}/layout")
    async def fixture_layout(fixture_id: str):
        fixture_key = _valid_fixture_id(fixture_id)
        if fixture_key is None:
            return _error_response("Invalid fixture ID", 400)
        lineups = await _fetch_lineups(fixture_key) or LineupPair()
        payload = LayoutPairResponse(home=layout_lineup(lineups.home), away=layout_lineup(lineups.away))
        return _success(payload, 600 if lineups.home or lineups.away else 300)

    @app.get("/fixture/{fixture_id}/details")
    async def fixture_details(fixture_id: str):
        fixture_key = _valid_fixture_id(fixture_id)
        if fixture_key is None:
            return _error_response("Invalid fixture ID", 400)
        raw_fixture, raw_lineups, raw_events, raw_stats = await asyncio.gather(
            client.fixture(fixture_key),
            client.fixture_lineups(fixture_key),
            client.fixture_events(fixture_key),
            client.fixture_statistics(fixture_key),
        )
        if raw_fixture is None:
            return _error_response("Fixture not found", 404)
        team_ids = [(lineup.get("team") or {}).get("id") for lineup in raw_lineups]
        photos = await client.squad_photos_for_teams(team_id for team_id in team_ids if team_id)
        details = normalize_match_details(raw_fixture, raw_lineups, raw_events, raw_stats, photos)
        return _success(details, 300)

    @app.get("/players")
    async def players(team: str | None = None, ids: str | None = None):
        if not team and not ids:
            return _error_response("Missing ids or team parameter", 400)
        # API-Football cannot batch photo lookups by id; callers fall back to avatars.
        photos = await client.squad_photos(team) if team else {}
        return _success(photos, 86400)

    @app.get("/fixtures")
    async def fixtures(team: str | None = None, last: str = "10", season: str | None = None):
        if not team:
            return JSONResponse({"error": "Missing team query"}, status_code=400)
        if season:
            return await _passthrough("/fixtures", {"team": team, "last": last, "season": season})

        latest = current_season()
        for candidate in (latest, latest - 1):
            try:
                status_code, body = await client.request(
                    "/fixtures", {"team": team, "last": last, "season": candidate}
                )
            except ConfigurationError:
                return JSONResponse({"error": "API key not configured"}, status_code=500)
            except UpstreamError as exc:
                return JSONResponse({"error": UPSTREAM_UNREACHABLE, "details": exc.message}, status_code=500)
            if status_code >= 400:
                return JSONResponse(body, status_code=status_code)
            if isinstance(body, dict) and body.get("response"):
                return JSONResponse(body)

        payload = dict(body) if isinstance(body, dict) else {}
        payload["warning"] = "No fixtures found for current or previous season."
        return JSONResponse(payload)

    @app.get("/lineups")
    async def lineups(fixture: str | None = None):
        if not fixture:
            return JSONResponse({"error": "Missing fixture query"}, status_code=400)
        return await _passthrough("/fixtures/lineups", {"fixture": fixture})

    @app.get("/teams")
    async def teams(search: str | None = None):
        if not search:
            return JSONResponse({"error": "Missing search query"}, status_code=400)
        return await _passthrough("/teams", {"search": search})

    @app.post("/layout", response_model=PitchLayout)
    async def layout(payload: LayoutRequest) -> PitchLayout:
        if not payload.players:
            return PitchLayout(formation=payload.formation, placeholders=placeholder_slots(payload.placeholders))
        return PitchLayout(
            formation=payload.formation,
            players=assign_positions(payload.players, payload.formation),
        )

    @app.get("/ui/fixture/{fixture_id}", response_class=HTMLResponse)
    async def ui_fixture(fixture_id: str):
        fixture_key = _valid_fixture_id(fixture_id)
        if fixture_key is None:
            return HTMLResponse(_render_page("pitchside", "<p>Invalid fixture ID</p>"), status_code=400)
        try:
            lineups = await _fetch_lineups(fixture_key) or LineupPair()
        except UpstreamError as exc:
            logger.warning("Lineups for fixture %s unavailable: %s", fixture_key, exc.message)
            lineups = LineupPair()
        body = "".join(
            _render_pitch(
                lineup.team.name if lineup else label,
                lineup,
                layout_lineup(lineup),
            )
            for label, lineup in (("Home", lineups.home), ("Away", lineups.away))
        )
        return HTMLResponse(_render_page(f"Fixture {fixture_key}", body))

    return app
