"""Async client for the API-Football v3 REST service."""

from __future__ import annotations

import asyncio
import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import httpx

from pitchside.config_loader import Settings


logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-apisports-key"
SEASON_START_MONTH = 7


class UpstreamError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def current_season(today: Optional[date] = None) -> int:
    """Season year for ``today``; seasons roll over in July."""

    today = today or datetime.now(timezone.utc).date()
    return today.year if today.month >= SEASON_START_MONTH else today.year - 1


def api_errors(payload: Any) -> Optional[str]:
    """Flatten the ``errors`` field API-Football reports alongside a 200."""

    if not isinstance(payload, Mapping):
        return None
    errors = payload.get("errors")
    if not errors:
        return None
    if isinstance(errors, Mapping):
        return ", ".join(str(value) for value in errors.values())
    if isinstance(errors, (list, tuple)):
        return ", ".join(str(value) for value in errors)
    return str(errors)


def _clean_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    cleaned: Dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None or value == "":
            continue
        cleaned[key] = str(value)
    return cleaned


def _response_list(payload: Any) -> List[Dict[str, Any]]:
    if not isinstance(payload, Mapping):
        return []
    items = payload.get("response") or []
    return [item for item in items if isinstance(item, Mapping)]


class ApiFootballClient:
    """Thin wrapper that adds auth, drops empty params and maps failures."""

    def __init__(self, settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.settings.api_base,
            timeout=self.settings.timeout,
            transport=self._transport,
            headers={API_KEY_HEADER: self.settings.require_api_key()},
        )

    async def request(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Tuple[int, Any]:
        """Return ``(status_code, json_body)`` without judging the status."""

        query = _clean_params(params)
        try:
            async with self._client() as client:
                response = await client.get(endpoint, params=query)
        except httpx.HTTPError as exc:
            logger.warning("API-Football request %s failed: %s", endpoint, exc)
            raise UpstreamError(502, f"Failed to reach API-Football: {exc}") from exc
        try:
            body = response.json()
        except ValueError as exc:
            raise UpstreamError(502, "API-Football returned invalid JSON") from exc
        return response.status_code, body

    async def get(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        status_code, body = await self.request(endpoint, params)
        if status_code >= 400:
            logger.warning("API-Football %s responded with %s", endpoint, status_code)
            raise UpstreamError(status_code, f"API error: {status_code}")
        return body

    async def fixtures(self, **params: Any) -> List[Dict[str, Any]]:
        payload = await self.get("/fixtures", params)
        message = api_errors(payload)
        if message:
            raise UpstreamError(400, message)
        return _response_list(payload)

    async def fixture(self, fixture_id: int) -> Optional[Dict[str, Any]]:
        fixtures = _response_list(await self.get("/fixtures", {"id": fixture_id}))
        return fixtures[0] if fixtures else None

    async def fixture_lineups(self, fixture_id: int) -> List[Dict[str, Any]]:
        return _response_list(await self.get("/fixtures/lineups", {"fixture": fixture_id}))

    async def fixture_events(self, fixture_id: int) -> List[Dict[str, Any]]:
        return _response_list(await self.get("/fixtures/events", {"fixture": fixture_id}))

    async def fixture_statistics(self, fixture_id: int) -> List[Dict[str, Any]]:
        return _response_list(await self.get("/fixtures/statistics", {"fixture": fixture_id}))

    async def team_search(self, query: str) -> List[Dict[str, Any]]:
        return _response_list(await self.get("/teams", {"search": query}))

    async def squad_photos(self, team_id: int | str) -> Dict[int, str]:
        """Map player id to photo URL for a squad; empty when unavailable."""

        try:
            payload = await self.get("/players/squads", {"team": team_id})
        except UpstreamError as exc:
            logger.info("No squad photos for team %s: %s", team_id, exc.message)
            return {}

        photos: Dict[int, str] = {}
        squads = _response_list(payload)
        if not squads:
            return photos
        for player in squads[0].get("players") or []:
            player_id = player.get("id")
            photo = player.get("photo")
            if player_id and photo:
                photos[player_id] = photo
        return photos

    async def squad_photos_for_teams(self, team_ids: Iterable[int | str]) -> Dict[int, str]:
        results = await asyncio.gather(*(self.squad_photos(team_id) for team_id in team_ids))
        merged: Dict[int, str] = {}
        for photos in results:
            merged.update(photos)
        return merged
