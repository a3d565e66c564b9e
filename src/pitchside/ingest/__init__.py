"""Input adapters that normalize raw API-Football payloads."""

from .normalizers import (
    PLACEHOLDER_LOGO,
    normalize_event,
    normalize_events,
    normalize_fixture_to_summary,
    normalize_lineup,
    normalize_match_details,
    normalize_player,
    normalize_stats,
    sort_events,
)

__all__ = [
    "PLACEHOLDER_LOGO",
    "normalize_event",
    "normalize_events",
    "normalize_fixture_to_summary",
    "normalize_lineup",
    "normalize_match_details",
    "normalize_player",
    "normalize_stats",
    "sort_events",
]
