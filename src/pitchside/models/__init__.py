"""Canonical records shared across ingestion, layout and API layers."""

from .match import (
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
    Score,
    TeamColors,
    TeamInfo,
    TeamLineup,
)
from .player import PitchLayout, PlaceholderSlot, PositionedPlayer, RosterPlayer

__all__ = [
    "Coach",
    "EventPerson",
    "KitColors",
    "LeagueInfo",
    "LineupPair",
    "MatchDetails",
    "MatchEvent",
    "MatchHeader",
    "MatchStat",
    "MatchSummary",
    "PitchLayout",
    "PlaceholderSlot",
    "PositionedPlayer",
    "RosterPlayer",
    "Score",
    "TeamColors",
    "TeamInfo",
    "TeamLineup",
]
