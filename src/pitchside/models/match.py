"""Display records built from API-Football payloads."""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .player import RosterPlayer


EventType = Literal["goal", "card", "subst", "var", "other"]
StatValue = Union[int, float, str, None]


class TeamInfo(BaseModel):
    id: int
    name: str
    logo: str


class Score(BaseModel):
    home: Optional[int] = None
    away: Optional[int] = None
    ht_home: Optional[int] = None
    ht_away: Optional[int] = None


class LeagueInfo(BaseModel):
    id: int
    name: str
    logo: str
    country: Optional[str] = None
    season: Optional[int] = None


class MatchSummary(BaseModel):
    id: int
    date: str
    status: str
    status_short: str
    home: TeamInfo
    away: TeamInfo
    score: Score
    league: Optional[LeagueInfo] = None
    venue: Optional[str] = None


class MatchHeader(MatchSummary):
    referee: Optional[str] = None


class Coach(BaseModel):
    id: Optional[int] = None
    name: str
    photo: Optional[str] = None


class KitColors(BaseModel):
    primary: Optional[str] = None
    number: Optional[str] = None
    border: Optional[str] = None


class TeamColors(BaseModel):
    player: Optional[KitColors] = None
    goalkeeper: Optional[KitColors] = None


class TeamLineup(BaseModel):
    team: TeamInfo
    formation: Optional[str] = None
    coach: Optional[Coach] = None
    starting_xi: List[RosterPlayer] = Field(default_factory=list)
    substitutes: List[RosterPlayer] = Field(default_factory=list)
    colors: Optional[TeamColors] = None


class EventPerson(BaseModel):
    id: int
    name: Optional[str] = None


class MatchEvent(BaseModel):
    id: str
    minute: int
    extra_minute: Optional[int] = None
    type: EventType
    detail: str = ""
    team: TeamInfo
    player: Optional[EventPerson] = None
    assist: Optional[EventPerson] = None
    comments: Optional[str] = None


class MatchStat(BaseModel):
    type: str
    home: StatValue = None
    away: StatValue = None


class LineupPair(BaseModel):
    home: Optional[TeamLineup] = None
    away: Optional[TeamLineup] = None


class MatchDetails(BaseModel):
    header: MatchHeader
    lineups: Optional[LineupPair] = None
    events: List[MatchEvent] = Field(default_factory=list)
    stats: Optional[List[MatchStat]] = None
