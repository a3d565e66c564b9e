"""Roster and pitch-position models shared by the layout engine and the API."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


PlayerId = Union[int, str]


class RosterPlayer(BaseModel):
    """One player from an upstream lineup, position label left as supplied."""

    id: PlayerId
    name: str
    number: Optional[int] = None
    position: Optional[str] = None
    photo: Optional[str] = None
    grid: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class PlaceholderSlot(BaseModel):
    x: float = Field(..., ge=0.0, le=100.0)
    y: float = Field(..., ge=0.0, le=100.0)
    slot_label: str

    model_config = ConfigDict(frozen=True)


class PositionedPlayer(RosterPlayer):
    """A roster player bound to a slot on the pitch diagram."""

    x: float = Field(..., ge=0.0, le=100.0)
    y: float = Field(..., ge=0.0, le=100.0)
    slot_label: str
    is_goalkeeper: bool = False


class PitchLayout(BaseModel):
    formation: Optional[str] = None
    players: List[PositionedPlayer] = Field(default_factory=list)
    placeholders: List[PlaceholderSlot] = Field(default_factory=list)
