from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from pitchside.models import PitchLayout, RosterPlayer


class LayoutRequest(BaseModel):
    players: List[RosterPlayer] = Field(default_factory=list)
    formation: Optional[str] = None
    placeholders: int = Field(default=11, ge=0, le=30)

    @model_validator(mode="after")
    def _unique_ids(self) -> "LayoutRequest":
        seen = set()
        for player in self.players:
            if player.id in seen:
                raise ValueError(f"duplicate player id {player.id!r}")
            seen.add(player.id)
        return self


class LayoutPairResponse(BaseModel):
    home: PitchLayout
    away: PitchLayout
