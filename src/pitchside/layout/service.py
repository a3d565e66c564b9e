"""Assign roster players to formation slots on a pitch diagram."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Set

from pitchside.config.formations import FormationSlot, build_fallback_grid, get_template, normalize_formation
from pitchside.config.positions import classify_position, is_goalkeeper_label
from pitchside.models import PitchLayout, PlaceholderSlot, PositionedPlayer, RosterPlayer, TeamLineup


logger = logging.getLogger(__name__)

PLACEHOLDER_COUNT = 11


def _bind(player: RosterPlayer, slot: FormationSlot) -> PositionedPlayer:
    return PositionedPlayer(
        **player.model_dump(),
        x=slot.x,
        y=slot.y,
        slot_label=slot.slot,
        is_goalkeeper=slot.slot == "GK" or is_goalkeeper_label(player.position),
    )


def _first_open_slot(template: Sequence[FormationSlot], used: Set[int], candidates: Sequence[str] = ()) -> int:
    for idx, slot in enumerate(template):
        if idx in used:
            continue
        if candidates and slot.slot not in candidates:
            continue
        return idx
    return -1


def _backfill(
    players: Sequence[RosterPlayer],
    template: Sequence[FormationSlot],
    placed: dict[int, PositionedPlayer],
    used_slots: Set[int],
) -> None:
    for player_idx, player in enumerate(players):
        if player_idx in placed:
            continue
        slot_idx = _first_open_slot(template, used_slots)
        if slot_idx == -1:
            return
        placed[player_idx] = _bind(player, template[slot_idx])
        used_slots.add(slot_idx)


def _resolve_template(formation: Optional[str], player_count: int) -> List[FormationSlot]:
    if normalize_formation(formation):
        return get_template(formation)
    return build_fallback_grid(player_count)


def assign_positions(
    players: Sequence[RosterPlayer],
    formation: Optional[str] = None,
) -> List[PositionedPlayer]:
    """Place every player on a slot of the formation template.

    Players whose position label maps onto a free template slot are placed
    first, in roster order. Everyone left over takes the next free slot in
    template order. When the template is too small for the roster the whole
    assignment is redone on a fallback grid sized to the roster, so the
    result always holds one entry per player.
    """

    if not players:
        return []

    template = _resolve_template(formation, len(players))
    placed: dict[int, PositionedPlayer] = {}
    used_slots: Set[int] = set()

    for player_idx, player in enumerate(players):
        if player_idx in placed:
            continue
        candidates = classify_position(player.position)
        if not candidates:
            continue
        slot_idx = _first_open_slot(template, used_slots, candidates)
        if slot_idx == -1:
            continue
        placed[player_idx] = _bind(player, template[slot_idx])
        used_slots.add(slot_idx)

    matched = len(placed)
    _backfill(players, template, placed, used_slots)

    if len(placed) < len(players):
        logger.debug(
            "Formation %r has %s slots for %s players; using fallback grid",
            formation,
            len(template),
            len(players),
        )
        template = build_fallback_grid(len(players))
        placed = {}
        used_slots = set()
        _backfill(players, template, placed, used_slots)
    else:
        logger.debug(
            "Placed %s players by position and %s by backfill (formation=%r)",
            matched,
            len(placed) - matched,
            formation,
        )

    return list(placed.values())


def placeholder_slots(count: int = PLACEHOLDER_COUNT) -> List[PlaceholderSlot]:
    """Empty markers for a pitch whose lineup is not available yet."""

    return [
        PlaceholderSlot(x=slot.x, y=slot.y, slot_label=slot.slot)
        for slot in build_fallback_grid(count)
    ]


def layout_lineup(lineup: Optional[TeamLineup]) -> PitchLayout:
    if lineup is None or not lineup.starting_xi:
        return PitchLayout(
            formation=lineup.formation if lineup else None,
            placeholders=placeholder_slots(),
        )
    return PitchLayout(
        formation=lineup.formation,
        players=assign_positions(lineup.starting_xi, lineup.formation),
    )
