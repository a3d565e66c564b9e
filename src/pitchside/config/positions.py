"""Position label classification for pitch slot matching."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


_NON_LETTERS = re.compile(r"[^A-Z]")

GOALKEEPER_LABELS = frozenset({"G", "GK", "GOALKEEPER"})

# Candidates are ordered from the most specific slot to the loosest fallback.
_SPECIFIC_POSITIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "GK": ("GK",),
    "GOALKEEPER": ("GK",),
    "G": ("GK",),
    "LB": ("LB", "LWB"),
    "LEFTBACK": ("LB", "LWB"),
    "LWB": ("LWB", "LB"),
    "RB": ("RB", "RWB"),
    "RIGHTBACK": ("RB", "RWB"),
    "RWB": ("RWB", "RB"),
    "CB": ("LCB", "RCB", "CB"),
    "CENTERBACK": ("LCB", "RCB", "CB"),
    "LCB": ("LCB", "CB"),
    "RCB": ("RCB", "CB"),
    "SW": ("CB", "LCB", "RCB"),
    "DM": ("CDM", "LDM", "RDM"),
    "CDM": ("CDM", "LDM", "RDM"),
    "LDM": ("LDM", "CDM"),
    "RDM": ("RDM", "CDM"),
    "CM": ("CM", "LCM", "RCM"),
    "LCM": ("LCM", "CM"),
    "RCM": ("RCM", "CM"),
    "AM": ("CAM", "LAM", "RAM"),
    "CAM": ("CAM", "LAM", "RAM"),
    "LAM": ("LAM", "LW"),
    "RAM": ("RAM", "RW"),
    "LM": ("LM", "LAM"),
    "RM": ("RM", "RAM"),
    "LW": ("LW", "LAM"),
    "RW": ("RW", "RAM"),
    "CF": ("ST", "CF"),
    "FW": ("ST", "CF"),
    "F": ("ST", "CF"),
    "ST": ("ST", "CF"),
    "STRIKER": ("ST", "CF"),
    "SS": ("SS", "ST", "CF"),
    "LS": ("LS", "ST", "CF"),
    "RS": ("RS", "ST", "CF"),
})

_BROAD_POSITIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "DEFENDER": ("LB", "RB", "LCB", "RCB", "CB"),
    "MIDFIELDER": ("CM", "LCM", "RCM", "CDM", "CAM"),
    "ATTACKER": ("ST", "CF", "SS", "LW", "RW"),
    "FORWARD": ("ST", "CF", "LW", "RW"),
})


def normalize_position_label(label: Optional[str]) -> str:
    """Uppercase a free-text position and drop everything that is not a letter."""

    if not label:
        return ""
    return _NON_LETTERS.sub("", str(label).upper())


def classify_position(label: Optional[str]) -> Tuple[str, ...]:
    """Return the slot identifiers a player with ``label`` may fill.

    Specific codes ("LCB", "CDM", ...) win over broad role words
    ("DEFENDER", ...). Unknown or empty labels yield an empty tuple and are
    left for backfill.
    """

    key = normalize_position_label(label)
    if not key:
        return ()
    if key in _SPECIFIC_POSITIONS:
        return _SPECIFIC_POSITIONS[key]
    return _BROAD_POSITIONS.get(key, ())


def is_goalkeeper_label(label: Optional[str]) -> bool:
    return normalize_position_label(label) in GOALKEEPER_LABELS


def known_position_labels() -> Tuple[str, ...]:
    """All labels the classifier recognizes, specific codes first."""

    return tuple(_SPECIFIC_POSITIONS) + tuple(_BROAD_POSITIONS)
