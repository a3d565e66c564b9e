"""Formation templates and pitch coordinate generators.

Coordinates are normalized to a 0-100 pitch: ``x`` runs left to right and
``y`` runs from the attacking end (0) back to the team's own goal (100), so
the goalkeeper sits near the bottom at ``y=92``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class FormationSlot:
    slot: str
    x: float
    y: float
    row: Optional[int] = None


@dataclass(frozen=True)
class FormationTemplate:
    name: str
    slots: Tuple[FormationSlot, ...]

    def __len__(self) -> int:
        return len(self.slots)


GOALKEEPER_SLOT = FormationSlot("GK", 50, 92, 0)

_DEFENCE_Y = 76
_ATTACK_Y = 26
_WIDE_PADDING = 15
_LINE_PREFIXES = ("DEF", "MID", "MID2", "AM", "FWD")
_MAX_LINE_PLAYERS = 999
_MIN_GENERATED_SLOTS = 10

_FALLBACK_ROWS: Tuple[Tuple[int, float, str, int], ...] = (
    (1, 92, "GK", 0),
    (4, 76, "DEF", 1),
    (3, 52, "MID", 2),
    (3, 28, "FWD", 3),
)
_EXTRA_ROW_SIZE = 3
_EXTRA_ROW_START_Y = 18
_EXTRA_ROW_STEP = 6


def _template(name: str, *slots: Tuple[str, float, float, int]) -> FormationTemplate:
    return FormationTemplate(
        name=name,
        slots=tuple(FormationSlot(label, x, y, row) for label, x, y, row in slots),
    )


_BACK_FOUR = (
    ("GK", 50, 92, 0),
    ("LB", 15, 76, 1),
    ("LCB", 38, 78, 1),
    ("RCB", 62, 78, 1),
    ("RB", 85, 76, 1),
)

_BACK_THREE = (
    ("GK", 50, 92, 0),
    ("LCB", 30, 78, 1),
    ("CB", 50, 80, 1),
    ("RCB", 70, 78, 1),
)

_BACK_FIVE = (
    ("GK", 50, 92, 0),
    ("LWB", 10, 72, 1),
    ("LCB", 30, 78, 1),
    ("CB", 50, 80, 1),
    ("RCB", 70, 78, 1),
    ("RWB", 90, 72, 1),
)


_FORMATION_TEMPLATES: Dict[str, FormationTemplate] = {
    template.name: template
    for template in (
        _template(
            "4-3-3",
            *_BACK_FOUR,
            ("LCM", 30, 54, 2),
            ("CDM", 50, 56, 2),
            ("RCM", 70, 54, 2),
            ("LW", 20, 30, 3),
            ("ST", 50, 26, 3),
            ("RW", 80, 30, 3),
        ),
        _template(
            "4-4-2",
            *_BACK_FOUR,
            ("LM", 18, 52, 2),
            ("LCM", 40, 54, 2),
            ("RCM", 60, 54, 2),
            ("RM", 82, 52, 2),
            ("LST", 40, 28, 3),
            ("RST", 60, 28, 3),
        ),
        _template(
            "4-2-3-1",
            *_BACK_FOUR,
            ("LDM", 38, 62, 2),
            ("RDM", 62, 62, 2),
            ("LAM", 22, 42, 3),
            ("CAM", 50, 40, 3),
            ("RAM", 78, 42, 3),
            ("ST", 50, 24, 4),
        ),
        _template(
            "3-5-2",
            *_BACK_THREE,
            ("LWB", 12, 56, 2),
            ("LCM", 35, 54, 2),
            ("CDM", 50, 58, 2),
            ("RCM", 65, 54, 2),
            ("RWB", 88, 56, 2),
            ("LST", 40, 28, 3),
            ("RST", 60, 28, 3),
        ),
        _template(
            "3-4-3",
            *_BACK_THREE,
            ("LWB", 15, 55, 2),
            ("LCM", 40, 54, 2),
            ("RCM", 60, 54, 2),
            ("RWB", 85, 55, 2),
            ("LW", 25, 30, 3),
            ("ST", 50, 25, 3),
            ("RW", 75, 30, 3),
        ),
        _template(
            "5-3-2",
            *_BACK_FIVE,
            ("LCM", 30, 52, 2),
            ("CDM", 50, 55, 2),
            ("RCM", 70, 52, 2),
            ("LST", 40, 28, 3),
            ("RST", 60, 28, 3),
        ),
        _template(
            "4-1-4-1",
            *_BACK_FOUR,
            ("CDM", 50, 62, 2),
            ("LM", 18, 45, 3),
            ("LCM", 40, 48, 3),
            ("RCM", 60, 48, 3),
            ("RM", 82, 45, 3),
            ("ST", 50, 25, 4),
        ),
        _template(
            "4-3-1-2",
            *_BACK_FOUR,
            ("LCM", 30, 58, 2),
            ("CDM", 50, 60, 2),
            ("RCM", 70, 58, 2),
            ("CAM", 50, 42, 3),
            ("LST", 40, 26, 4),
            ("RST", 60, 26, 4),
        ),
        _template(
            "5-4-1",
            *_BACK_FIVE,
            ("LM", 18, 50, 2),
            ("LCM", 40, 52, 2),
            ("RCM", 60, 52, 2),
            ("RM", 82, 50, 2),
            ("ST", 50, 26, 3),
        ),
        _template(
            "4-4-1-1",
            *_BACK_FOUR,
            ("LM", 18, 55, 2),
            ("LCM", 40, 57, 2),
            ("RCM", 60, 57, 2),
            ("RM", 82, 55, 2),
            ("CAM", 50, 38, 3),
            ("ST", 50, 24, 4),
        ),
        _template(
            "4-5-1",
            *_BACK_FOUR,
            ("LM", 15, 52, 2),
            ("LCM", 35, 54, 2),
            ("CDM", 50, 56, 2),
            ("RCM", 65, 54, 2),
            ("RM", 85, 52, 2),
            ("ST", 50, 26, 3),
        ),
    )
}


def iter_templates() -> Iterable[FormationTemplate]:
    """Return an iterator over the predefined formation templates."""

    return _FORMATION_TEMPLATES.values()


def get_predefined(formation: str) -> FormationTemplate:
    """Fetch a predefined template by name, raising KeyError if missing."""

    key = normalize_formation(formation)
    if key not in _FORMATION_TEMPLATES:
        raise KeyError(f"No formation template configured for {formation!r}")
    return _FORMATION_TEMPLATES[key]


def normalize_formation(formation: Optional[str]) -> str:
    if not formation:
        return ""
    return "".join(str(formation).split())


def spread_across(count: int, y: float, prefix: str, row: Optional[int] = None) -> List[FormationSlot]:
    """Lay ``count`` slots evenly across one horizontal line of the pitch."""

    if count <= 0:
        return []
    if count == 1:
        return [FormationSlot(f"{prefix}1", 50, y, row)]
    span = 100 - _WIDE_PADDING * 2
    step = span / (count - 1)
    return [
        FormationSlot(f"{prefix}{idx + 1}", _WIDE_PADDING + idx * step, y, row)
        for idx in range(count)
    ]


def _parse_line_counts(formation: str) -> List[int]:
    counts: List[int] = []
    for segment in formation.split("-"):
        if not (segment.isascii() and segment.isdigit()):
            return []
        value = int(segment)
        if value <= 0 or value > _MAX_LINE_PLAYERS:
            return []
        counts.append(value)
    return counts if len(counts) >= 2 else []


def generate_template(formation: Optional[str]) -> List[FormationSlot]:
    """Synthesize slots from a numeric formation string such as ``"3-4-2-1"``.

    Returns an empty list when the string cannot be parsed. The goalkeeper is
    added on top of the outfield lines, which are spaced evenly between the
    defensive and attacking lines.
    """

    counts = _parse_line_counts(normalize_formation(formation))
    if not counts:
        return []

    slots: List[FormationSlot] = [GOALKEEPER_SLOT]
    y_step = (_DEFENCE_Y - _ATTACK_Y) / (len(counts) - 1)
    for idx, count in enumerate(counts):
        prefix = _LINE_PREFIXES[idx] if idx < len(_LINE_PREFIXES) else f"ROW{idx}"
        slots.extend(spread_across(count, _DEFENCE_Y - idx * y_step, prefix, idx + 1))
    return slots


def get_template(formation: Optional[str]) -> List[FormationSlot]:
    """Resolve a formation to a fresh, caller-owned list of slots.

    Predefined templates win; otherwise the string is generated from its line
    counts, accepted once it yields at least ten slots. Anything else falls
    back to the default eleven-slot grid.
    """

    key = normalize_formation(formation)
    if key:
        template = _FORMATION_TEMPLATES.get(key)
        if template is not None:
            return list(template.slots)
        generated = generate_template(key)
        if len(generated) >= _MIN_GENERATED_SLOTS:
            return generated
    return build_fallback_grid(11)


def build_fallback_grid(count: int) -> List[FormationSlot]:
    """Build a 1-4-3-3 grid holding exactly ``count`` slots.

    Rosters larger than eleven get extra rows of three stacked above the
    forward line, labelled ``EX1-``, ``EX2-`` and so on.
    """

    if count <= 0:
        return []

    slots: List[FormationSlot] = []
    remaining = count
    for row_size, y, prefix, row in _FALLBACK_ROWS:
        if remaining <= 0:
            break
        take = min(row_size, remaining)
        if prefix == "GK":
            slots.append(GOALKEEPER_SLOT)
        else:
            slots.extend(spread_across(take, y, prefix, row))
        remaining -= take

    extra = 1
    while remaining > 0:
        take = min(_EXTRA_ROW_SIZE, remaining)
        y = max(0, _EXTRA_ROW_START_Y - (extra - 1) * _EXTRA_ROW_STEP)
        slots.extend(spread_across(take, y, f"EX{extra}-", len(_FALLBACK_ROWS) + extra - 1))
        remaining -= take
        extra += 1

    return slots[:count]


def slot_labels(slots: Sequence[FormationSlot]) -> Tuple[str, ...]:
    return tuple(slot.slot for slot in slots)
