"""Command-line interface for laying out a lineup on a pitch diagram."""

from __future__ import annotations

import argparse
import csv
import json
import sys
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, TextIO, Tuple

from pydantic import ValidationError

from pitchside.layout import assign_positions, placeholder_slots
from pitchside.models import PlaceholderSlot, PositionedPlayer, RosterPlayer


CSV_HEADER = ["slot", "x", "y", "player_id", "name", "number", "position", "goalkeeper"]
PLACEHOLDER_HEADER = ["slot", "x", "y"]


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Place a lineup's players on formation slots")
    parser.add_argument(
        "lineup",
        type=Path,
        nargs="?",
        default=None,
        help="JSON file holding a list of players or an object with 'players' and 'formation'",
    )
    parser.add_argument("--formation", default=None, help="Formation override, e.g. 4-2-3-1")
    parser.add_argument("--output", type=Path, default=None, help="Write CSV here instead of stdout")
    parser.add_argument(
        "--placeholders",
        type=int,
        default=None,
        help="Emit N empty slots instead of reading a lineup",
    )
    return parser.parse_args(argv)


def load_lineup(path: Path) -> Tuple[List[RosterPlayer], Optional[str]]:
    """Read a roster file; accepts a bare player list or an upstream-style object."""

    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SystemExit(f"Could not read lineup {path}: {exc}") from exc

    formation = None
    if isinstance(data, dict):
        formation = data.get("formation")
        data = data.get("players", data.get("startXI", []))
    if not isinstance(data, list):
        raise SystemExit(f"Lineup {path} must contain a list of players")

    players: List[RosterPlayer] = []
    for entry in data:
        if isinstance(entry, dict) and isinstance(entry.get("player"), dict):
            entry = dict(entry["player"])
            entry.setdefault("position", entry.pop("pos", None))
        try:
            players.append(RosterPlayer.model_validate(entry))
        except ValidationError as exc:
            raise SystemExit(f"Invalid player entry {entry!r}: {exc}") from exc
    return players, formation


def write_rows(players: Sequence[PositionedPlayer], handle: TextIO) -> None:
    writer = csv.writer(handle)
    writer.writerow(CSV_HEADER)
    for player in players:
        writer.writerow([
            player.slot_label,
            f"{player.x:.1f}",
            f"{player.y:.1f}",
            player.id,
            player.name,
            "" if player.number is None else player.number,
            player.position or "",
            "yes" if player.is_goalkeeper else "no",
        ])


def write_placeholder_rows(slots: Sequence[PlaceholderSlot], handle: TextIO) -> None:
    writer = csv.writer(handle)
    writer.writerow(PLACEHOLDER_HEADER)
    for slot in slots:
        writer.writerow([slot.slot_label, f"{slot.x:.1f}", f"{slot.y:.1f}"])


def _emit(write: Callable[[TextIO], None], output: Optional[Path], summary: str) -> None:
    if output:
        with output.open("w", newline="", encoding="utf-8") as f:
            write(f)
        print(f"{summary} -> {output}")
    else:
        write(sys.stdout)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)

    if args.placeholders is not None:
        slots = placeholder_slots(max(0, args.placeholders))
        _emit(
            lambda handle: write_placeholder_rows(slots, handle),
            args.output,
            f"Wrote {len(slots)} placeholder slots",
        )
        return

    if args.lineup is None:
        raise SystemExit("a lineup file is required unless using --placeholders")

    players, formation = load_lineup(args.lineup)
    formation = args.formation or formation
    positioned = assign_positions(players, formation)

    _emit(
        lambda handle: write_rows(positioned, handle),
        args.output,
        f"Placed {len(positioned)} players ({formation or 'no formation'})",
    )


if __name__ == "__main__":
    main()
