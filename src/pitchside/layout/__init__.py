"""Formation layout and player-to-slot assignment."""

from .service import assign_positions, layout_lineup, placeholder_slots

__all__ = ["assign_positions", "layout_lineup", "placeholder_slots"]
