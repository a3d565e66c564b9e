"""Static formation templates and position classification tables."""

from .formations import (
    FormationSlot,
    FormationTemplate,
    build_fallback_grid,
    generate_template,
    get_predefined,
    get_template,
    iter_templates,
    normalize_formation,
)
from .positions import classify_position, is_goalkeeper_label, normalize_position_label

__all__ = [
    "FormationSlot",
    "FormationTemplate",
    "build_fallback_grid",
    "generate_template",
    "get_predefined",
    "get_template",
    "iter_templates",
    "normalize_formation",
    "classify_position",
    "is_goalkeeper_label",
    "normalize_position_label",
]
