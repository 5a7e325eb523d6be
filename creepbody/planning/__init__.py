"""Part planning: how many parts a target power needs."""

from .planner import (
    BoostSelectionConfig,
    BoostTierChoice,
    PartsSummary,
    TooManyNeededParts,
    parts_needed,
    parts_to_move,
)

__all__ = [
    "BoostSelectionConfig",
    "BoostTierChoice",
    "PartsSummary",
    "TooManyNeededParts",
    "parts_needed",
    "parts_to_move",
]
