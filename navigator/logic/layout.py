"""
Layout Assigner

Positions tiered visas on the 2D map: x from the level column, y from the
ordinal within the level (centred), nudged by difficulty. Deterministic so
node positions stay stable across re-renders.
"""

from typing import Dict, List, Optional

from .constants import (
    LAYOUT_BASE_X,
    LAYOUT_BASE_Y,
    LAYOUT_COLUMN_SPACING,
    LAYOUT_DIFFICULTY_STEP,
    LAYOUT_ROW_SPACING,
)
from .contracts import Position
from .knowledge_base import VisaKnowledgeBase


def difficulty_offset(visa_id: str, knowledge_base: Optional[VisaKnowledgeBase]) -> float:
    visa = knowledge_base.get(visa_id) if knowledge_base else None
    if visa is None:
        return 0.0
    return (visa.difficulty - 1) * LAYOUT_DIFFICULTY_STEP


def assign_positions(
    tiers: Dict[int, List[str]],
    knowledge_base: Optional[VisaKnowledgeBase] = None
) -> Dict[str, Position]:
    """
    Map each visa in the tiered result to an (x, y) position.

    Args:
        tiers: Level -> visa ids, as returned by tiered_bfs
        knowledge_base: Source of difficulty; ids it doesn't know get no offset

    Returns:
        Dict of visa id -> Position
    """
    positions: Dict[str, Position] = {}

    for level in sorted(tiers):
        visa_ids = tiers[level]
        total = len(visa_ids)
        x = LAYOUT_BASE_X + level * LAYOUT_COLUMN_SPACING

        for index, visa_id in enumerate(visa_ids):
            y = (
                LAYOUT_BASE_Y
                + (index - (total - 1) / 2) * LAYOUT_ROW_SPACING
                + difficulty_offset(visa_id, knowledge_base)
            )
            positions[visa_id] = Position(x=x, y=y)

    return positions
