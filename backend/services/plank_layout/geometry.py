"""
Geometry setup for a plank layout.

Derives the interior (gap-free) extent of the room, how many full-width
rows fit across it, and the width of the trailing partial row.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from services.layout_constants import EPSILON_MM, STAGGER_CYCLE

from .plank_model import FloorPlanInput


@dataclass(frozen=True)
class RoomGeometry:
    usable_length_mm: float
    usable_width_mm: float
    full_rows: int
    remainder_width_mm: float
    start_x_mm: float            # interior left edge
    wall_x_mm: float             # interior right edge

    @property
    def has_remainder_row(self) -> bool:
        return self.remainder_width_mm > EPSILON_MM

    @property
    def content_rows(self) -> int:
        return self.full_rows + (1 if self.has_remainder_row else 0)

    @property
    def total_rows(self) -> int:
        """Content rows plus the top and bottom expansion-gap rows."""
        return self.content_rows + 2


def compute_geometry(config: FloorPlanInput) -> RoomGeometry:
    gap = config.expansion_gap_mm
    usable_length = config.room_length_mm - 2 * gap
    usable_width = config.room_width_mm - 2 * gap

    full_rows = max(0, math.floor(usable_width / config.plank_width_mm))
    remainder = usable_width - full_rows * config.plank_width_mm
    if remainder < 0:
        remainder = 0.0

    return RoomGeometry(
        usable_length_mm=usable_length,
        usable_width_mm=usable_width,
        full_rows=full_rows,
        remainder_width_mm=remainder,
        start_x_mm=gap,
        wall_x_mm=config.room_length_mm - gap,
    )


def stagger_offsets(plank_length_mm: float) -> Tuple[int, ...]:
    """Starting offsets for a 3-row running bond: 0, ⌊L/3⌋, ⌊2L/3⌋."""
    return tuple(
        math.floor(i * plank_length_mm / STAGGER_CYCLE)
        for i in range(STAGGER_CYCLE)
    )


def row_width_for(config: FloorPlanInput, geometry: RoomGeometry, row_index: int) -> float:
    """
    Thickness of content row *row_index* (1-based grid index).

    The last content row takes the remainder width when one exists.
    """
    if geometry.has_remainder_row and row_index == geometry.content_rows:
        return geometry.remainder_width_mm
    return config.plank_width_mm
