"""
Data model for plank layouts.

The configuration record is read-only input; cells, rows and the grid are
produced once by the generator and never mutated afterwards.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from services.layout_constants import KIND_GAP, PLANK_KINDS


@dataclass(frozen=True)
class FloorPlanInput:
    """Validated room / plank / installation-rule record (millimeters)."""

    room_length_mm: float
    room_width_mm: float
    plank_length_mm: float
    plank_width_mm: float
    expansion_gap_mm: float
    max_width_without_gap_mm: float
    max_length_without_gap_mm: float
    min_butt_joint_offset_mm: float
    min_plank_length_mm: float
    min_first_last_row_width_mm: float


@dataclass(frozen=True)
class PlankCell:
    """
    One placed plank, plank piece or expansion-gap filler.

    The boolean flags are installer advisories, not errors.
    """

    kind: str                    # "full" | "cut" | "expansion_gap"
    row: int
    col: int
    length_mm: float             # along the row axis
    width_mm: float              # across the row axis (row thickness)
    is_end_cut: bool = False
    too_short: bool = False
    too_narrow: bool = False
    cut_for_butt_joint: bool = False
    from_offcut: bool = False

    @property
    def is_plank(self) -> bool:
        return self.kind in PLANK_KINDS

    def to_dict(self) -> dict:
        """Serialize cell to a dictionary (``type`` carries the kind)."""
        return {
            "type": self.kind,
            "row": self.row,
            "col": self.col,
            "length_mm": self.length_mm,
            "width_mm": self.width_mm,
            "is_end_cut": self.is_end_cut,
            "too_short": self.too_short,
            "too_narrow": self.too_narrow,
            "cut_for_butt_joint": self.cut_for_butt_joint,
            "from_offcut": self.from_offcut,
        }

    def __repr__(self) -> str:
        return (
            f"PlankCell({self.kind}, r={self.row}, c={self.col}, "
            f"{self.length_mm:.1f}x{self.width_mm:.1f})"
        )


def gap_cell(row: int, col: int, length_mm: float, width_mm: float) -> PlankCell:
    return PlankCell(kind=KIND_GAP, row=row, col=col,
                     length_mm=length_mm, width_mm=width_mm)


@dataclass(frozen=True)
class RowState:
    """What one content row hands to the next: its seams and any offcut."""

    prev_seams: Tuple[float, ...] = ()
    leftover_mm: Optional[float] = None


@dataclass(frozen=True)
class PlankRow:
    """A generated content row before padding."""

    index: int
    width_mm: float
    cells: Tuple[PlankCell, ...]
    seams: Tuple[float, ...]
    start_offset_mm: float = 0.0
    used_leftover: bool = False

    @property
    def planks(self) -> Tuple[PlankCell, ...]:
        return tuple(c for c in self.cells if c.is_plank)


@dataclass(frozen=True)
class FloorPlanGrid:
    """Rectangular grid of cells: every row has exactly ``cols`` cells."""

    rows: int
    cols: int
    cells: Tuple[Tuple[PlankCell, ...], ...] = field(default_factory=tuple)

    def content_rows(self) -> Tuple[Tuple[PlankCell, ...], ...]:
        """Rows between the two expansion-gap border rows."""
        return self.cells[1:-1]

    def planks(self):
        """Iterate over every full/cut cell in row-major order."""
        for row in self.cells:
            for cell in row:
                if cell.is_plank:
                    yield cell

    def to_dict(self) -> dict:
        return {
            "rows": self.rows,
            "cols": self.cols,
            "cells": [[c.to_dict() for c in row] for row in self.cells],
        }
