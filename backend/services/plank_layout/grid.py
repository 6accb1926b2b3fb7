"""
Grid assembly — border rows, content rows and padding.

Public entry point of the layout core: ``calculate_floor_plan_grid``.
"""

import logging
from typing import List, Tuple

from services.layout_constants import EPSILON_MM

from .geometry import compute_geometry
from .plank_model import FloorPlanGrid, FloorPlanInput, PlankCell, RowState, gap_cell
from .rows import generate_row

logger = logging.getLogger(__name__)


def border_row(config: FloorPlanInput, row_index: int) -> List[PlankCell]:
    """
    Expansion-gap row spanning the full room length.

    Gap-sized cells at both ends, plank-length cells in between and one
    shorter cell for whatever stretch is left over.  Rendering only.
    """
    gap = config.expansion_gap_mm
    room = config.room_length_mm
    inner_end = room - gap

    cells = [gap_cell(row_index, 0, gap, gap)]
    x = gap
    while x + config.plank_length_mm <= inner_end + EPSILON_MM:
        cells.append(gap_cell(row_index, len(cells), config.plank_length_mm, gap))
        x += config.plank_length_mm
    if inner_end - x > EPSILON_MM:
        cells.append(gap_cell(row_index, len(cells), inner_end - x, gap))
    if room > gap:
        cells.append(gap_cell(row_index, len(cells), gap, gap))
    return cells


def pad_rows(
    rows: List[List[PlankCell]], fill_length_mm: float
) -> Tuple[Tuple[PlankCell, ...], ...]:
    """Right-pad every row with filler gap cells up to the longest row."""
    max_cols = max((len(r) for r in rows), default=0)
    padded = []
    for row_index, row in enumerate(rows):
        width = row[0].width_mm if row else fill_length_mm
        filled = list(row)
        while len(filled) < max_cols:
            filled.append(gap_cell(row_index, len(filled), fill_length_mm, width))
        padded.append(tuple(filled))
    return tuple(padded)


def calculate_floor_plan_grid(config: FloorPlanInput) -> FloorPlanGrid:
    """
    Compute the full installation grid for *config*.

    Row 0 and the last row are expansion-gap borders; every content row
    starts and ends with a gap cell.  Pure function of its input.
    """
    geometry = compute_geometry(config)

    rows: List[List[PlankCell]] = [border_row(config, 0)]
    state = RowState()
    for row_index in range(1, geometry.content_rows + 1):
        row, state = generate_row(config, geometry, row_index, state)
        rows.append(list(row.cells))
    rows.append(border_row(config, geometry.total_rows - 1))

    cells = pad_rows(rows, config.expansion_gap_mm)
    grid = FloorPlanGrid(
        rows=len(cells),
        cols=len(cells[0]) if cells else 0,
        cells=cells,
    )

    logger.info(
        f"Plank layout: {config.room_length_mm:.0f}x{config.room_width_mm:.0f}mm room, "
        f"{geometry.content_rows} content rows, grid {grid.rows}x{grid.cols}"
    )
    return grid
