"""
Row generator — places planks left to right across one content row.

Each call takes the previous row's seams and leftover offcut as a
``RowState`` and returns the new row together with the state for the
next one, so the generator itself holds no state between rows.

Placement rules per plank:
  1. candidate = min(nominal length, distance to the wall); the row's
     first piece (reused offcut or stagger starter) replaces it once
  2. clamp up to the minimum plank length
  3. first conflicting seam of the previous row (left to right) pulls
     the plank end back to ``seam - min_butt_joint_offset``
  4. clamp up to the minimum again, then down to the wall

Every placed plank overwrites the carried offcut, and a row's last plank
always reaches the wall, so a full grid run hands ``None`` to the next
row.  Offcut reuse only happens when a caller passes a ``RowState`` that
already holds a leftover.
"""

import logging
from typing import List, Optional, Tuple

from services.layout_constants import EPSILON_MM, KIND_CUT, KIND_FULL, STAGGER_CYCLE

from .geometry import RoomGeometry, row_width_for, stagger_offsets
from .plank_model import FloorPlanInput, PlankCell, PlankRow, RowState, gap_cell

logger = logging.getLogger(__name__)


def choose_start(
    config: FloorPlanInput, row_index: int, state: RowState
) -> Tuple[Optional[float], float, bool]:
    """
    Decide how content row *row_index* begins.

    Returns ``(first_piece_mm, start_offset_mm, used_leftover)``.  A usable
    offcut from the previous row wins over the stagger schedule; a zero
    stagger offset means the row simply starts with a full plank.
    """
    leftover = state.leftover_mm
    if leftover is not None and leftover >= config.min_plank_length_mm and leftover > EPSILON_MM:
        return leftover, 0.0, True

    offsets = stagger_offsets(config.plank_length_mm)
    offset = float(offsets[(row_index - 1) % STAGGER_CYCLE])
    if offset > EPSILON_MM:
        return offset, offset, False
    return None, 0.0, False


def resolve_butt_joint(
    x: float, length: float, prev_seams: Tuple[float, ...],
    min_offset: float, wall_x: float,
) -> Tuple[float, bool]:
    """
    Shorten a plank whose end falls too close to a seam of the row above.

    Only the first conflicting seam is used; a plank already reaching the
    wall never conflicts.
    """
    end = x + length
    if end >= wall_x - EPSILON_MM:
        return length, False
    for seam in prev_seams:
        if abs(end - seam) < min_offset:
            return seam - x - min_offset, True
    return length, False


def generate_row(
    config: FloorPlanInput,
    geometry: RoomGeometry,
    row_index: int,
    state: RowState,
) -> Tuple[PlankRow, RowState]:
    """
    Generate content row *row_index* (1-based grid index).

    Cost is O(planks x previous seams).  With a butt-joint offset of at
    least half a plank and a near-zero minimum length every candidate
    conflicts, the row degrades into thousands of minimum-length slivers
    and generation slows to seconds per row.
    """
    nominal = config.plank_length_mm
    min_len = config.min_plank_length_mm
    wall_x = geometry.wall_x_mm
    row_width = row_width_for(config, geometry, row_index)

    is_edge_row = row_index == 1 or row_index == geometry.content_rows
    too_narrow = is_edge_row and row_width < config.min_first_last_row_width_mm

    first_piece, start_offset, used_leftover = choose_start(config, row_index, state)

    cells: List[PlankCell] = [
        gap_cell(row_index, 0, config.expansion_gap_mm, row_width)
    ]
    seams: List[float] = []
    leftover: Optional[float] = None

    x = geometry.start_x_mm
    col = 1
    while x < wall_x - EPSILON_MM:
        max_len = min(nominal, wall_x - x)
        length = max_len
        from_offcut = False
        if first_piece is not None:
            length = first_piece
            from_offcut = used_leftover
            first_piece = None

        if length < min_len:
            length = min_len

        length, cut_for_butt_joint = resolve_butt_joint(
            x, length, state.prev_seams, config.min_butt_joint_offset_mm, wall_x
        )

        if length < min_len:
            length = min_len
        if length > max_len:
            length = max_len
        if length <= EPSILON_MM:
            # zero minimum length: the joint fix pulled the end behind x
            length = max_len

        end = x + length
        at_wall = end >= wall_x - EPSILON_MM
        cells.append(PlankCell(
            kind=KIND_FULL if abs(length - nominal) <= EPSILON_MM else KIND_CUT,
            row=row_index,
            col=col,
            length_mm=length,
            width_mm=row_width,
            is_end_cut=at_wall,
            too_short=length < min_len,
            too_narrow=too_narrow,
            cut_for_butt_joint=cut_for_butt_joint,
            from_offcut=from_offcut,
        ))
        seams.append(end)

        if length < nominal and not at_wall:
            leftover = nominal - length
        else:
            leftover = None

        x = end
        col += 1

    cells.append(gap_cell(row_index, col, config.expansion_gap_mm, row_width))

    logger.debug(
        f"Row {row_index}: width={row_width:.1f} offset={start_offset:.0f} "
        f"leftover_used={used_leftover} planks={len(seams)}"
    )

    row = PlankRow(
        index=row_index,
        width_mm=row_width,
        cells=tuple(cells),
        seams=tuple(seams),
        start_offset_mm=start_offset,
        used_leftover=used_leftover,
    )
    return row, RowState(prev_seams=tuple(seams), leftover_mm=leftover)
