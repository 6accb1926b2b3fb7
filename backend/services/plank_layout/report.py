"""
Cut list and installer advisories derived from a finished grid.

Nothing here changes the layout; it only reads cells and the input record.
"""

from collections import OrderedDict
from typing import Dict, List

from services.layout_constants import CUT_LIST_ROUNDING, KIND_CUT, KIND_FULL

from .geometry_utils import cell_positions
from .plank_model import FloorPlanGrid, FloorPlanInput, PlankCell

FLAG_NAMES = ("is_end_cut", "too_short", "too_narrow", "cut_for_butt_joint", "from_offcut")


def _flags(cell: PlankCell) -> List[str]:
    return [name for name in FLAG_NAMES if getattr(cell, name)]


def build_cut_list(grid: FloorPlanGrid) -> Dict:
    """
    List every plank piece in row-major order and group identical pieces.

    Groups are keyed by (kind, rounded length, width) in first-seen order.
    """
    entries = []
    groups: "OrderedDict[tuple, dict]" = OrderedDict()

    for cell, x, _y in cell_positions(grid):
        if not cell.is_plank:
            continue
        length = round(cell.length_mm, CUT_LIST_ROUNDING)
        entries.append({
            "row": cell.row,
            "col": cell.col,
            "type": cell.kind,
            "length_mm": length,
            "width_mm": round(cell.width_mm, CUT_LIST_ROUNDING),
            "x_mm": round(x, CUT_LIST_ROUNDING),
            "flags": _flags(cell),
        })
        key = (cell.kind, length, round(cell.width_mm, CUT_LIST_ROUNDING))
        if key not in groups:
            groups[key] = {"type": key[0], "length_mm": key[1],
                           "width_mm": key[2], "count": 0}
        groups[key]["count"] += 1

    return {"entries": entries, "groups": list(groups.values())}


def summarize_layout(grid: FloorPlanGrid, config: FloorPlanInput) -> Dict:
    """
    Totals and advisory warnings for a grid.

    ``planks_to_purchase`` counts every full plank and every cut piece,
    minus the pieces that came from an offcut already counted.
    """
    full = cut = reused = 0
    placed_length = 0.0
    covered_area = 0.0
    flag_counts = {name: 0 for name in FLAG_NAMES}
    warnings = []

    for cell in grid.planks():
        if cell.kind == KIND_FULL:
            full += 1
        elif cell.kind == KIND_CUT:
            cut += 1
        if cell.from_offcut:
            reused += 1
        placed_length += cell.length_mm
        covered_area += cell.length_mm * cell.width_mm
        for name in FLAG_NAMES:
            if getattr(cell, name):
                flag_counts[name] += 1

        if cell.too_short:
            warnings.append(
                f"Row {cell.row}, plank {cell.col}: {cell.length_mm:.0f}mm piece is "
                f"shorter than the {config.min_plank_length_mm:.0f}mm minimum"
            )

    narrow_rows = sorted({c.row for c in grid.planks() if c.too_narrow})
    for r in narrow_rows:
        width = next(c.width_mm for c in grid.cells[r] if c.is_plank)
        warnings.append(
            f"Row {r}: width {width:.0f}mm is below the "
            f"{config.min_first_last_row_width_mm:.0f}mm first/last row minimum"
        )

    if flag_counts["cut_for_butt_joint"]:
        warnings.append(
            f"{flag_counts['cut_for_butt_joint']} plank(s) shortened to keep butt joints "
            f"{config.min_butt_joint_offset_mm:.0f}mm apart"
        )

    if config.room_length_mm > config.max_length_without_gap_mm:
        warnings.append(
            f"Room length {config.room_length_mm:.0f}mm exceeds "
            f"{config.max_length_without_gap_mm:.0f}mm: an intermediate expansion "
            f"joint or transition profile is required"
        )
    if config.room_width_mm > config.max_width_without_gap_mm:
        warnings.append(
            f"Room width {config.room_width_mm:.0f}mm exceeds "
            f"{config.max_width_without_gap_mm:.0f}mm: an intermediate expansion "
            f"joint or transition profile is required"
        )

    return {
        "full_planks": full,
        "cut_pieces": cut,
        "reused_offcuts": reused,
        "planks_to_purchase": full + cut - reused,
        "placed_length_mm": round(placed_length, 3),
        "covered_area_m2": round(covered_area / 1_000_000, 4),
        "flag_counts": flag_counts,
        "warnings": warnings,
    }
