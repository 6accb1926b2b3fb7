"""
Plank box construction and overlap / coverage validation utilities.

Turns a generated grid back into Shapely rectangles so the placement can
be checked independently of the generator: planks must not overlap, must
stay inside the gap-bounded interior and should cover it.
"""

from typing import Iterator, List, Tuple

from shapely.geometry import Polygon, box
from shapely.ops import unary_union

from services.layout_constants import OVERLAP_TOLERANCE_MM2

from .plank_model import FloorPlanGrid, FloorPlanInput, PlankCell


def cell_positions(grid: FloorPlanGrid) -> Iterator[Tuple[PlankCell, float, float]]:
    """
    Yield ``(cell, x, y)`` for every cell, measured from the room corner.

    x accumulates cell lengths along the row, y accumulates row widths.
    """
    y = 0.0
    for row in grid.cells:
        x = 0.0
        for cell in row:
            yield cell, x, y
            x += cell.length_mm
        y += row[0].width_mm if row else 0.0


def plank_boxes(grid: FloorPlanGrid) -> List[Tuple[PlankCell, Polygon]]:
    """Shapely rectangle for every full/cut cell."""
    return [
        (cell, box(x, y, x + cell.length_mm, y + cell.width_mm))
        for cell, x, y in cell_positions(grid)
        if cell.is_plank
    ]


def interior_polygon(config: FloorPlanInput) -> Polygon:
    """The room rectangle shrunk by the expansion gap on every side."""
    gap = config.expansion_gap_mm
    maxx = config.room_length_mm - gap
    maxy = config.room_width_mm - gap
    if maxx <= gap or maxy <= gap:
        return Polygon()
    return box(gap, gap, maxx, maxy)


def detect_overlaps(polygons: List[Polygon],
                    tolerance: float = OVERLAP_TOLERANCE_MM2) -> List[Tuple[int, int]]:
    """
    Return (i, j) index pairs of polygons that overlap.

    Planks sharing only an edge (zero-area intersection) are **not**
    considered overlapping.
    """
    overlaps = []
    for i in range(len(polygons)):
        for j in range(i + 1, len(polygons)):
            if not polygons[i].intersects(polygons[j]):
                continue
            if polygons[i].intersection(polygons[j]).area > tolerance:
                overlaps.append((i, j))
    return overlaps


def audit_layout(grid: FloorPlanGrid, config: FloorPlanInput) -> dict:
    """
    Check a grid geometrically.

    Returns plank count, overlapping cell pairs, cells sticking out of the
    interior, interior / covered areas and the coverage ratio.
    """
    placed = plank_boxes(grid)
    polygons = [poly for _, poly in placed]
    interior = interior_polygon(config)
    interior_area = interior.area

    overlaps = [
        [[placed[i][0].row, placed[i][0].col], [placed[j][0].row, placed[j][0].col]]
        for i, j in detect_overlaps(polygons)
    ]
    # a zero-area interior has nothing to contain; any plank is outside
    out_of_bounds = [
        [cell.row, cell.col]
        for cell, poly in placed
        if interior_area <= 0 or poly.difference(interior).area > OVERLAP_TOLERANCE_MM2
    ]

    covered = 0.0
    if polygons and interior_area > 0:
        covered = unary_union(polygons).intersection(interior).area
    ratio = covered / interior_area if interior_area > 0 else 0.0

    return {
        "plank_count": len(placed),
        "overlaps": overlaps,
        "out_of_bounds": out_of_bounds,
        "interior_area_mm2": round(interior_area, 3),
        "covered_area_mm2": round(covered, 3),
        "coverage_ratio": round(ratio, 6),
        "is_valid": not overlaps and not out_of_bounds,
    }
