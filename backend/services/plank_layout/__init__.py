"""
Plank Layout Engine for flooring installation plans.

Places rectangular planks row by row across a rectangular room with
expansion gaps, running-bond stagger, offcut reuse and butt-joint offset
enforcement.  Output is a rectangular grid of plank / gap cells.
"""

from .plank_model import FloorPlanInput, PlankCell, PlankRow, RowState, FloorPlanGrid
from .geometry import RoomGeometry, compute_geometry, stagger_offsets
from .rows import generate_row
from .grid import calculate_floor_plan_grid
from .loaders import FloorPlanInputError, parse_floor_plan_input, load_floor_plan_input
from .report import build_cut_list, summarize_layout
from .geometry_utils import audit_layout

__all__ = [
    "FloorPlanInput",
    "PlankCell",
    "PlankRow",
    "RowState",
    "FloorPlanGrid",
    "RoomGeometry",
    "compute_geometry",
    "stagger_offsets",
    "generate_row",
    "calculate_floor_plan_grid",
    "FloorPlanInputError",
    "parse_floor_plan_input",
    "load_floor_plan_input",
    "build_cut_list",
    "summarize_layout",
    "audit_layout",
]
