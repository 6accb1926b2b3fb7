"""
Centralized Layout Constants — Single source of truth for the plank planner.

Exposes the tolerances and field names shared by:
  - the layout core (geometry, row generator, grid assembly)
  - the input loader
  - the cut-list report and the geometric audit

All lengths are millimeters.
"""

from typing import Tuple

# ===========================================================================
# NUMERIC TOLERANCES
# ===========================================================================

# Floating point slack for "reached the wall" and "seam coincides" tests.
EPSILON_MM = 1e-6

# Decimal places used when grouping cut pieces of the same length.
CUT_LIST_ROUNDING = 1

# Minimum intersection area (mm²) counted as an overlap by the audit.
OVERLAP_TOLERANCE_MM2 = 1.0

# ===========================================================================
# STAGGER
# ===========================================================================

# Running-bond cycle: row starts at 0, L/3, 2L/3, then repeats.
STAGGER_CYCLE = 3

# ===========================================================================
# INPUT RECORD
# ===========================================================================

REQUIRED_FIELDS: Tuple[str, ...] = (
    "room_length_mm",
    "room_width_mm",
    "plank_length_mm",
    "plank_width_mm",
    "expansion_gap_mm",
    "max_width_without_gap_mm",
    "max_length_without_gap_mm",
    "min_butt_joint_offset_mm",
    "min_plank_length_mm",
    "min_first_last_row_width_mm",
)

# ===========================================================================
# CELL KINDS
# ===========================================================================

KIND_FULL = "full"
KIND_CUT = "cut"
KIND_GAP = "expansion_gap"

PLANK_KINDS = (KIND_FULL, KIND_CUT)
