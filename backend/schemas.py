"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field
from typing import List, Optional


def _mm(description: str, positive: bool = False):
    """Numeric millimeter field: strict number, finite, non-negative."""
    bounds = {"gt": 0} if positive else {"ge": 0}
    return Field(..., strict=True, allow_inf_nan=False,
                 description=description, **bounds)


# ---------- Floor Plan Input ----------
class FloorPlanRequest(BaseModel):
    room_length_mm: float = _mm("Room extent along the rows")
    room_width_mm: float = _mm("Room extent across the rows")
    plank_length_mm: float = _mm("Nominal plank length", positive=True)
    plank_width_mm: float = _mm("Nominal plank width", positive=True)
    expansion_gap_mm: float = _mm("Clearance to every wall")
    max_width_without_gap_mm: float = _mm("Widest floor without an intermediate joint")
    max_length_without_gap_mm: float = _mm("Longest floor without an intermediate joint")
    min_butt_joint_offset_mm: float = _mm("Minimum seam offset between adjacent rows")
    min_plank_length_mm: float = _mm("Shortest acceptable plank piece")
    min_first_last_row_width_mm: float = _mm("Narrowest acceptable first/last row")


# ---------- Grid ----------
class PlankCellOut(BaseModel):
    type: str
    row: int
    col: int
    length_mm: float
    width_mm: float
    is_end_cut: bool = False
    too_short: bool = False
    too_narrow: bool = False
    cut_for_butt_joint: bool = False
    from_offcut: bool = False


class FloorPlanGridOut(BaseModel):
    rows: int
    cols: int
    cells: List[List[PlankCellOut]]


# ---------- Cut List ----------
class CutListEntry(BaseModel):
    row: int
    col: int
    type: str
    length_mm: float
    width_mm: float
    x_mm: float
    flags: List[str] = []


class CutListGroup(BaseModel):
    type: str
    length_mm: float
    width_mm: float
    count: int


class LayoutSummary(BaseModel):
    full_planks: int
    cut_pieces: int
    reused_offcuts: int
    planks_to_purchase: int
    placed_length_mm: float
    covered_area_m2: float
    flag_counts: dict = {}
    warnings: List[str] = []


class CutListResponse(BaseModel):
    entries: List[CutListEntry]
    groups: List[CutListGroup]
    summary: LayoutSummary


# ---------- Audit ----------
class LayoutAudit(BaseModel):
    plank_count: int
    overlaps: List[List[List[int]]] = Field(
        default=[], description="Pairs of overlapping cells as [[row, col], [row, col]]"
    )
    out_of_bounds: List[List[int]] = []
    interior_area_mm2: float
    covered_area_mm2: float
    coverage_ratio: float
    is_valid: bool


class ValidateResponse(BaseModel):
    audit: LayoutAudit
    summary: LayoutSummary
    error: Optional[str] = None


# ---------- Status ----------
class PlannerStatusResponse(BaseModel):
    engine: str = "plank_layout"
    version: str = "1.0.0"
    features: List[str] = [
        "expansion_gap_border",
        "running_bond_stagger",
        "butt_joint_offset_enforcement",
        "cut_list",
        "geometric_audit",
    ]
    status: str = "ready"
