"""
Flooring Layout API Route.

Thin wrapper around the plank layout engine: validates the input record,
runs the generator and forwards the grid (or the reports derived from it).

Endpoints:
  GET  /api/floorplan/status    — Check engine status
  POST /api/floorplan/layout    — Generate the plank grid
  POST /api/floorplan/cut-list  — Cut list + summary
  POST /api/floorplan/validate  — Geometric audit + summary
"""

import logging
from fastapi import APIRouter, HTTPException

from schemas import (
    FloorPlanRequest,
    FloorPlanGridOut,
    CutListResponse,
    ValidateResponse,
    PlannerStatusResponse,
)
from services.plank_layout import (
    FloorPlanInput,
    FloorPlanInputError,
    audit_layout,
    build_cut_list,
    calculate_floor_plan_grid,
    parse_floor_plan_input,
    summarize_layout,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/floorplan", tags=["floorplan"])


def _to_input(req: FloorPlanRequest) -> FloorPlanInput:
    try:
        return parse_floor_plan_input(req.model_dump())
    except FloorPlanInputError as e:
        raise HTTPException(status_code=422, detail=str(e))


# ---------- Endpoints ----------

@router.get("/status", response_model=PlannerStatusResponse)
async def planner_status():
    """Check plank layout engine status."""
    return PlannerStatusResponse()


@router.post("/layout", response_model=FloorPlanGridOut)
async def floorplan_layout(req: FloorPlanRequest):
    """Generate the installation grid for one room."""
    grid = calculate_floor_plan_grid(_to_input(req))
    return grid.to_dict()


@router.post("/cut-list", response_model=CutListResponse)
async def floorplan_cut_list(req: FloorPlanRequest):
    """Generate the grid and return its cut list with totals and warnings."""
    config = _to_input(req)
    grid = calculate_floor_plan_grid(config)
    cut_list = build_cut_list(grid)
    return {
        "entries": cut_list["entries"],
        "groups": cut_list["groups"],
        "summary": summarize_layout(grid, config),
    }


@router.post("/validate", response_model=ValidateResponse)
async def floorplan_validate(req: FloorPlanRequest):
    """Generate the grid and check it geometrically."""
    config = _to_input(req)
    grid = calculate_floor_plan_grid(config)
    audit = audit_layout(grid, config)
    if not audit["is_valid"]:
        logger.warning(
            f"Layout audit failed: {len(audit['overlaps'])} overlaps, "
            f"{len(audit['out_of_bounds'])} out of bounds"
        )
    return {"audit": audit, "summary": summarize_layout(grid, config)}
