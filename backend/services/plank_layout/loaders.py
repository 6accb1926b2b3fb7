"""
Load and validate the floor-plan input record.

The record is a flat JSON object of ten millimeter fields.  Validation is
done by the ``FloorPlanRequest`` schema; the first failing field is
reported by name.
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from schemas import FloorPlanRequest
from services.layout_constants import REQUIRED_FIELDS

from .plank_model import FloorPlanInput

logger = logging.getLogger(__name__)


class FloorPlanInputError(ValueError):
    """Malformed, missing or non-numeric input field."""

    def __init__(self, field: str, detail: str = ""):
        self.field = field
        self.detail = detail
        super().__init__(f"Invalid or missing field: {field}")


def _first_bad_field(exc: ValidationError) -> str:
    bad = set()
    for err in exc.errors():
        if err.get("loc"):
            bad.add(str(err["loc"][0]))
    # report in record order, not pydantic's
    for name in REQUIRED_FIELDS:
        if name in bad:
            return name
    return sorted(bad)[0] if bad else "<record>"


def parse_floor_plan_input(data: Any) -> FloorPlanInput:
    """
    Validate *data* (a dict) and return an immutable ``FloorPlanInput``.

    Raises
    ------
    FloorPlanInputError
        If *data* is not a mapping, or any field is missing, non-numeric,
        non-finite or negative (plank length/width must be positive).
    """
    if not isinstance(data, dict):
        raise FloorPlanInputError("<record>", "input must be a JSON object")
    try:
        model = FloorPlanRequest.model_validate(data)
    except ValidationError as e:
        name = _first_bad_field(e)
        logger.warning(f"Rejected floor plan input: field '{name}' invalid")
        raise FloorPlanInputError(name, str(e)) from e
    return FloorPlanInput(**{k: float(v) for k, v in model.model_dump().items()})


def load_floor_plan_input(path: Union[str, Path]) -> FloorPlanInput:
    """
    Read a JSON file and validate it as a floor-plan input record.

    A missing or unreadable file, bad encoding or bad JSON all raise
    ``FloorPlanInputError``.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        raise FloorPlanInputError("<record>", f"{path}: {e}") from e
    logger.info(f"Loaded floor plan input from {path}")
    return parse_floor_plan_input(data)
