"""
Input record loading & validation tests.

Run: python -m pytest test_plank_loaders.py
"""

import json
import math
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(__file__) or '.')

from services.plank_layout import (
    FloorPlanInput,
    FloorPlanInputError,
    load_floor_plan_input,
    parse_floor_plan_input,
)

SAMPLE_PATH = os.path.join(os.path.dirname(__file__) or '.', 'sample_floorplan.json')


def _record(**overrides):
    with open(SAMPLE_PATH, 'r') as f:
        data = json.load(f)
    data.update(overrides)
    return data


def test_parse_valid_record():
    config = parse_floor_plan_input(_record())
    assert isinstance(config, FloorPlanInput)
    assert config.room_length_mm == 4000
    assert isinstance(config.room_length_mm, float)
    assert config.min_first_last_row_width_mm == 100


def test_parsed_record_is_immutable():
    config = parse_floor_plan_input(_record())
    with pytest.raises(AttributeError):
        config.room_length_mm = 1


def test_missing_field_is_named():
    data = _record()
    del data["plank_width_mm"]
    with pytest.raises(FloorPlanInputError) as exc:
        parse_floor_plan_input(data)
    assert exc.value.field == "plank_width_mm"
    assert str(exc.value) == "Invalid or missing field: plank_width_mm"


@pytest.mark.parametrize("field,value", [
    ("plank_length_mm", "1200"),
    ("room_length_mm", math.nan),
    ("room_width_mm", math.inf),
    ("expansion_gap_mm", -5),
    ("plank_length_mm", 0),
    ("min_plank_length_mm", None),
])
def test_bad_value_is_named(field, value):
    with pytest.raises(FloorPlanInputError) as exc:
        parse_floor_plan_input(_record(**{field: value}))
    assert exc.value.field == field


def test_first_bad_field_in_record_order():
    data = _record(min_plank_length_mm="x", room_width_mm="y")
    with pytest.raises(FloorPlanInputError) as exc:
        parse_floor_plan_input(data)
    assert exc.value.field == "room_width_mm"


def test_zero_thresholds_accepted():
    config = parse_floor_plan_input(_record(expansion_gap_mm=0, min_butt_joint_offset_mm=0))
    assert config.expansion_gap_mm == 0


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_floor_plan_input([1, 2, 3])


def test_load_from_file():
    config = load_floor_plan_input(SAMPLE_PATH)
    assert config == parse_floor_plan_input(_record())


def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{ room_length_mm: 4000")
    with pytest.raises(FloorPlanInputError):
        load_floor_plan_input(path)


def test_load_bad_encoding(tmp_path):
    path = tmp_path / "latin.json"
    path.write_bytes(b'{"room_length_mm": 4000, "x": "\xff\xfe"}')
    with pytest.raises(FloorPlanInputError) as exc:
        load_floor_plan_input(path)
    assert exc.value.field == "<record>"


def test_load_missing_file(tmp_path):
    with pytest.raises(FloorPlanInputError) as exc:
        load_floor_plan_input(tmp_path / "nowhere.json")
    assert exc.value.field == "<record>"


def test_load_file_with_missing_field(tmp_path):
    data = _record()
    del data["expansion_gap_mm"]
    path = tmp_path / "partial.json"
    path.write_text(json.dumps(data))
    with pytest.raises(FloorPlanInputError) as exc:
        load_floor_plan_input(path)
    assert exc.value.field == "expansion_gap_mm"
