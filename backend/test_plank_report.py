"""
Cut list, summary and geometric audit tests.

Run: python -m pytest test_plank_report.py
"""

import os
import sys
from dataclasses import replace

sys.path.insert(0, os.path.dirname(__file__) or '.')

from services.plank_layout import (
    FloorPlanGrid,
    PlankCell,
    audit_layout,
    build_cut_list,
    calculate_floor_plan_grid,
    load_floor_plan_input,
    summarize_layout,
)

CONFIG = load_floor_plan_input(os.path.join(os.path.dirname(__file__) or '.', 'sample_floorplan.json'))


def test_summary_totals():
    grid = calculate_floor_plan_grid(CONFIG)
    summary = summarize_layout(grid, CONFIG)
    assert summary["full_planks"] == 35
    assert summary["cut_pieces"] == 25
    assert summary["reused_offcuts"] == 0
    assert summary["planks_to_purchase"] == 60
    assert summary["placed_length_mm"] == 15 * 3980
    assert summary["covered_area_m2"] == 11.8604
    assert summary["flag_counts"]["is_end_cut"] == 15
    assert summary["warnings"] == []


def test_summary_warnings():
    config = replace(CONFIG, room_length_mm=3720, max_length_without_gap_mm=3000,
                     min_first_last_row_width_mm=190, min_butt_joint_offset_mm=500)
    summary = summarize_layout(calculate_floor_plan_grid(config), config)
    text = "\n".join(summary["warnings"])
    assert "shorter than the 200mm minimum" in text
    assert "Row 15: width 180mm" in text
    assert "shortened to keep butt joints" in text
    assert "Room length 3720mm exceeds 3000mm" in text
    assert "Room width" not in text


def test_cut_list_entries_and_groups():
    cut_list = build_cut_list(calculate_floor_plan_grid(CONFIG))
    entries = cut_list["entries"]
    assert len(entries) == 60
    first = entries[0]
    assert (first["row"], first["col"], first["type"]) == (1, 1, "full")
    assert first["x_mm"] == 10.0
    assert first["length_mm"] == 1200.0

    groups = {(g["type"], g["length_mm"], g["width_mm"]): g["count"] for g in cut_list["groups"]}
    assert groups[("full", 1200.0, 200.0)] == 33
    assert groups[("full", 1200.0, 180.0)] == 2
    assert groups[("cut", 380.0, 200.0)] == 5
    assert sum(groups.values()) == 60
    assert cut_list["groups"][0]["type"] == "full"


def test_cut_list_flags():
    config = replace(CONFIG, min_butt_joint_offset_mm=500)
    entries = build_cut_list(calculate_floor_plan_grid(config))["entries"]
    shortened = [e for e in entries if "cut_for_butt_joint" in e["flags"]]
    assert shortened
    assert (shortened[0]["row"], shortened[0]["col"], shortened[0]["length_mm"]) == (2, 2, 300.0)


def test_audit_clean_layout():
    audit = audit_layout(calculate_floor_plan_grid(CONFIG), CONFIG)
    assert audit["plank_count"] == 60
    assert audit["overlaps"] == []
    assert audit["out_of_bounds"] == []
    assert audit["interior_area_mm2"] == 3980 * 2980
    assert audit["coverage_ratio"] == 1.0
    assert audit["is_valid"]


def test_audit_with_butt_joint_cuts():
    config = replace(CONFIG, min_butt_joint_offset_mm=450)
    audit = audit_layout(calculate_floor_plan_grid(config), config)
    assert audit["is_valid"]
    assert audit["coverage_ratio"] == 1.0


def test_audit_detects_overrun():
    gap = PlankCell(kind="expansion_gap", row=0, col=0, length_mm=10, width_mm=10)
    too_long = PlankCell(kind="cut", row=1, col=1, length_mm=5000, width_mm=200)
    grid = FloorPlanGrid(
        rows=2, cols=2,
        cells=((gap, replace(gap, col=1)), (replace(gap, row=1, width_mm=200), too_long)),
    )
    audit = audit_layout(grid, CONFIG)
    assert audit["out_of_bounds"] == [[1, 1]]
    assert not audit["is_valid"]


def test_audit_empty_room():
    config = replace(CONFIG, room_length_mm=15, room_width_mm=15)
    audit = audit_layout(calculate_floor_plan_grid(config), config)
    assert audit["plank_count"] == 0
    assert audit["coverage_ratio"] == 0.0
    assert audit["is_valid"]
