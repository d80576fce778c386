#!/usr/bin/env python3
"""Unit tests for scene building.

Tests the presentation helpers including:
- Category colors and labels
- Tooltip text
- Warehouse outline
- Ray picking
"""

import colorsys
import sys
from datetime import datetime
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
import pytest

from pywarehouse.layout.engine import compute_placements
from pywarehouse.layout.position import Placement
from pywarehouse.model.warehouse import WarehouseBounds
from pywarehouse.view.scene import (
    BOX_ALPHA,
    boundary_outline,
    build_scene,
    category_color,
    category_hue,
    category_label,
    floor_box,
    pick_box,
    tooltip_lines,
)


def test_category_color_is_deterministic():
    """Test that colors depend only on the category name."""
    assert category_hue("abc") == pytest.approx(294 / 360)

    color = category_color("abc")
    expected = colorsys.hls_to_rgb(294 / 360, 0.5, 0.6)
    assert color[:3] == pytest.approx(expected, abs=1e-6)
    assert color[3] == pytest.approx(BOX_ALPHA)
    assert color.dtype == np.float32

    assert np.array_equal(category_color("glass"), category_color("glass"))
    assert not np.array_equal(category_color("glass"), category_color("paper"))

    print("✓ Category color test passed")


def test_category_label():
    assert category_label("plastic-bottle") == "Plastic Bottle"
    assert category_label("glass") == "Glass"
    assert category_label("e-waste") == "E Waste"


def test_tooltip_lines():
    """Test that tooltips show volume and the equivalent weight."""
    p = Placement("plastic-bottle", center=(0.0, 0.5, 0.0), extent=(1.0, 1.0, 1.0), volume=2.0)

    assert tooltip_lines(p) == ["Plastic Bottle", "Volume: 2.0 m³", "Weight: 10.0 kg"]


def test_tooltip_uses_factor_and_batch_date():
    """Test the conversion factor and the oldest batch line."""
    p = Placement("glass", center=(0.0, 0.5, 0.0), extent=(1.0, 1.0, 1.0), volume=2.0)

    lines = tooltip_lines(p, factor=0.5, since=datetime(2024, 1, 2, 9, 30))

    assert lines == ["Glass", "Volume: 2.0 m³", "Weight: 4.0 kg", "Since: 2024-01-02"]


def test_tooltip_for_unusable_volume():
    p = Placement("odd", center=(0.0, 0.5, 0.0), extent=(0.3, 0.3, 0.3), volume=float("nan"))

    assert tooltip_lines(p)[1:] == ["Volume: 0.0 m³", "Weight: 0.0 kg"]


def test_build_scene_keeps_order():
    """Test that scene boxes map one-to-one onto placements."""
    placements = compute_placements({"a": 1.0, "b": 4.0, "c": 2.0}, WarehouseBounds(10, 10, 2))
    boxes = build_scene(placements)

    assert [b.category for b in boxes] == ["b", "c", "a"]
    for box, p in zip(boxes, placements):
        assert box.position == pytest.approx(p.center, abs=1e-6)
        assert box.scale == pytest.approx(p.extent, abs=1e-6)
        assert box.volume == p.volume

    print("✓ Build scene test passed")


def test_floor_box_sits_below_zero():
    floor = floor_box(WarehouseBounds(12, 8, 3))

    assert floor.max_bounds[1] == pytest.approx(0.0)
    assert floor.scale[0] == pytest.approx(12.0)
    assert floor.scale[2] == pytest.approx(8.0)


def test_boundary_outline():
    """Test the floor and ceiling loops around the warehouse."""
    outline = boundary_outline(WarehouseBounds(10, 6, 2))

    assert outline.shape == (10, 3)
    assert np.array_equal(outline[0], outline[4])
    assert np.array_equal(outline[5], outline[9])
    assert np.all(outline[:5, 1] == 0.0)
    assert np.all(outline[5:, 1] == 2.0)
    assert outline[:, 0].min() == -5.0 and outline[:, 0].max() == 5.0
    assert outline[:, 2].min() == -3.0 and outline[:, 2].max() == 3.0


def test_pick_box_returns_nearest_hit():
    """Test that picking finds the closest box along the ray."""
    placements = [
        Placement("far", center=(0.0, 0.0, 0.0), extent=(1.0, 1.0, 1.0), volume=1.0),
        Placement("near", center=(0.0, 0.0, 3.0), extent=(1.0, 1.0, 1.0), volume=1.0),
        Placement("aside", center=(5.0, 0.0, 3.0), extent=(1.0, 1.0, 1.0), volume=1.0),
    ]
    boxes = build_scene(placements)
    origin = np.array([0.0, 0.0, 10.0])

    assert pick_box(origin, np.array([0.0, 0.0, -1.0]), boxes) == 1
    assert pick_box(origin, np.array([0.0, 1.0, 0.0]), boxes) is None
    assert pick_box(origin, np.array([0.0, 0.0, -1.0]), []) is None

    print("✓ Picking test passed")


def run_all_tests():
    """Run the main scene tests."""
    print("=== Running Scene Tests ===\n")

    test_category_color_is_deterministic()
    test_build_scene_keeps_order()
    test_pick_box_returns_nearest_hit()

    print("\n=== All Scene Tests Passed! ===")


if __name__ == "__main__":
    run_all_tests()
