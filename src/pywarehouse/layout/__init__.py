"""Layout engine for the 3D warehouse occupancy view.

This module contains the shelf-packing layout that positions one box
per material category inside the warehouse, plus checks that verify
the result.
"""

from pywarehouse.layout.box import BoundingBox
from pywarehouse.layout.checks import LayoutReport, check_layout, find_out_of_bounds, find_overlaps
from pywarehouse.layout.engine import LayoutConfig, LayoutEngine, UsableRegion, compute_placements
from pywarehouse.layout.position import Placement

__all__ = [
    "BoundingBox",
    "LayoutConfig",
    "LayoutEngine",
    "LayoutReport",
    "Placement",
    "UsableRegion",
    "check_layout",
    "compute_placements",
    "find_out_of_bounds",
    "find_overlaps",
]
