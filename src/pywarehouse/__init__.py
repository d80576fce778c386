"""pywarehouse - 3D occupancy layout for warehouse material categories."""

from pywarehouse.layout import LayoutConfig, LayoutEngine, Placement, compute_placements
from pywarehouse.model import WarehouseBounds

__version__ = "0.1.0"

__all__ = ["LayoutConfig", "LayoutEngine", "Placement", "WarehouseBounds", "compute_placements"]
