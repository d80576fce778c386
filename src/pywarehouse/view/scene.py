"""Scene data for drawing a warehouse layout.

Turns engine placements into drawable boxes (center, scale, RGBA color,
label) and provides the warehouse outline and ray picking. Nothing here
affects where boxes are placed.
"""

import colorsys
import math
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from pywarehouse.layout.engine import Bounds
from pywarehouse.layout.position import Placement
from pywarehouse.model.inventory import VOLUME_CONVERSION_FACTOR, volume_to_weight

# Category boxes are drawn translucent
BOX_ALPHA = 0.8
FLOOR_COLOR = np.array([0.898, 0.906, 0.922, 1.0], dtype=np.float32)  # #e5e7eb
FLOOR_THICKNESS = 0.1


@dataclass
class SceneBox:
    """Single drawable box.

    Attributes:
        position: Center [x, y, z]
        scale: Size [length, height, width]
        color: [r, g, b, a]
        category: Source category name (empty for scenery)
        label: Display name
        volume: Stored volume for tooltips
    """

    position: np.ndarray
    scale: np.ndarray
    color: np.ndarray
    category: str = ""
    label: str = ""
    volume: float = 0.0

    @property
    def min_bounds(self) -> np.ndarray:
        return self.position - self.scale / 2

    @property
    def max_bounds(self) -> np.ndarray:
        return self.position + self.scale / 2


def category_hue(name: str) -> float:
    """Stable hue in [0, 1) derived from the character codes of a name."""
    return (sum(ord(char) for char in name) % 360) / 360


def category_color(name: str, alpha: float = BOX_ALPHA) -> np.ndarray:
    """Deterministic RGBA color for a category (saturation 0.6, lightness 0.5)."""
    r, g, b = colorsys.hls_to_rgb(category_hue(name), 0.5, 0.6)
    return np.array([r, g, b, alpha], dtype=np.float32)


def category_label(name: str) -> str:
    """Human-readable category name: "plastic-bottle" becomes "Plastic Bottle"."""
    return " ".join(word[:1].upper() + word[1:] for word in name.split("-"))


def tooltip_lines(
    placement: Placement,
    factor: float = VOLUME_CONVERSION_FACTOR,
    since: datetime | None = None,
) -> list[str]:
    """Tooltip text for a placement; the batch date line appears only when known."""
    volume = placement.volume if math.isfinite(placement.volume) else 0.0
    lines = [
        category_label(placement.category),
        f"Volume: {volume:.1f} m³",
        f"Weight: {volume_to_weight(volume, factor):.1f} kg",
    ]
    if since is not None:
        lines.append(f"Since: {since:%Y-%m-%d}")
    return lines


def build_scene(placements: list[Placement], alpha: float = BOX_ALPHA) -> list[SceneBox]:
    """Map placements one-to-one onto drawable boxes.

    Args:
        placements: Engine output
        alpha: Opacity of the category boxes

    Returns:
        Boxes in the same order as the placements
    """
    return [
        SceneBox(
            position=np.array(p.center, dtype=np.float32),
            scale=np.array(p.extent, dtype=np.float32),
            color=category_color(p.category, alpha),
            category=p.category,
            label=category_label(p.category),
            volume=p.volume,
        )
        for p in placements
    ]


def floor_box(bounds: Bounds) -> SceneBox:
    """Thin slab under the warehouse, top face at Y = 0."""
    return SceneBox(
        position=np.array([0.0, -FLOOR_THICKNESS / 2, 0.0], dtype=np.float32),
        scale=np.array([bounds.length, FLOOR_THICKNESS, bounds.width], dtype=np.float32),
        color=FLOOR_COLOR.copy(),
    )


def boundary_outline(bounds: Bounds) -> np.ndarray:
    """Polyline around the warehouse: floor loop, then ceiling loop.

    Returns:
        (10, 3) array of points
    """
    hl = bounds.length / 2
    hw = bounds.width / 2
    h = bounds.height
    corners = [(-hl, -hw), (hl, -hw), (hl, hw), (-hl, hw), (-hl, -hw)]
    points = [(x, 0.0, z) for x, z in corners] + [(x, h, z) for x, z in corners]
    return np.array(points, dtype=np.float32)


def ray_aabb_intersect(
    ray_origin: np.ndarray,
    ray_dir: np.ndarray,
    min_bounds: np.ndarray,
    max_bounds: np.ndarray,
) -> float | None:
    """Distance along a unit ray to the first face of a box, or None on a miss."""
    t_near, t_far = 0.0, math.inf
    for origin, direction, lo, hi in zip(ray_origin, ray_dir, min_bounds, max_bounds):
        if abs(direction) < 1e-6:
            # Parallel to this pair of faces
            if not lo <= origin <= hi:
                return None
            continue
        t1, t2 = sorted(((lo - origin) / direction, (hi - origin) / direction))
        t_near, t_far = max(t_near, t1), min(t_far, t2)
        if t_near > t_far:
            return None
    return t_near if t_near > 0 else None


def pick_box(ray_origin: np.ndarray, ray_dir: np.ndarray, boxes: list[SceneBox]) -> int | None:
    """Index of the nearest box hit by a ray, or None."""
    closest_index = None
    closest_t = float('inf')
    for i, box in enumerate(boxes):
        t = ray_aabb_intersect(ray_origin, ray_dir, box.min_bounds, box.max_bounds)
        if t is not None and t < closest_t:
            closest_t = t
            closest_index = i
    return closest_index
