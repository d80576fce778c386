"""Layout engine for the 3D warehouse occupancy view.

Arranges one box per material category inside the warehouse using a
greedy shelf packer: boxes go left to right along X until the row is
full, rows advance along Z until the layer is full, and layers stack
along Y. Largest volumes are placed first.
"""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Protocol

import numpy as np

from pywarehouse.errors import validate_range
from pywarehouse.layout.position import Placement

logger = logging.getLogger(__name__)


class Bounds(Protocol):
    """Anything with warehouse length (X), width (Z) and height (Y)."""

    length: float
    width: float
    height: float


@dataclass
class LayoutConfig:
    """Configuration for the layout engine.

    Attributes:
        min_size: Minimum size of any box dimension, so empty categories stay visible
        spacing: Gap between neighbouring boxes and between boxes and the interior edges
        horizontal_margin: Fraction of warehouse length/width usable for boxes
        vertical_margin: Fraction of warehouse height usable for boxes
        footprint_divisor: A box never gets more than 1/divisor of the interior length or width
    """

    min_size: float = 0.3
    spacing: float = 0.2
    horizontal_margin: float = 0.9
    vertical_margin: float = 0.8
    footprint_divisor: float = 4.0

    def __post_init__(self) -> None:
        validate_range(self.min_size, 1e-6, math.inf, "min_size")
        validate_range(self.spacing, 0.0, math.inf, "spacing")
        validate_range(self.horizontal_margin, 1e-6, 1.0, "horizontal_margin")
        validate_range(self.vertical_margin, 1e-6, 1.0, "vertical_margin")
        validate_range(self.footprint_divisor, 1.0, math.inf, "footprint_divisor")


@dataclass(frozen=True)
class UsableRegion:
    """Interior of the warehouse that boxes are packed into.

    Centered on the origin in X/Z. Vertically it starts at the floor and
    ends ``height`` above the floor clearance, but never above the
    warehouse ceiling.

    Attributes:
        length: Usable size along X
        width: Usable size along Z
        height: Usable size along Y (also the tallest a single box may be)
        floor: Clearance between the warehouse floor and the first layer
        ceiling: Raw warehouse height
    """

    length: float
    width: float
    height: float
    floor: float
    ceiling: float

    @property
    def min_x(self) -> float:
        return -self.length / 2

    @property
    def max_x(self) -> float:
        return self.length / 2

    @property
    def min_y(self) -> float:
        return 0.0

    @property
    def max_y(self) -> float:
        return min(self.floor + self.height, self.ceiling)

    @property
    def min_z(self) -> float:
        return -self.width / 2

    @property
    def max_z(self) -> float:
        return self.width / 2

    def contains(self, placement: Placement, tolerance: float = 1e-9) -> bool:
        """Check whether a placement lies entirely inside the region."""
        return (
            placement.min_x >= self.min_x - tolerance
            and placement.max_x <= self.max_x + tolerance
            and placement.min_y >= self.min_y - tolerance
            and placement.max_y <= self.max_y + tolerance
            and placement.min_z >= self.min_z - tolerance
            and placement.max_z <= self.max_z + tolerance
        )


@dataclass(frozen=True)
class PackingCursor:
    """Running state of one packing pass.

    Attributes:
        x: Start of the next box along X in the current row
        y: Floor of the current layer
        z: Start of the current row along Z
        layer_height: Tallest box placed in the current layer so far
        row: Boxes placed in the current row
        placements: Every box placed so far, in processing order
    """

    x: float
    y: float
    z: float
    layer_height: float = 0.0
    row: tuple[Placement, ...] = ()
    placements: tuple[Placement, ...] = ()


def _sort_key(volume: float) -> float:
    # NaN never compares, so it would break the ordering
    return -math.inf if math.isnan(volume) else volume


class LayoutEngine:
    """Engine for calculating box placements for warehouse categories."""

    def __init__(self, config: LayoutConfig | None = None) -> None:
        """Initialize the layout engine.

        Args:
            config: Layout configuration (uses defaults if None)
        """
        self.config = config or LayoutConfig()

    def usable_region(self, bounds: Bounds) -> UsableRegion:
        """Shrink the warehouse bounds by the configured margins.

        Args:
            bounds: Warehouse dimensions

        Returns:
            The usable interior region
        """
        return UsableRegion(
            length=bounds.length * self.config.horizontal_margin,
            width=bounds.width * self.config.horizontal_margin,
            height=bounds.height * self.config.vertical_margin,
            floor=self.config.spacing,
            ceiling=bounds.height,
        )

    def box_size(self, volume: float, region: UsableRegion) -> tuple[float, float, float]:
        """Derive box dimensions from a category volume.

        Height follows the cube root of the volume so box size tracks the
        real amount stored. Width and length are capped at a fraction of
        the interior so no category takes a whole row. Height is also
        capped so a first-layer box stays below the ceiling. Every
        dimension is floored at ``min_size`` before it is used as a divisor.

        Args:
            volume: Category volume; zero, negative and NaN give a minimum box
            region: Usable interior region

        Returns:
            (length, height, width)
        """
        min_size = self.config.min_size
        divisor = self.config.footprint_divisor
        v = volume if volume > 0 else 0.0

        headroom = region.max_y - region.floor
        height = max(min(float(np.cbrt(v)), region.height, headroom), min_size)
        width = max(min(math.sqrt(v / height), region.width / divisor), min_size)
        length = max(min(v / (height * width), region.length / divisor), min_size)
        return length, height, width

    def compute_placements(self, category_volumes: Mapping[str, float], bounds: Bounds) -> list[Placement]:
        """Calculate one placement per category.

        Args:
            category_volumes: Category name to stored volume
            bounds: Warehouse dimensions

        Returns:
            Placements ordered by descending volume; ties keep input order
        """
        if not category_volumes:
            return []

        region = self.usable_region(bounds)
        spacing = self.config.spacing
        ordered = sorted(category_volumes.items(), key=lambda item: _sort_key(item[1]), reverse=True)

        start = PackingCursor(
            x=region.min_x + spacing,
            y=region.floor,
            z=region.min_z + spacing,
        )
        final = reduce(lambda cursor, item: self._place(cursor, item, region), ordered, start)

        placements = list(final.placements)
        logger.debug(f"Placed {len(placements)} categories in {bounds.length}x{bounds.width}x{bounds.height} warehouse")
        return placements

    def _place(self, cursor: PackingCursor, item: tuple[str, float], region: UsableRegion) -> PackingCursor:
        """Place one category and advance the cursor.

        Wrap decisions only look at boxes already placed in the current
        row and layer, never at the incoming box's effect on later ones.

        Args:
            cursor: Cursor before placing this category
            item: (category, volume)
            region: Usable interior region

        Returns:
            Cursor after placing this category
        """
        category, volume = item
        spacing = self.config.spacing
        length, height, width = self.box_size(volume, region)

        x, y, z = cursor.x, cursor.y, cursor.z
        layer_height = cursor.layer_height
        row = cursor.row

        # New row
        if row and x + length > region.max_x - spacing:
            z += spacing + max(p.width for p in row)
            x = region.min_x + spacing
            row = ()

        # New layer
        if z + width > region.max_z - spacing:
            z = region.min_z + spacing
            x = region.min_x + spacing
            y += spacing + layer_height
            layer_height = 0.0
            row = ()

        placement = Placement(
            category=category,
            center=(x + length / 2, y + height / 2, z + width / 2),
            extent=(length, height, width),
            volume=volume,
        )
        if not region.contains(placement):
            logger.warning(
                f"Category '{category}' extends outside the usable interior "
                f"(top at {placement.max_y:.2f}, usable height {region.max_y:.2f})"
            )

        return PackingCursor(
            x=x + length + spacing,
            y=y,
            z=z,
            layer_height=max(layer_height, height),
            row=row + (placement,),
            placements=cursor.placements + (placement,),
        )


def compute_placements(
    category_volumes: Mapping[str, float],
    bounds: Bounds,
    config: LayoutConfig | None = None,
) -> list[Placement]:
    """Calculate placements with a one-off engine.

    Args:
        category_volumes: Category name to stored volume
        bounds: Warehouse dimensions
        config: Layout configuration (uses defaults if None)

    Returns:
        Placements ordered by descending volume
    """
    return LayoutEngine(config).compute_placements(category_volumes, bounds)
