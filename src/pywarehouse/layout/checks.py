"""Independent checks of a computed layout.

These do not take part in packing; they verify the result (no overlaps,
everything inside the usable region) for callers and tests.
"""

from dataclasses import dataclass, field
from functools import reduce
from itertools import combinations

from pywarehouse.layout.box import BoundingBox
from pywarehouse.layout.engine import Bounds, LayoutConfig, LayoutEngine
from pywarehouse.layout.position import Placement


@dataclass
class LayoutReport:
    """Result of checking a layout.

    Attributes:
        overlaps: Index pairs of placements whose boxes intersect
        out_of_bounds: Indices of placements outside the usable region
    """

    overlaps: list[tuple[int, int]] = field(default_factory=list)
    out_of_bounds: list[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.overlaps and not self.out_of_bounds


def find_overlaps(placements: list[Placement], gap: float = 0.0) -> list[tuple[int, int]]:
    """Find pairs of placements that intersect.

    Args:
        placements: Placements to check
        gap: Minimum clearance required between boxes; each box is padded by half of it

    Returns:
        Index pairs (i, j) with i < j
    """
    # Shave a hair off the padding so boxes exactly ``gap`` apart do not count
    padding = max(gap / 2 - 1e-9, 0.0)
    boxes = [BoundingBox.from_placement(p, padding=padding) for p in placements]
    return [(i, j) for (i, a), (j, b) in combinations(enumerate(boxes), 2) if a.intersects(b)]


def find_out_of_bounds(
    placements: list[Placement],
    bounds: Bounds,
    config: LayoutConfig | None = None,
) -> list[int]:
    """Find placements that are not inside the usable region.

    Args:
        placements: Placements to check
        bounds: Warehouse dimensions the placements were computed for
        config: Layout configuration used for the placements

    Returns:
        Indices of offending placements
    """
    region = LayoutEngine(config).usable_region(bounds)
    return [i for i, p in enumerate(placements) if not region.contains(p)]


def check_layout(
    placements: list[Placement],
    bounds: Bounds,
    config: LayoutConfig | None = None,
) -> LayoutReport:
    """Run all layout checks.

    Boxes are required to keep the configured spacing between each other.
    """
    config = config or LayoutConfig()
    return LayoutReport(
        overlaps=find_overlaps(placements, gap=config.spacing),
        out_of_bounds=find_out_of_bounds(placements, bounds, config),
    )


def layout_bounds(placements: list[Placement]) -> BoundingBox | None:
    """Calculate the overall bounding box of all placements.

    Returns:
        Bounding box containing all placements, or None for an empty layout
    """
    if not placements:
        return None
    return reduce(BoundingBox.union, (BoundingBox.from_placement(p) for p in placements))
