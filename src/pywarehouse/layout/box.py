"""Axis-aligned bounding boxes for overlap and containment checks."""

from dataclasses import dataclass

from pywarehouse.layout.position import Placement

Corner = tuple[float, float, float]


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box given by its lower and upper corners.

    Attributes:
        lower: (min_x, min_y, min_z)
        upper: (max_x, max_y, max_z)
    """

    lower: Corner
    upper: Corner

    @property
    def min_x(self) -> float:
        return self.lower[0]

    @property
    def max_x(self) -> float:
        return self.upper[0]

    @property
    def min_y(self) -> float:
        return self.lower[1]

    @property
    def max_y(self) -> float:
        return self.upper[1]

    @property
    def min_z(self) -> float:
        return self.lower[2]

    @property
    def max_z(self) -> float:
        return self.upper[2]

    @property
    def size(self) -> Corner:
        """Extent along X, Y and Z."""
        return tuple(hi - lo for lo, hi in zip(self.lower, self.upper))

    def intersects(self, other: "BoundingBox") -> bool:
        """Check if this box overlaps another.

        Boxes that only touch along a face do not intersect.
        """
        return all(
            lo < other_hi and hi > other_lo
            for lo, hi, other_lo, other_hi in zip(self.lower, self.upper, other.lower, other.upper)
        )

    def contains_point(self, x: float, y: float, z: float) -> bool:
        """Check if a point is inside this box, faces included."""
        return all(lo <= v <= hi for lo, v, hi in zip(self.lower, (x, y, z), self.upper))

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Smallest box enclosing both boxes."""
        return BoundingBox(
            lower=tuple(map(min, self.lower, other.lower)),
            upper=tuple(map(max, self.upper, other.upper)),
        )

    @classmethod
    def from_placement(cls, placement: Placement, padding: float = 0.0) -> "BoundingBox":
        """Create a bounding box around a placement.

        Args:
            placement: Placement to enclose
            padding: Extra space added on every side

        Returns:
            A new BoundingBox instance
        """
        return cls(
            lower=(placement.min_x - padding, placement.min_y - padding, placement.min_z - padding),
            upper=(placement.max_x + padding, placement.max_y + padding, placement.max_z + padding),
        )
