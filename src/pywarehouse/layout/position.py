"""Placement of a single category box in 3D space."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Placement:
    """One computed box for a material category.

    Y is up. The box rests on its lower face, so ``min_y`` is the floor
    it stands on.

    Attributes:
        category: Name of the source category
        center: Geometric center of the box (x, y, z)
        extent: Full size of the box (length along X, height along Y, width along Z)
        volume: Original input volume, carried through for display
    """

    category: str
    center: tuple[float, float, float]
    extent: tuple[float, float, float]
    volume: float

    @property
    def length(self) -> float:
        """Size along the X axis."""
        return self.extent[0]

    @property
    def height(self) -> float:
        """Size along the Y axis."""
        return self.extent[1]

    @property
    def width(self) -> float:
        """Size along the Z axis."""
        return self.extent[2]

    @property
    def min_x(self) -> float:
        """Minimum X coordinate."""
        return self.center[0] - self.length / 2

    @property
    def max_x(self) -> float:
        """Maximum X coordinate."""
        return self.center[0] + self.length / 2

    @property
    def min_y(self) -> float:
        """Minimum Y coordinate."""
        return self.center[1] - self.height / 2

    @property
    def max_y(self) -> float:
        """Maximum Y coordinate."""
        return self.center[1] + self.height / 2

    @property
    def min_z(self) -> float:
        """Minimum Z coordinate."""
        return self.center[2] - self.width / 2

    @property
    def max_z(self) -> float:
        """Maximum Z coordinate."""
        return self.center[2] + self.width / 2

    def contains_point(self, px: float, py: float, pz: float) -> bool:
        """Check if a point is inside this placement."""
        return (
            self.min_x <= px <= self.max_x
            and self.min_y <= py <= self.max_y
            and self.min_z <= pz <= self.max_z
        )

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "center": list(self.center),
            "extent": list(self.extent),
            "volume": self.volume,
        }

    def __repr__(self) -> str:
        """String representation."""
        x, y, z = self.center
        return (
            f"Placement({self.category!r}, x={x:.2f}, y={y:.2f}, z={z:.2f}, "
            f"l={self.length:.2f}, h={self.height:.2f}, w={self.width:.2f})"
        )
