"""Orbit camera for looking around the warehouse.

The camera sits on a sphere around a focal point at the warehouse
center. Its place on the sphere is an azimuth around +Y and a polar
angle measured down from +Y; both the radius and the polar angle are
clamped so the floor is never seen from below.
"""

import math

import numpy as np

WORLD_UP = np.array([0.0, 1.0, 0.0], dtype=np.float32)


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


class OrbitCamera:
    """Perspective camera orbiting a focal point."""

    MIN_DISTANCE = 5.0
    MAX_DISTANCE = 50.0
    MIN_POLAR = math.pi / 6
    MAX_POLAR = math.pi / 2

    ROTATION_SPEED = 0.005  # radians per pixel dragged
    ZOOM_STEP = 0.1  # fraction of the distance per wheel notch

    def __init__(
        self,
        position: tuple[float, float, float] = (15.0, 15.0, 15.0),
        target: tuple[float, float, float] = (0.0, 0.0, 0.0),
        fov: float = 50.0,
    ) -> None:
        """Initialize camera from a starting position.

        Args:
            position: Starting camera position, clamped onto the allowed orbit
            target: Focal point
            fov: Vertical field of view in degrees
        """
        self.fov = fov
        self.near = 0.1
        self.far = 1000.0
        self.up = WORLD_UP.copy()
        self.target = np.array(target, dtype=np.float32)

        offset = np.array(position, dtype=np.float32) - self.target
        self.distance = float(np.linalg.norm(offset))
        if self.distance > 0:
            self.azimuth = math.atan2(offset[0], offset[2])
            self.polar = math.acos(max(-1.0, min(1.0, offset[1] / self.distance)))
        else:
            self.azimuth = 0.0
            self.polar = self.MAX_POLAR
        self._clamp()

    @property
    def elevation(self) -> float:
        """Angle above the floor plane."""
        return math.pi / 2 - self.polar

    @property
    def position(self) -> np.ndarray:
        sin_polar = math.sin(self.polar)
        offset = np.array(
            [
                sin_polar * math.sin(self.azimuth),
                math.cos(self.polar),
                sin_polar * math.cos(self.azimuth),
            ],
            dtype=np.float32,
        )
        return self.target + self.distance * offset

    def basis(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Camera right, up and forward unit vectors."""
        forward = _normalize(self.target - self.position)
        right = _normalize(np.cross(forward, self.up))
        return right, np.cross(right, forward), forward

    @property
    def view_matrix(self) -> np.ndarray:
        """World to eye transform as a 4x4 array."""
        right, up, forward = self.basis()
        rotation = np.stack([right, up, -forward])

        view = np.identity(4, dtype=np.float32)
        view[:3, :3] = rotation
        view[:3, 3] = -rotation @ self.position
        return view

    def orbit_rotate(self, dx: float, dy: float) -> None:
        """Swing around the target by a mouse drag in pixels."""
        self.azimuth -= dx * self.ROTATION_SPEED
        self.polar += dy * self.ROTATION_SPEED
        self._clamp()

    def orbit_zoom(self, notches: float) -> None:
        """Move toward (positive) or away from (negative) the target."""
        self.distance *= 1.0 - notches * self.ZOOM_STEP
        self._clamp()

    def get_ray_direction(self, screen_x: float, screen_y: float, width: int, height: int) -> np.ndarray:
        """Unit direction of the ray through a viewport pixel.

        Args:
            screen_x: Pixel column, 0 at the left edge
            screen_y: Pixel row, 0 at the top edge
            width: Viewport width
            height: Viewport height
        """
        ndc_x = 2.0 * screen_x / width - 1.0
        ndc_y = 1.0 - 2.0 * screen_y / height
        half_height = math.tan(math.radians(self.fov) / 2)
        half_width = half_height * width / height

        right, up, forward = self.basis()
        return _normalize(forward + right * ndc_x * half_width + up * ndc_y * half_height)

    def _clamp(self) -> None:
        self.distance = min(max(self.distance, self.MIN_DISTANCE), self.MAX_DISTANCE)
        self.polar = min(max(self.polar, self.MIN_POLAR), self.MAX_POLAR)
