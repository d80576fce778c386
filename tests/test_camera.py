"""Unit tests for the orbit camera."""

import math
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
import pytest

from pywarehouse.view.camera import OrbitCamera


def test_initial_position():
    """Test the default viewpoint looking at the origin."""
    camera = OrbitCamera()

    assert camera.distance == pytest.approx(math.sqrt(675), rel=1e-5)
    assert camera.elevation == pytest.approx(math.asin(1 / math.sqrt(3)), rel=1e-5)
    assert camera.position == pytest.approx((15.0, 15.0, 15.0), abs=1e-3)
    assert camera.fov == 50.0


def test_zoom_is_clamped():
    camera = OrbitCamera()

    for _ in range(100):
        camera.orbit_zoom(1.0)
    assert camera.distance == pytest.approx(OrbitCamera.MIN_DISTANCE)

    for _ in range(100):
        camera.orbit_zoom(-1.0)
    assert camera.distance == pytest.approx(OrbitCamera.MAX_DISTANCE)


def test_polar_angle_is_clamped():
    """Test that the camera never goes below the floor or past the top limit."""
    camera = OrbitCamera()

    camera.orbit_rotate(0, 10000)
    assert camera.polar == pytest.approx(OrbitCamera.MAX_POLAR)
    assert camera.elevation == pytest.approx(0.0)
    assert camera.position[1] == pytest.approx(0.0, abs=1e-4)

    camera.orbit_rotate(0, -10000)
    assert camera.polar == pytest.approx(OrbitCamera.MIN_POLAR)
    assert camera.elevation == pytest.approx(math.pi / 3)


def test_rotation_keeps_distance():
    camera = OrbitCamera()
    before = camera.distance

    camera.orbit_rotate(120, 30)

    assert np.linalg.norm(camera.position - camera.target) == pytest.approx(before, rel=1e-5)


def test_far_start_is_clamped():
    camera = OrbitCamera(position=(100.0, 0.0, 0.0))

    assert camera.distance == pytest.approx(OrbitCamera.MAX_DISTANCE)


def test_center_ray_points_at_target():
    """Test that a ray through the viewport center is the view direction."""
    camera = OrbitCamera()
    ray = camera.get_ray_direction(400, 300, 800, 600)

    expected = -np.array([1.0, 1.0, 1.0]) / math.sqrt(3)
    assert ray == pytest.approx(expected, abs=1e-4)


def test_view_matrix_moves_target_in_front():
    camera = OrbitCamera()
    target = np.array([0.0, 0.0, 0.0, 1.0])

    eye_space = camera.view_matrix @ target

    assert eye_space[2] == pytest.approx(-camera.distance, rel=1e-4)
    assert eye_space[0] == pytest.approx(0.0, abs=1e-4)
    assert eye_space[1] == pytest.approx(0.0, abs=1e-4)
