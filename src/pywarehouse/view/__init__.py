"""View layer for pywarehouse.

Scene building (colors, labels, outline, picking) and the orbit camera
are plain numpy. The OpenGL viewer needs PyQt6 and PyOpenGL, so it is
imported from ``pywarehouse.view.viewer`` only when a window is shown.
"""

from pywarehouse.view.camera import OrbitCamera
from pywarehouse.view.scene import (
    SceneBox,
    boundary_outline,
    build_scene,
    category_color,
    category_label,
    floor_box,
    pick_box,
    tooltip_lines,
)

__all__ = [
    "OrbitCamera",
    "SceneBox",
    "boundary_outline",
    "build_scene",
    "category_color",
    "category_label",
    "floor_box",
    "pick_box",
    "tooltip_lines",
]
