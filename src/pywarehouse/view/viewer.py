"""OpenGL widget for viewing a warehouse layout.

Uses PyOpenGL with Legacy OpenGL 2.1 for Mac compatibility.
"""

import logging
import sys
from collections.abc import Mapping
from datetime import datetime

from PyQt6.QtCore import QPoint, Qt
from PyQt6.QtGui import QSurfaceFormat
from PyQt6.QtOpenGLWidgets import QOpenGLWidget
from PyQt6.QtWidgets import QApplication, QMainWindow, QToolTip

from OpenGL.GL import *
from OpenGL.GLU import gluLookAt, gluPerspective

from pywarehouse.errors import RenderError
from pywarehouse.layout.engine import Bounds
from pywarehouse.layout.position import Placement
from pywarehouse.model.inventory import VOLUME_CONVERSION_FACTOR
from pywarehouse.view.camera import OrbitCamera
from pywarehouse.view.scene import (
    SceneBox,
    boundary_outline,
    build_scene,
    floor_box,
    pick_box,
    tooltip_lines,
)

logger = logging.getLogger(__name__)

# Unit cube faces as (shade, corners); shading fakes a light from above and in front
CUBE_FACES = (
    (0.85, ((-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5))),
    (0.55, ((0.5, -0.5, -0.5), (-0.5, -0.5, -0.5), (-0.5, 0.5, -0.5), (0.5, 0.5, -0.5))),
    (1.0, ((-0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5))),
    (0.4, ((-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5))),
    (0.7, ((0.5, -0.5, 0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5))),
    (0.7, ((-0.5, -0.5, -0.5), (-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5))),
)


class WarehouseViewer(QOpenGLWidget):
    """OpenGL widget drawing the warehouse floor, outline and category boxes."""

    def __init__(
        self,
        placements: list[Placement],
        bounds: Bounds,
        parent=None,
        factor: float = VOLUME_CONVERSION_FACTOR,
        oldest: Mapping[str, datetime] | None = None,
    ) -> None:
        super().__init__(parent)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMouseTracking(True)

        self.camera = OrbitCamera()
        self._placements = placements
        self._boxes: list[SceneBox] = build_scene(placements)
        self._floor = floor_box(bounds)
        self._outline = boundary_outline(bounds)
        self._factor = factor
        self._oldest = dict(oldest or {})

        self._last_mouse: QPoint | None = None
        self._hovered: int | None = None
        self._initialized = False

    @property
    def hovered(self) -> int | None:
        """Index of the box under the mouse, if any."""
        return self._hovered

    def initializeGL(self) -> None:
        """Initialize OpenGL resources."""
        glClearColor(0.98, 0.98, 0.98, 1.0)
        glEnable(GL_DEPTH_TEST)
        glDisable(GL_LIGHTING)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        self._initialized = True
        logger.debug(f"Viewer initialized with {len(self._boxes)} boxes")

    def resizeGL(self, w: int, h: int) -> None:
        """Handle viewport resize."""
        glViewport(0, 0, int(w * self.devicePixelRatio()), int(h * self.devicePixelRatio()))
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        aspect = w / max(1, h)
        gluPerspective(self.camera.fov, aspect, self.camera.near, self.camera.far)
        glMatrixMode(GL_MODELVIEW)

    def paintGL(self) -> None:
        """Render the scene."""
        if not self._initialized:
            return

        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        glLoadIdentity()

        pos = self.camera.position
        target = self.camera.target
        up = self.camera.up
        gluLookAt(pos[0], pos[1], pos[2],
                  target[0], target[1], target[2],
                  up[0], up[1], up[2])

        self._draw_box(self._floor)
        self._draw_outline()

        # Translucent boxes: skip depth writes so boxes behind stay visible
        glDepthMask(GL_FALSE)
        for i, box in enumerate(self._boxes):
            self._draw_box(box, wireframe=(i == self._hovered))
        glDepthMask(GL_TRUE)

        for box in self._boxes:
            self._draw_box_edges(box)

    def _draw_outline(self) -> None:
        """Draw the dashed warehouse boundary."""
        glEnable(GL_LINE_STIPPLE)
        glLineStipple(2, 0x00FF)
        glLineWidth(1.0)
        glColor4f(0.5, 0.5, 0.5, 1.0)
        glBegin(GL_LINE_STRIP)
        for x, y, z in self._outline:
            glVertex3f(x, y, z)
        glEnd()
        glDisable(GL_LINE_STIPPLE)

    def _draw_box(self, box: SceneBox, wireframe: bool = False) -> None:
        """Draw a single box with per-face shading."""
        if wireframe:
            self._draw_box_edges(box, shade=1.0)
            return

        x, y, z = box.position
        sx, sy, sz = box.scale
        r, g, b, a = box.color

        glPushMatrix()
        glTranslatef(x, y, z)
        glScalef(sx, sy, sz)

        glBegin(GL_QUADS)
        for shade, corners in CUBE_FACES:
            glColor4f(r * shade, g * shade, b * shade, a)
            for corner in corners:
                glVertex3f(*corner)
        glEnd()

        glPopMatrix()

    def _draw_box_edges(self, box: SceneBox, shade: float = 0.3) -> None:
        """Draw the twelve edges of a box."""
        x, y, z = box.position
        sx, sy, sz = box.scale
        r, g, b, a = box.color

        glEnable(GL_POLYGON_OFFSET_LINE)
        glPolygonOffset(-1.0, -1.0)
        glLineWidth(1.5)
        glColor4f(r * shade, g * shade, b * shade, 1.0)

        glPushMatrix()
        glTranslatef(x, y, z)
        glScalef(sx, sy, sz)

        glBegin(GL_LINES)
        for y0 in (-0.5, 0.5):
            # Horizontal loop at this height
            glVertex3f(-0.5, y0, -0.5)
            glVertex3f(0.5, y0, -0.5)
            glVertex3f(0.5, y0, -0.5)
            glVertex3f(0.5, y0, 0.5)
            glVertex3f(0.5, y0, 0.5)
            glVertex3f(-0.5, y0, 0.5)
            glVertex3f(-0.5, y0, 0.5)
            glVertex3f(-0.5, y0, -0.5)
        for cx, cz in ((-0.5, -0.5), (0.5, -0.5), (0.5, 0.5), (-0.5, 0.5)):
            glVertex3f(cx, -0.5, cz)
            glVertex3f(cx, 0.5, cz)
        glEnd()

        glPopMatrix()
        glDisable(GL_POLYGON_OFFSET_LINE)

    def box_at(self, x: int, y: int) -> int | None:
        """Index of the box at a screen position using ray casting."""
        if not self._boxes:
            return None
        ray_dir = self.camera.get_ray_direction(x, y, max(1, self.width()), max(1, self.height()))
        return pick_box(self.camera.position, ray_dir, self._boxes)

    def mousePressEvent(self, event) -> None:
        self._last_mouse = event.position().toPoint()

    def mouseReleaseEvent(self, event) -> None:
        self._last_mouse = None

    def mouseMoveEvent(self, event) -> None:
        point = event.position().toPoint()
        if self._last_mouse is not None:
            delta = point - self._last_mouse
            self.camera.orbit_rotate(delta.x(), delta.y())
            self._last_mouse = point
            self.update()
            return

        hovered = self.box_at(point.x(), point.y())
        if hovered != self._hovered:
            self._hovered = hovered
            if hovered is None:
                QToolTip.hideText()
            else:
                placement = self._placements[hovered]
                since = self._oldest.get(placement.category)
                text = "\n".join(tooltip_lines(placement, self._factor, since))
                QToolTip.showText(event.globalPosition().toPoint(), text, self)
            self.update()

    def wheelEvent(self, event) -> None:
        self.camera.orbit_zoom(event.angleDelta().y() / 120.0)
        self.update()


def show_viewer(
    placements: list[Placement],
    bounds: Bounds,
    title: str = "pywarehouse",
    factor: float = VOLUME_CONVERSION_FACTOR,
    oldest: Mapping[str, datetime] | None = None,
) -> int:
    """Open a window with the layout and run the Qt event loop.

    Args:
        placements: Engine output
        bounds: Warehouse dimensions
        title: Window title
        factor: Cubic metres per kilogram used for tooltip weights
        oldest: Oldest batch date per category for tooltips

    Returns:
        Qt application exit code

    Raises:
        RenderError: If no OpenGL context can be created
    """
    app = QApplication.instance() or QApplication(sys.argv)

    fmt = QSurfaceFormat()
    fmt.setVersion(2, 1)
    fmt.setProfile(QSurfaceFormat.OpenGLContextProfile.CompatibilityProfile)
    fmt.setDepthBufferSize(24)
    fmt.setSamples(4)
    QSurfaceFormat.setDefaultFormat(fmt)

    window = QMainWindow()
    window.setWindowTitle(title)
    viewer = WarehouseViewer(placements, bounds, window, factor=factor, oldest=oldest)
    window.setCentralWidget(viewer)
    window.resize(1000, 600)
    window.show()

    if not viewer.isValid():
        raise RenderError("OpenGL context could not be created")

    return app.exec()
