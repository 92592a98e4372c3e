from PySide6 import QtCore, QtGui, QtWidgets

from bezedit.core import (
    AlgorithmMode, Editor, EditorConfig, DEFAULT_CONFIG, EventKind, InputEvent, Point, Scene, SceneBuilder,
)
from bezedit.core.math import BLUE, GOLD, GREEN, RED, YELLOW
from bezedit.core.config import MARKER_RADIUS


def qpoint_to_point(p: QtCore.QPointF) -> Point:
    return float(p.x()), float(p.y())


def point_to_qpoint(p: Point) -> QtCore.QPointF:
    return QtCore.QPointF(p[0], p[1])


_KEY_TOGGLES = {
    QtCore.Qt.Key.Key_B: EventKind.TOGGLE_BOUNDING_BOXES,
    QtCore.Qt.Key.Key_G: EventKind.TOGGLE_GRID,
    QtCore.Qt.Key.Key_M: EventKind.TOGGLE_ALGORITHM,
}


class CanvasWidget(QtWidgets.QWidget):
    """
    View/controller for an Editor.
    Translates Qt input into InputEvents and paints the Scene built from the editor.
      - left button: add / drag, right button: delete
      - B: bounding boxes, G: grid, M: algorithm
    """

    pointsChanged = QtCore.Signal()     # emitted when control points are added/moved/removed
    flagsChanged = QtCore.Signal()      # emitted when mode / grid / box visibility changes

    def __init__(self, editor: Editor | None = None, config: EditorConfig = DEFAULT_CONFIG, parent=None):
        super().__init__(parent)
        self._editor = editor or Editor(config)
        self._builder = SceneBuilder(self._editor.config)

        self.setMouseTracking(True)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)
        self.setAutoFillBackground(True)
        pal = self.palette()
        pal.setColor(QtGui.QPalette.ColorRole.Window, QtGui.QColor(0, 0, 0))
        self.setPalette(pal)

    # --- public API -------------------------
    @property
    def editor(self) -> Editor:
        return self._editor

    def scene(self) -> Scene:
        return self._builder.build(self._editor, (float(self.width()), float(self.height())))

    def dispatch(self, event: InputEvent) -> None:
        revision = self._editor.revision
        flags = (self._editor.mode, self._editor.show_grid, self._editor.show_boxes)
        self._editor.handle(event)
        if self._editor.revision != revision:
            self.pointsChanged.emit()
        if (self._editor.mode, self._editor.show_grid, self._editor.show_boxes) != flags:
            self.flagsChanged.emit()
        self.update()

    @QtCore.Slot()
    def toggle_algorithm(self):
        self.dispatch(InputEvent(EventKind.TOGGLE_ALGORITHM))

    @QtCore.Slot()
    def toggle_grid(self):
        self.dispatch(InputEvent(EventKind.TOGGLE_GRID))

    @QtCore.Slot()
    def toggle_boxes(self):
        self.dispatch(InputEvent(EventKind.TOGGLE_BOUNDING_BOXES))

    def set_mode(self, mode: AlgorithmMode) -> None:
        if self._editor.mode is not mode:
            self.toggle_algorithm()

    @QtCore.Slot()
    def clear(self):
        self._editor.clear()
        self.pointsChanged.emit()
        self.update()

    # --- size hints -------------------------
    def sizeHint(self):
        return QtCore.QSize(800, 450)

    def minimumSizeHint(self):
        return QtCore.QSize(200, 200)

    # --- Qt events --------------------------
    def mousePressEvent(self, e: QtGui.QMouseEvent):
        pos = qpoint_to_point(e.position())
        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            self.dispatch(InputEvent(EventKind.PRIMARY_PRESSED, pos))
        elif e.button() == QtCore.Qt.MouseButton.RightButton:
            self.dispatch(InputEvent(EventKind.SECONDARY_PRESSED, pos))

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        self.dispatch(InputEvent(EventKind.MOVED, qpoint_to_point(e.position())))
        hovering = self._editor.drag_index is not None or self._editor.hovered() is not None
        self.setCursor(QtCore.Qt.CursorShape.SizeAllCursor if hovering else QtCore.Qt.CursorShape.CrossCursor)

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            self.dispatch(InputEvent(EventKind.PRIMARY_RELEASED, qpoint_to_point(e.position())))

    def keyPressEvent(self, e: QtGui.QKeyEvent):
        try:
            kind = _KEY_TOGGLES.get(QtCore.Qt.Key(e.key()))
        except ValueError:
            kind = None
        if kind is None or e.isAutoRepeat():
            super().keyPressEvent(e)
            return
        self.dispatch(InputEvent(kind))

    # --- painting ---------------------------
    def _draw_grid(self, painter: QtGui.QPainter, scene: Scene):
        painter.setPen(QtGui.QPen(GREEN.to_QColor(), 1.0))
        for a, b in scene.grid:
            painter.drawLine(point_to_qpoint(a), point_to_qpoint(b))
        painter.setPen(QtGui.QPen(YELLOW.to_QColor(), 1.0))
        for a, b in scene.axes:
            painter.drawLine(point_to_qpoint(a), point_to_qpoint(b))
        if scene.origin is not None:
            painter.setBrush(YELLOW.to_QColor())
            painter.drawEllipse(point_to_qpoint(scene.origin), MARKER_RADIUS, MARKER_RADIUS)

    def _draw_controls(self, painter: QtGui.QPainter, scene: Scene):
        for seg in scene.segments:
            for a, b in seg.handles:
                painter.setPen(QtGui.QPen(QtGui.QColor(255, 255, 255, 120), 1.0, QtCore.Qt.PenStyle.DashLine))
                painter.drawLine(point_to_qpoint(a), point_to_qpoint(b))

        r = self._editor.config.pick_radius
        for marker in scene.markers:
            color = marker.color.to_QColor()
            painter.setBrush(color)
            outline = QtGui.QColor(255, 255, 255) if (marker.hovered or marker.dragged) else color
            painter.setPen(QtGui.QPen(outline, 1.5))
            painter.drawEllipse(point_to_qpoint(marker.position), r, r)

    def _draw_curves(self, painter: QtGui.QPainter, scene: Scene):
        for seg in scene.segments:
            pts = seg.polyline
            for i in range(len(pts) - 1):
                painter.setPen(QtGui.QPen(seg.colors[i].to_QColor(), 2.0))
                painter.drawLine(point_to_qpoint(pts[i]), point_to_qpoint(pts[i + 1]))

    def _draw_boxes(self, painter: QtGui.QPainter, scene: Scene):
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        if scene.show_boxes:
            painter.setPen(QtGui.QPen(QtGui.QColor(255, 255, 255, 60), 1.0, QtCore.Qt.PenStyle.DotLine))
            for seg in scene.segments:
                box = seg.control_bounds
                painter.drawRect(QtCore.QRectF(box.min[0], box.min[1], box.width, box.height))

        painter.setPen(QtGui.QPen(BLUE.to_QColor(), 1.0))
        for box in scene.regular_boxes:
            x0, y0 = box.min
            painter.drawRect(QtCore.QRectF(x0, y0, box.width, box.height))

        for box in scene.tight_boxes:
            painter.setPen(QtGui.QPen(GOLD.to_QColor(), 1.0))
            painter.drawPolygon(QtGui.QPolygonF([point_to_qpoint(c) for c in box.corners]))
            painter.setPen(QtCore.Qt.PenStyle.NoPen)
            painter.setBrush(RED.to_QColor())
            for c in box.corners:
                painter.drawEllipse(point_to_qpoint(c), MARKER_RADIUS * 0.5, MARKER_RADIUS * 0.5)
            painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)

    def paintEvent(self, _):
        scene = self.scene()
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)

        # order matters: grid below everything, boxes on top
        if scene.show_grid:
            self._draw_grid(p, scene)
        self._draw_controls(p, scene)
        self._draw_curves(p, scene)
        self._draw_boxes(p, scene)

        p.setPen(QtGui.QPen(YELLOW.to_QColor()))
        p.drawText(QtCore.QPointF(10.0, 20.0), f"Algorithm: {scene.mode.value}")
        p.end()
