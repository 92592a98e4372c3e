from PySide6 import QtCore, QtWidgets

from bezedit.widgets import CanvasWidget
from bezedit.menu.tools import AlgorithmSelectorWidget


class Bar(QtWidgets.QToolBar):
    def __init__(self, canvas: CanvasWidget):
        super().__init__()

        self.canvas = canvas
        self.setObjectName("Bar")
        self.setMovable(False)
        self.setFloatable(False)
        self.setIconSize(QtCore.QSize(18, 18))

        self.reset_button = QtWidgets.QPushButton("reset")
        self.grid_button = QtWidgets.QPushButton("grid (G)")
        self.grid_button.setCheckable(True)
        self.boxes_button = QtWidgets.QPushButton("boxes (B)")
        self.boxes_button.setCheckable(True)
        self.algorithm_selector = AlgorithmSelectorWidget(self.canvas.editor.mode)
        self.points_label = QtWidgets.QLabel()

        # the canvas keeps keyboard focus for the B/G/M shortcuts
        for w in (self.reset_button, self.grid_button, self.boxes_button, self.algorithm_selector.select_box):
            w.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)

        self.addWidget(self.reset_button)
        self.addWidget(self.grid_button)
        self.addWidget(self.boxes_button)
        self.addWidget(self.algorithm_selector)
        self.addSeparator()
        self.addWidget(self.points_label)

        self.reset_button.clicked.connect(self.canvas.clear)
        self.grid_button.clicked.connect(self.canvas.toggle_grid)
        self.boxes_button.clicked.connect(self.canvas.toggle_boxes)
        self.algorithm_selector.mode_changed.connect(self.canvas.set_mode)
        self.canvas.flagsChanged.connect(self.refresh)
        self.canvas.pointsChanged.connect(self.refresh_points)
        self.refresh()
        self.refresh_points()

    @QtCore.Slot()
    def refresh(self):
        editor = self.canvas.editor
        for button, checked in ((self.grid_button, editor.show_grid), (self.boxes_button, editor.show_boxes)):
            button.blockSignals(True)
            button.setChecked(checked)
            button.blockSignals(False)
        self.algorithm_selector.set_mode(editor.mode)
        self.canvas.setFocus()

    @QtCore.Slot()
    def refresh_points(self):
        points = self.canvas.editor.points
        self.points_label.setText(f"points: {len(points)}  segments: {points.segment_count()}")
