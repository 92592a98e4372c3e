import sys

from PySide6 import QtCore, QtWidgets

from bezedit.logging_config import setup_logging
from bezedit.menu import Bar
from bezedit.widgets import CanvasWidget


class MyWidget(QtWidgets.QWidget):
    def __init__(self):
        super().__init__()

        self.layout = QtWidgets.QVBoxLayout(self)

        self.canvas = CanvasWidget(parent=self)
        self.top_bar = Bar(self.canvas)

        self.layout.addWidget(self.top_bar, alignment=QtCore.Qt.AlignmentFlag.AlignTop)
        self.layout.addWidget(self.canvas, stretch=1)
        self.canvas.setFocus()


def main() -> int:
    setup_logging()
    app = QtWidgets.QApplication(sys.argv)

    widget = MyWidget()
    widget.setWindowTitle("Bezier editor")
    widget.resize(800, 600)
    widget.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
