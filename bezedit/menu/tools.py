from PySide6 import QtWidgets
from PySide6.QtCore import Qt, Signal

from bezedit.core import AlgorithmMode


class AlgorithmSelectorWidget(QtWidgets.QWidget):

    mode_changed = Signal(AlgorithmMode)

    def __init__(self, mode: AlgorithmMode = AlgorithmMode.BERNSTEIN):
        super().__init__()

        self.select_box = QtWidgets.QComboBox()
        for m in AlgorithmMode:
            self.select_box.addItem(m.value, m.name)
        self.text = QtWidgets.QLabel("Algorithm: ")
        self.layout = QtWidgets.QHBoxLayout(self)

        self.layout.addWidget(self.text, alignment=Qt.AlignmentFlag.AlignLeft)
        self.layout.addWidget(self.select_box, alignment=Qt.AlignmentFlag.AlignLeft)

        self.set_mode(mode)
        self.select_box.currentTextChanged.connect(self._on_mode_changed)

    @property
    def mode(self) -> AlgorithmMode:
        return AlgorithmMode[self.select_box.currentData()]

    def set_mode(self, mode: AlgorithmMode) -> None:
        idx = self.select_box.findData(mode.name)
        if idx != self.select_box.currentIndex():
            self.select_box.blockSignals(True)
            self.select_box.setCurrentIndex(idx)
            self.select_box.blockSignals(False)

    def _on_mode_changed(self, text: str):
        self.mode_changed.emit(AlgorithmMode(text))
