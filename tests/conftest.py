"""Shared pytest fixtures for the bezedit test suite.

Fixtures:
    qapp: QApplication on the offscreen platform (skips without PySide6)
"""

import os
import sys
from pathlib import Path

import pytest

# Add repository root to path for imports when running without installing
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
