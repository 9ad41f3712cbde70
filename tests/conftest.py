import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QEvent, QPointF, QStandardPaths, Qt
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QApplication

# keep settings/log files out of the real user profile
QStandardPaths.setTestModeEnabled(True)


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def settings_manager(tmp_path):
    from qwstabs.core.settings import SettingsManager

    return SettingsManager(settings_file=tmp_path / "settings.json", logs_dir=tmp_path / "log")


@pytest.fixture
def release():
    """Deliver a mouse-button release to a widget through Qt's event filters."""
    def _release(widget, button):
        event = QMouseEvent(
            QEvent.MouseButtonRelease,
            QPointF(5, 5),
            QPointF(5, 5),
            button,
            Qt.NoButton,
            Qt.NoModifier,
        )
        return QApplication.sendEvent(widget, event)

    return _release
