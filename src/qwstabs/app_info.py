# src/qwstabs/app_info.py
# A dependency-free module that owns app metadata + standard paths.

from __future__ import annotations

from pathlib import Path
from PySide6.QtCore import QStandardPaths

# ---- App identity ---------------------------------------------------------
APP_ORG  = "codaland.com"
APP_NAME = "QWSTabs"
APP_ID   = f"{APP_ORG}.{APP_NAME}"

from . import __version__ as APP_VERSION  # defined in qwstabs/__init__.py


# ---- Standard locations (cross-platform) ----------------------------------
def app_dir(kind: QStandardPaths.StandardLocation) -> Path:
    """
    Returns a writable per-user directory for the app, e.g.
    - Windows: %APPDATA%/QWSTabs/codaland.com
    - macOS:   ~/Library/Application Support/QWSTabs/codaland.com
    - Linux:   ~/.local/share/QWSTabs/codaland.com (or ~/.config for AppConfigLocation)
    """
    base = Path(QStandardPaths.writableLocation(kind))
    path = base / APP_NAME / APP_ORG
    path.mkdir(parents=True, exist_ok=True)
    return path


def settings_path() -> Path:
    return app_dir(QStandardPaths.AppLocalDataLocation) / "settings.json"


def log_dir() -> Path:
    return app_dir(QStandardPaths.AppConfigLocation) / "log"
