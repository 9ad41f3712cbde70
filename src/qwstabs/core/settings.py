from __future__ import annotations

from pathlib import Path
import json
import os
from typing import Any, Dict, Optional

# Single source of truth for app identity & paths
from qwstabs.app_info import settings_path, log_dir

from .log_manager import LogManager
from .predicates import DEFAULT_CACHE_MARKERS, CachePredicate, marker_predicate


class SettingsManager:
    """
    App settings stored as JSON, merged over defaults, plus the logger.

    Pass ``settings_file`` / ``logs_dir`` to keep everything out of the
    per-user QStandardPaths locations (tests do this).
    """

    def __init__(self, settings_file: Optional[Path] = None, logs_dir: Optional[Path] = None) -> None:
        # ----- locations ---------------------------------------------------
        self.settings_path: Path = Path(settings_file) if settings_file else settings_path()
        self.logs_dir: Path = Path(logs_dir) if logs_dir else log_dir()

        # ----- Defaults ----------------------------------------------------
        self.default_settings: Dict[str, Any] = {
            "window_width": 1024,
            "window_height": 768,
            "logging_enabled": True,
            "log_tab_actions": True,

            # titles containing any of these reuse their tab instead of opening a new one
            "cache_markers": list(DEFAULT_CACHE_MARKERS),
            "movable_tabs": False,
        }

        # ----- Load settings JSON, merged with defaults --------------------
        self._load_error: Optional[str] = None
        self.settings: Dict[str, Any] = self._load_settings()

        # ----- Logging -----------------------------------------------------
        self.log_manager: Optional[LogManager] = None
        if self.settings.get("logging_enabled", True):
            try:
                self.log_manager = LogManager(self.logs_dir)
            except OSError:
                self.log_manager = None  # don't crash if the log dir is unusable

        if self._load_error:
            self.log_error("SettingsManager", f"Ignoring unreadable settings file: {self._load_error}")

    # ----------------------------------------------------------------------
    # Generic access
    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.settings[key] = value

    # ----------------------------------------------------------------------
    # Public getters
    def cache_predicate(self) -> CachePredicate:
        markers = self.settings.get("cache_markers")
        if not isinstance(markers, (list, tuple)):
            markers = ()
        return marker_predicate(markers)

    def movable_tabs(self) -> bool:
        return bool(self.settings.get("movable_tabs", False))

    # ----------------------------------------------------------------------
    # Logging shims (so calls work even if LogManager is None)
    def log_tab_action(self, action: str, tab_title: Optional[str] = None, note: str = "") -> None:
        if self.log_manager and self.settings.get("log_tab_actions", True):
            self.log_manager.log_tab_action(action, tab_title, note)

    def log_cache_event(self, action: str, tab_title: Optional[str] = None, note: str = "") -> None:
        if self.log_manager and self.settings.get("log_tab_actions", True):
            self.log_manager.log_cache_event(action, tab_title, note)

    def log_info(self, where: str, message: str) -> None:
        if self.log_manager:
            self.log_manager.log(f"[{where}] {message}", "INFO")

    def log_error(self, where: str, message: str) -> None:
        if self.log_manager:
            self.log_manager.log_error(message, where)

    def log_system_event(self, event: str, details: str = "") -> None:
        if self.log_manager:
            self.log_manager.log_system_event(event, details)

    def get_log_file_path(self) -> Optional[Path]:
        if self.log_manager:
            return self.log_manager.log_path
        return None

    # ----------------------------------------------------------------------
    # Settings IO
    def _load_settings(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.settings_path.exists():
            try:
                loaded = json.loads(self.settings_path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                self._load_error = str(e)
            else:
                if isinstance(loaded, dict):
                    data = loaded
                else:
                    self._load_error = "top-level JSON value is not an object"

        merged = dict(self.default_settings)
        merged.update(data)
        return merged

    def save_settings(self) -> bool:
        """Persist settings atomically; return True on success."""
        try:
            self.settings_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.settings_path.with_suffix(".tmp")

            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(self.settings, f, indent=2)
                f.flush()
                os.fsync(f.fileno())

            tmp_path.replace(self.settings_path)
        except OSError as e:
            self.log_error("SettingsManager", f"Failed to save settings to file: {e}")
            return False

        self.log_info("SettingsManager", f"Settings saved to {self.settings_path}")
        return True
