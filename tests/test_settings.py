import json

from qwstabs.core.context import AppContext
from qwstabs.core.settings import SettingsManager


def test_defaults_without_file(settings_manager):
    assert settings_manager.get("cache_markers") == ["Error: ", "Search "]
    assert settings_manager.get("movable_tabs") is False
    assert settings_manager.movable_tabs() is False
    assert settings_manager.log_manager is not None


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"cache_markers": ["Log "], "window_width": 640}), encoding="utf-8")

    sm = SettingsManager(settings_file=path, logs_dir=tmp_path / "log")

    assert sm.get("window_width") == 640
    assert sm.get("window_height") == 768
    predicate = sm.cache_predicate()
    assert predicate("Log 1")
    assert not predicate("Search x")


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    sm = SettingsManager(settings_file=path, logs_dir=tmp_path / "log")

    assert sm.get("cache_markers") == ["Error: ", "Search "]
    log_text = sm.get_log_file_path().read_text(encoding="utf-8")
    assert "Ignoring unreadable settings file" in log_text


def test_invalid_markers_use_default_rule(settings_manager):
    settings_manager.set("cache_markers", "Error: ")
    predicate = settings_manager.cache_predicate()

    assert predicate("Error: y")
    assert predicate("Search x")
    assert not predicate("Normal")


def test_save_and_reload(tmp_path):
    path = tmp_path / "nested" / "settings.json"
    sm = SettingsManager(settings_file=path, logs_dir=tmp_path / "log")
    sm.set("movable_tabs", True)

    assert sm.save_settings()
    assert json.loads(path.read_text(encoding="utf-8"))["movable_tabs"] is True
    assert SettingsManager(settings_file=path, logs_dir=tmp_path / "log").movable_tabs()


def test_logging_disabled(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"logging_enabled": False}), encoding="utf-8")

    sm = SettingsManager(settings_file=path, logs_dir=tmp_path / "log")
    sm.log_tab_action("Added", "Search x")

    assert sm.log_manager is None
    assert sm.get_log_file_path() is None


def test_context_create(tmp_path):
    ctx = AppContext.create(settings_file=tmp_path / "s.json", logs_dir=tmp_path / "log")

    assert isinstance(ctx.settings_manager, SettingsManager)
    assert ctx.qt_app is None


def test_context_builds_configured_tab_panels(qapp, tmp_path):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"cache_markers": ["Trace "]}), encoding="utf-8")
    ctx = AppContext.create(settings_file=path, logs_dir=tmp_path / "log")

    panel = ctx.new_tab_panel()

    assert ctx.tab_panels == [panel]
    assert panel.settings_manager is ctx.settings_manager
    assert panel.shouldCache("Trace 1")
    assert not panel.shouldCache("Search x")
