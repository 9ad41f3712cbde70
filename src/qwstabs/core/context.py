# qwstabs/core/context.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from qwstabs.core.settings import SettingsManager

if TYPE_CHECKING:
    from PySide6.QtWidgets import QWidget
    from qwstabs.ui.tab_panel import TabPanel


@dataclass
class AppContext:
    """
    Shared objects for one running application: the Qt app, its settings,
    and every TabPanel built through new_tab_panel().
    """

    qt_app: Optional[Any] = None
    settings_manager: Optional[SettingsManager] = None
    tab_panels: list = field(default_factory=list)

    @classmethod
    def create(cls, qt_app: Any | None = None, **settings_kwargs: Any) -> "AppContext":
        """Context with a fresh SettingsManager (kwargs go to SettingsManager)."""
        return cls(qt_app=qt_app, settings_manager=SettingsManager(**settings_kwargs))

    def new_tab_panel(self, parent: "QWidget | None" = None) -> "TabPanel":
        """TabPanel using this context's cache markers, tab settings and logger."""
        from qwstabs.ui.tab_panel import TabPanel

        panel = TabPanel(parent, settings_manager=self.settings_manager)
        self.tab_panels.append(panel)
        return panel
