# ui/shell_window.py
from __future__ import annotations

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QToolBar, QLineEdit,
    QPlainTextEdit, QListWidget, QStatusBar,
)
from PySide6.QtGui import QAction, QKeySequence

from qwstabs.app_info import APP_VERSION
from qwstabs.core import AppContext, SettingsManager
from .tab_panel import TabPanel


class ShellWindow(QMainWindow):
    """
    Host window around a TabPanel.

    Editor tabs are never cached. Searches and error reports go through
    TabPanel.openTab(), so running the same search twice focuses the tab
    that is already open.
    """

    def __init__(
        self,
        ctx: AppContext | None = None,
        settings_manager: SettingsManager | None = None,
        parent=None,
    ):
        super().__init__(parent)

        if settings_manager is not None:
            self.settings_manager = settings_manager
        elif ctx is not None and ctx.settings_manager is not None:
            self.settings_manager = ctx.settings_manager
        else:
            self.settings_manager = SettingsManager()

        if ctx is None or ctx.settings_manager is not self.settings_manager:
            ctx = AppContext(qt_app=ctx.qt_app if ctx else None, settings_manager=self.settings_manager)
        self.ctx = ctx

        self._editor_counter = 0

        self.setWindowTitle(f"QWSTabs v{APP_VERSION}")
        self.resize(
            int(self.settings_manager.get("window_width", 1024)),
            int(self.settings_manager.get("window_height", 768)),
        )

        self._setup_ui()
        self.settings_manager.log_system_event("Shell window ready", f"v{APP_VERSION}")

    def _setup_ui(self):
        self._create_menu()

        central = QWidget(self)
        self.setCentralWidget(central)
        vbox = QVBoxLayout(central)
        vbox.setContentsMargins(0, 0, 0, 0)

        # --- Search bar ---------------------------------------------------
        toolbar = QToolBar("Search", self)
        self.search_input = QLineEdit(toolbar)
        self.search_input.setPlaceholderText("Search open editors…")
        self.search_input.returnPressed.connect(self.run_search)
        toolbar.addWidget(self.search_input)
        vbox.addWidget(toolbar)

        # --- Tabs ---------------------------------------------------------
        self.tab_panel: TabPanel = self.ctx.new_tab_panel(self)
        self.tab_panel.tabRemoved.connect(
            lambda title: self.show_status(f"Closed '{title}'")
        )
        vbox.addWidget(self.tab_panel)

        self.status_bar = QStatusBar(self)
        vbox.addWidget(self.status_bar)

        self.new_editor()

    def _create_menu(self):
        file_menu = self.menuBar().addMenu("&File")

        new_editor = QAction("New &Editor", self)
        new_editor.setShortcut(QKeySequence.New)
        new_editor.triggered.connect(self.new_editor)
        file_menu.addAction(new_editor)

        close_tab = QAction("&Close Tab", self)
        close_tab.setShortcut(QKeySequence.Close)
        close_tab.triggered.connect(self.close_current_tab)
        file_menu.addAction(close_tab)

        file_menu.addSeparator()

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

    # ------------------------------------------------------------------
    def new_editor(self, checked: bool = False) -> int:
        """Open a fresh editor tab; editors are never redirected."""
        self._editor_counter += 1
        title = f"Untitled {self._editor_counter}"
        self.tab_panel.addTab(title, QPlainTextEdit())
        index = self.tab_panel.getTabCount() - 1
        self.tab_panel.setSelectedTab(index)
        return index

    def close_current_tab(self, checked: bool = False):
        self.tab_panel.closeSelectedTab()

    def run_search(self) -> int:
        """
        Search the text of every open editor for the query in the search bar.

        Returns:
            Index of the results tab (or of the error tab for an empty query)
        """
        query = self.search_input.text().strip()
        if not query:
            return self.report_error("Empty search query")

        return self.tab_panel.openTab(
            f"Search {query}",
            lambda: self._build_search_results(query),
        )

    def report_error(self, message: str) -> int:
        self.show_status(message, level="ERROR")
        return self.tab_panel.openTab(
            f"Error: {message}",
            lambda: self._build_error_report(message),
        )

    def _build_search_results(self, query: str) -> QWidget:
        results = QListWidget()
        for i in range(self.tab_panel.getTabCount()):
            pane = self.tab_panel.tabWidget().widget(i)
            if not isinstance(pane, QPlainTextEdit) or pane.isReadOnly():
                continue
            for line_no, line in enumerate(pane.toPlainText().splitlines(), start=1):
                if query in line:
                    results.addItem(f"{self.tab_panel.getTitleAt(i)}:{line_no}: {line.strip()}")
        if results.count() == 0:
            results.addItem(f"No matches for '{query}'")
        return results

    def _build_error_report(self, message: str) -> QWidget:
        report = QPlainTextEdit()
        report.setPlainText(message)
        report.setReadOnly(True)
        return report

    def show_status(self, message: str, timeout_ms: int = 5000, level: str = "INFO"):
        """
        Show a transient message in the status bar and log it.
        level: "INFO" | "ERROR"
        """
        if hasattr(self, "status_bar"):
            self.status_bar.showMessage(message, timeout_ms)

        if level == "ERROR":
            self.settings_manager.log_error("shell_window", message)
        else:
            self.settings_manager.log_info("shell_window", message)
