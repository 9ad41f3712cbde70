# ui/tab_panel.py
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

import shiboken6
from PySide6.QtWidgets import QWidget, QTabWidget, QVBoxLayout
from PySide6.QtCore import QEvent, QObject, Qt, Signal

from ..core.predicates import CachePredicate, should_cache
from ..core.tab_cache import TabCache

if TYPE_CHECKING:
    from ..core.settings import SettingsManager


class _TabContainer(QTabWidget):
    """
    QTabWidget that reports every removal, including ones TabPanel did not
    ask for (removeTab() on the raw widget, a page being destroyed).
    """

    pageRemoved = Signal(int)

    def tabRemoved(self, index: int) -> None:
        super().tabRemoved(index)
        self.pageRemoved.emit(index)


class TabPanel(QWidget):
    """
    Wrapper around QTabWidget adding tab removal and redirection.

    Handles:
    - Closing the selected tab on a middle-button release over the tabs
    - A title <-> pane cache for "singleton" tabs (error reports, search
      results) so callers can focus an existing tab instead of duplicating it
    """

    tabRemoved = Signal(str)  # title of the removed tab

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        settings_manager: Optional['SettingsManager'] = None,
        cacheable: Optional[CachePredicate] = None,
    ):
        """
        Args:
            parent: Parent widget
            settings_manager: Optional settings (predicate markers, movable tabs, logging)
            cacheable: Predicate deciding which titles are cached; overrides settings
        """
        super().__init__(parent)
        self.settings_manager = settings_manager

        if cacheable is None:
            cacheable = settings_manager.cache_predicate() if settings_manager else should_cache
        self._cacheable: CachePredicate = cacheable
        self._cache: TabCache[QWidget] = TabCache()

        self.tabs = _TabContainer(self)
        self.tabs.setTabPosition(QTabWidget.North)
        self.tabs.setUsesScrollButtons(True)
        self.tabs.setElideMode(Qt.ElideNone)
        self.tabs.setMovable(bool(settings_manager and settings_manager.movable_tabs()))

        # The tab strip and the empty area beside it react to the close gesture
        self._tab_bar = self.tabs.tabBar()
        self._tab_bar.installEventFilter(self)
        self.tabs.installEventFilter(self)

        self.tabs.pageRemoved.connect(self._drop_stale_entries)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.tabs)

    def tabWidget(self) -> QTabWidget:
        """The wrapped QTabWidget."""
        return self.tabs

    # ------------------------------------------------------------------
    # Adding and looking up tabs
    def addTab(self, title: str, pane: QWidget) -> None:
        """
        Add a tab at the end of the tab bar.

        Cacheable titles are registered for redirection, replacing any stale
        entry for the same title. Callers should check hasCached() first if
        they do not want a second tab with that title.

        Args:
            title: The tab's title
            pane: The widget filling the new tab's viewport
        """
        index = self.tabs.addTab(pane, title)
        cached = self.shouldCache(title)
        if cached:
            self._cache.bind(title, pane)
        self._log("Added", title, f"(index={index}, cached={cached})")

    def shouldCache(self, title: str) -> bool:
        """
        Whether a tab with this title is cached for redirection instead of
        being duplicated.
        """
        return bool(self._cacheable(title))

    def getChild(self, title: str) -> Optional[QWidget]:
        """Cached pane for the title, or None."""
        return self._cache.child_for(title)

    def hasCached(self, title: str) -> bool:
        """True if a tab with this title exists and is available for redirection."""
        return self._cache.has_title(title)

    def getCachedIndex(self, title: str) -> int:
        """
        Index of the cached tab with the given title, or -1.

        The position is looked up in the live tab bar every time; the cache
        never stores indexes, so reordered tabs are still found.
        """
        for i in range(self.getTabCount()):
            if self._cache.title_for(self.tabs.widget(i)) == title:
                return i
        return -1

    def openTab(self, title: str, factory: Callable[[], QWidget]) -> int:
        """
        Focus the cached tab for ``title`` if there is one, otherwise create
        the pane with ``factory``, add it and focus it.

        Returns:
            Index of the selected tab
        """
        if self.hasCached(title):
            index = self.getCachedIndex(title)
            if index >= 0:
                self.setSelectedTab(index)
                self._log_cache("Redirected", title, f"(index={index})")
                return index

        self.addTab(title, factory())
        index = self.getTabCount() - 1
        self.setSelectedTab(index)
        return index

    # ------------------------------------------------------------------
    # Pass-through to QTabWidget
    def getTabCount(self) -> int:
        return self.tabs.count()

    def getSelectedTab(self) -> int:
        return self.tabs.currentIndex()

    def getTitleAt(self, index: int) -> str:
        return self.tabs.tabText(index)

    def setSelectedTab(self, index: int) -> None:
        self.tabs.setCurrentIndex(index)

    # ------------------------------------------------------------------
    # Removal
    def closeTab(self, index: int) -> None:
        """
        Remove the tab at ``index`` and drop its cache entry, if any.

        Args:
            index: Tab index to close
        """
        if not 0 <= index < self.tabs.count():
            return

        pane = self.tabs.widget(index)
        title = self.tabs.tabText(index)

        self._cache.unbind_child(pane)
        self.tabs.removeTab(index)
        if pane is not None:
            pane.deleteLater()

        self._log("Closed", title, f"(index={index})")
        self.tabRemoved.emit(title)

    def closeSelectedTab(self) -> None:
        index = self.getSelectedTab()
        if index >= 0:
            self.closeTab(index)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        # Only close tabs when middle-clicked
        if (
            (watched is self._tab_bar or watched is self.tabs)
            and event.type() == QEvent.MouseButtonRelease
            and event.button() == Qt.MiddleButton
        ):
            self.closeSelectedTab()
            return True
        return super().eventFilter(watched, event)

    def _drop_stale_entries(self, index: int = -1) -> None:
        """Forget cached titles whose pane was deleted or left the container."""
        stale = [
            title for title in self._cache.titles()
            if not shiboken6.isValid(self._cache.child_for(title))
            or self.tabs.indexOf(self._cache.child_for(title)) < 0
        ]
        if stale:
            self._cache.discard_titles(stale)
            for title in stale:
                self._log_cache("Dropped", title, f"(removed outside TabPanel, index={index})")

    # snake_case aliases
    add_tab = addTab
    open_tab = openTab
    should_cache = shouldCache
    get_child = getChild
    has_cached = hasCached
    get_cached_index = getCachedIndex
    get_tab_count = getTabCount
    get_selected_tab = getSelectedTab
    get_title_at = getTitleAt
    set_selected_tab = setSelectedTab
    close_tab = closeTab
    close_selected_tab = closeSelectedTab

    def _log(self, action: str, title: str, details: str = "") -> None:
        if self.settings_manager:
            self.settings_manager.log_tab_action(action, title, details)

    def _log_cache(self, action: str, title: str, details: str = "") -> None:
        if self.settings_manager:
            self.settings_manager.log_cache_event(action, title, details)
