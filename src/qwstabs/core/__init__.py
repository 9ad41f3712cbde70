from .context import AppContext
from .settings import SettingsManager
from .tab_cache import TabCache
from .predicates import DEFAULT_CACHE_MARKERS, marker_predicate, should_cache

__all__ = [
    "AppContext",
    "SettingsManager",
    "TabCache",
    "DEFAULT_CACHE_MARKERS",
    "marker_predicate",
    "should_cache",
]
