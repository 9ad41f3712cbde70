# qwstabs/core/predicates.py
"""
Cacheability rules: which tab titles act as reusable slots.
"""

from __future__ import annotations

from typing import Callable, Iterable

CachePredicate = Callable[[str], bool]

# Error report tabs and search result tabs must not multiply per invocation.
DEFAULT_CACHE_MARKERS = ("Error: ", "Search ")


def should_cache(title: str) -> bool:
    """True if the title contains "Error: " or "Search "."""
    return any(marker in title for marker in DEFAULT_CACHE_MARKERS)


def marker_predicate(markers: Iterable[str]) -> CachePredicate:
    """
    Build a substring predicate from a list of markers.

    Empty markers are ignored. With no usable markers the default rule
    (should_cache) is returned.
    """
    usable = tuple(m for m in markers if isinstance(m, str) and m)
    if not usable:
        return should_cache

    def _predicate(title: str) -> bool:
        return any(marker in title for marker in usable)

    return _predicate
