# qwstabs/core/tab_cache.py

from __future__ import annotations

from typing import Dict, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class TabCache(Generic[T]):
    """
    Bidirectional title <-> child index for cached tabs.

    Both directions are only ever changed together. The cache never owns
    the children; the tab container does.
    """

    def __init__(self) -> None:
        self._title_to_child: Dict[str, T] = {}
        self._child_to_title: Dict[T, str] = {}

    def bind(self, title: str, child: T) -> None:
        """
        Register title <-> child. Last write wins: a stale child under the
        same title, or a stale title for the same child, is dropped.
        """
        old_child = self._title_to_child.get(title)
        if old_child is not None and old_child is not child:
            self._child_to_title.pop(old_child, None)

        old_title = self._child_to_title.get(child)
        if old_title is not None and old_title != title:
            self._title_to_child.pop(old_title, None)

        self._title_to_child[title] = child
        self._child_to_title[child] = title

    def unbind_child(self, child: T) -> Optional[str]:
        """Forget the child; returns its title, or None if it was never cached."""
        title = self._child_to_title.pop(child, None)
        if title is not None:
            self._title_to_child.pop(title, None)
        return title

    def discard_titles(self, titles: Iterable[str]) -> List[T]:
        """
        Forget several titles at once; returns the children that were dropped.

        The reverse table is rebuilt from the surviving entries, so the
        dropped children are never hashed again (they may already be dead).
        """
        dropped = [self._title_to_child.pop(t) for t in titles if t in self._title_to_child]
        if dropped:
            self._child_to_title = {
                child: title
                for child, title in self._child_to_title.items()
                if not any(child is d for d in dropped)
            }
        return dropped

    def child_for(self, title: str) -> Optional[T]:
        return self._title_to_child.get(title)

    def title_for(self, child: T) -> Optional[str]:
        return self._child_to_title.get(child)

    def has_title(self, title: str) -> bool:
        return title in self._title_to_child

    def titles(self) -> List[str]:
        return list(self._title_to_child)

    def clear(self) -> None:
        self._title_to_child.clear()
        self._child_to_title.clear()

    def __contains__(self, title: object) -> bool:
        return title in self._title_to_child

    def __len__(self) -> int:
        return len(self._title_to_child)

    def __iter__(self) -> Iterator[str]:
        return iter(self.titles())
