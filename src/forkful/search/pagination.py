"""Incremental reveal of a result list."""

from __future__ import annotations

import logging
from typing import Generic, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")

DEFAULT_PAGE_SIZE = 3


class PaginationWindow(Generic[ItemT]):
    """Reveal a growing prefix of a list, one page at a time.

    The window is tied to one list object; handing it a different list via
    `sync()` resets it to the first page.
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE, items: Optional[Sequence[ItemT]] = None) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size
        self._items: Sequence[ItemT] = items if items is not None else ()
        self._visible = page_size

    @property
    def total_count(self) -> int:
        return len(self._items)

    @property
    def visible_count(self) -> int:
        return min(self._visible, self.total_count)

    @property
    def has_more(self) -> bool:
        return self.visible_count < self.total_count

    def sync(self, items: Sequence[ItemT]) -> bool:
        """Point the window at `items`; returns True when that caused a reset."""

        if items is self._items:
            return False
        self._items = items
        self.reset()
        return True

    def reset(self) -> None:
        self._visible = self.page_size

    def load_more(self) -> int:
        """Reveal the next page; a no-op once everything is visible."""

        if self.has_more:
            self._visible = min(self._visible + self.page_size, self.total_count)
            logger.debug("Revealed %d of %d results", self._visible, self.total_count)
        return self.visible_count

    def visible(self) -> List[ItemT]:
        return list(self._items[: self.visible_count])


__all__ = ["DEFAULT_PAGE_SIZE", "PaginationWindow"]
