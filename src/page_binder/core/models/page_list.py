"""
Module: page_list

Purpose:
    Ordered, mutable collection of page sources. Insertion order is page
    order. Duplicates are allowed.

Key Classes:
    - PageList: add/remove/move operations plus an immutable snapshot

Used By:
    - cli: builds the list from command line arguments
    - Callers assembling a document interactively
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Tuple

from .sources import PageSource

logger = logging.getLogger(__name__)


class PageList:
    """
    Ordered page sources for one document.

    Must not be mutated while an export is running. The exporter never
    reads the list directly; pass ``snapshot()`` (or the list itself, which
    the exporter snapshots on entry).

    Example:
        >>> pages = PageList()
        >>> pages.extend([FilePageSource("a.png"), FilePageSource("b.png")])
        >>> pages.move(1, 0)
        >>> [p.identity for p in pages]
        ['b.png', 'a.png']
    """

    def __init__(self, sources: Iterable[PageSource] = ()) -> None:
        self._items: List[PageSource] = []
        self.extend(sources)

    def add(self, source: PageSource) -> None:
        """Append a source at the end of the list."""
        if not isinstance(source, PageSource):
            raise TypeError(f"Expected PageSource, got {type(source).__name__}")
        self._items.append(source)

    def extend(self, sources: Iterable[PageSource]) -> None:
        for source in sources:
            self.add(source)

    def remove(self, index: int) -> PageSource:
        """Remove and return the source at ``index``."""
        self._check_index(index)
        return self._items.pop(index)

    def move(self, from_index: int, to_index: int) -> None:
        """
        Move a source to a new position.

        Same semantics as dragging a row: the item is removed at
        ``from_index`` and re-inserted at ``to_index`` of the shortened
        list.

        Raises:
            IndexError: If either index is out of range
        """
        self._check_index(from_index)
        self._check_index(to_index)
        if from_index == to_index:
            return
        item = self._items.pop(from_index)
        self._items.insert(to_index, item)
        logger.debug(f"Moved {item.identity} from {from_index} to {to_index}")

    def clear(self) -> None:
        self._items.clear()

    def snapshot(self) -> Tuple[PageSource, ...]:
        """Immutable copy of the current order."""
        return tuple(self._items)

    def _check_index(self, index: int) -> None:
        # Negative indices are rejected; positions come from a UI or CLI
        if not 0 <= index < len(self._items):
            raise IndexError(f"Page index out of range: {index} (size {len(self._items)})")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[PageSource]:
        return iter(self._items)

    def __getitem__(self, index: int) -> PageSource:
        return self._items[index]

    def __repr__(self) -> str:
        return f"PageList({len(self._items)} pages)"
