from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Set

from librarycatalog.table import render_table
from librarycatalog.types import LibraryItem, T

logger = logging.getLogger(__name__)

# "no filter"; None stays usable as a category value
ALL_CATEGORIES: Any = object()


class ItemNotFoundError(KeyError):
    def __init__(self, item_id: str) -> None:
        super().__init__(item_id)
        self.item_id = item_id

    def __str__(self) -> str:
        return f"Item with ID {self.item_id} does not exist."


class Catalog(Generic[T]):
    """
    In-memory catalog keyed by item id.

    The catalog is the only owner of the items it holds; removing an item
    drops the catalog's last reference to it.
    """

    def __init__(self) -> None:
        self._items: Dict[str, LibraryItem[T]] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __iter__(self) -> Iterator[LibraryItem[T]]:
        return iter(self._items.values())

    def add_item(self, item: LibraryItem[T]) -> None:
        # same id replaces the previous entry
        self._items[item.item_id] = item
        logger.info("Added item %s (%s)", item.item_id, item.title)

    def remove_item(self, item_id: str) -> None:
        if item_id not in self._items:
            raise ItemNotFoundError(item_id)
        del self._items[item_id]
        logger.info("Removed item %s", item_id)

    def get_item(self, item_id: str) -> Optional[LibraryItem[T]]:
        return self._items.get(item_id)

    def has_item(self, item_id: str) -> bool:
        return item_id in self._items

    def has_items(self) -> bool:
        return bool(self._items)

    def get_categories(self) -> Set[T]:
        return {it.category for it in self._items.values()}

    def iter_items(self, category: Any = ALL_CATEGORIES) -> Iterator[LibraryItem[T]]:
        """
        Yields every item, or only those whose category equals `category`
        when one is given.
        Order follows the backing dict; callers that need a stable order sort.
        """
        for it in self:
            if category is ALL_CATEGORIES or it.category == category:
                yield it

    def display_catalog(
        self,
        category: Any = ALL_CATEGORIES,
        write: Callable[[str], object] = print,
    ) -> List[LibraryItem[T]]:
        shown = list(self.iter_items(category))
        for line in render_table(shown):
            write(line)
        return shown
