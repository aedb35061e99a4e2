"""In-memory items repository for local development and tests."""

import threading
from typing import Dict, Iterable, List, Optional

from item_service.infrastructure.database.models import Item
from item_service.infrastructure.database.repositories.base import ItemRepository


class InMemoryItemRepository(ItemRepository):
    """Thread-safe dict-backed item store.

    Ids are assigned from a counter starting at 1 and never reused.
    Items are copied in and out so callers never hold the stored instance.
    """

    def __init__(self, items: Optional[Iterable[Item]] = None):
        self._lock = threading.Lock()
        self._items: Dict[int, Item] = {}
        self._next_id = 1
        for item in items or []:
            self.upsert(item)

    def list_ids(self) -> List[int]:
        with self._lock:
            return sorted(self._items)

    def fetch(self, item_id: int) -> Optional[Item]:
        with self._lock:
            item = self._items.get(item_id)
            return item.copy() if item else None

    def upsert(self, item: Item) -> Item:
        with self._lock:
            if item.id is None:
                stored = item.copy(id=self._next_id)
            else:
                stored = item.copy()
            self._next_id = max(self._next_id, stored.id + 1)
            self._items[stored.id] = stored
            return stored.copy()

    def find_all(self) -> List[Item]:
        with self._lock:
            return [self._items[key].copy() for key in sorted(self._items)]

    def delete(self, item_id: int) -> bool:
        with self._lock:
            return self._items.pop(item_id, None) is not None

    def clear(self) -> None:
        """Remove every item. Id counter keeps counting."""
        with self._lock:
            self._items.clear()
