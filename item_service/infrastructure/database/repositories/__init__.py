"""Repository implementations for the Item Service.

Implements Repository pattern with Dependency Inversion principle.
"""

from item_service.config import config
from item_service.infrastructure.database.repositories.base import (
    BaseRepository,
    ItemRepository,
)
from item_service.infrastructure.database.repositories.items import SupabaseItemRepository
from item_service.infrastructure.database.repositories.memory import InMemoryItemRepository


def get_item_repository() -> ItemRepository:
    """Build the item store selected by ITEM_STORE_BACKEND."""
    if config.store_backend() == "supabase":
        return SupabaseItemRepository()
    return InMemoryItemRepository()


__all__ = [
    "BaseRepository",
    "ItemRepository",
    "SupabaseItemRepository",
    "InMemoryItemRepository",
    "get_item_repository",
]
