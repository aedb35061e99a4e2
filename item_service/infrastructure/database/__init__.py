"""Database module for the Item Service.

Provides Supabase client singleton and repository pattern for item storage:
- SupabaseClient: one shared client instance
- ItemRepository: store contract used by routes and the batch processor
- Typed dataclasses instead of raw dicts
"""

from item_service.infrastructure.database.client import SupabaseClient
from item_service.infrastructure.database.models import Item, ItemStatus
from item_service.infrastructure.database.repositories import (
    BaseRepository,
    InMemoryItemRepository,
    ItemRepository,
    SupabaseItemRepository,
    get_item_repository,
)

__all__ = [
    "SupabaseClient",
    "Item",
    "ItemStatus",
    "BaseRepository",
    "ItemRepository",
    "InMemoryItemRepository",
    "SupabaseItemRepository",
    "get_item_repository",
]
