"""Infrastructure modules for the Item Service.

- Database: Supabase client singleton and repository pattern for items
"""

from item_service.infrastructure.database import (
    BaseRepository,
    InMemoryItemRepository,
    Item,
    ItemRepository,
    ItemStatus,
    SupabaseClient,
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
