"""Items repository for the Item Service.

Handles storage and retrieval of items in the Supabase items table.
"""

from typing import List, Optional

from item_service.config import config
from item_service.core.errors import ItemStoreError
from item_service.core.logging import logger
from item_service.infrastructure.database.models import Item
from item_service.infrastructure.database.repositories.base import (
    BaseRepository,
    ItemRepository,
)


class SupabaseItemRepository(BaseRepository[Item], ItemRepository):
    """Repository for items table operations.

    Every client failure is logged and re-raised as ItemStoreError so a
    failed listing can fail the batch instead of looking like an empty store.
    """

    def table_name(self) -> str:
        """Return table name."""
        return config.items_table()

    def list_ids(self) -> List[int]:
        try:
            result = self.db.table(self.table_name()).select("id").order("id").execute()
        except Exception as e:
            logger.error("item_list_ids_failed", error=str(e))
            raise ItemStoreError("list_ids", str(e)) from e

        return [row["id"] for row in result.data or []]

    def fetch(self, item_id: int) -> Optional[Item]:
        """Get an item by ID.

        Args:
            item_id: Item ID

        Returns:
            Item or None if not found
        """
        try:
            result = (
                self.db.table(self.table_name())
                .select("*")
                .eq("id", item_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error("item_fetch_failed", item_id=item_id, error=str(e))
            raise ItemStoreError("fetch", str(e)) from e

        if not result.data:
            return None

        return Item.from_record(result.data[0])

    def upsert(self, item: Item) -> Item:
        """Insert or update an item.

        Args:
            item: Item to persist (id None means insert)

        Returns:
            Persisted Item with store-assigned fields
        """
        try:
            result = self.db.table(self.table_name()).upsert(item.to_record()).execute()
        except Exception as e:
            logger.error("item_upsert_failed", item_id=item.id, error=str(e))
            raise ItemStoreError("upsert", str(e)) from e

        if not result.data:
            raise ItemStoreError("upsert", "no row returned")

        saved = Item.from_record(result.data[0])
        logger.debug("item_upserted", item_id=saved.id, status=saved.status)
        return saved

    def find_all(self) -> List[Item]:
        try:
            result = self.db.table(self.table_name()).select("*").order("id").execute()
        except Exception as e:
            logger.error("item_find_all_failed", error=str(e))
            raise ItemStoreError("find_all", str(e)) from e

        return [Item.from_record(row) for row in result.data or []]

    def delete(self, item_id: int) -> bool:
        try:
            result = self.db.table(self.table_name()).delete().eq("id", item_id).execute()
        except Exception as e:
            logger.error("item_delete_failed", item_id=item_id, error=str(e))
            raise ItemStoreError("delete", str(e)) from e

        deleted = bool(result.data)
        if deleted:
            logger.info("item_deleted", item_id=item_id)
        return deleted
