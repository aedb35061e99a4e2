"""Base repository interfaces for the Item Service.

Implements Repository pattern with Dependency Inversion principle.
The batch processor and the routes depend on ItemRepository only;
Supabase-backed repositories also inherit from BaseRepository.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from item_service.infrastructure.database.client import SupabaseClient
from item_service.infrastructure.database.models import Item

T = TypeVar("T")


class ItemRepository(ABC):
    """Item Store contract.

    Methods are blocking; callers running inside the event loop dispatch
    them onto the worker pool. Store failures raise ItemStoreError.
    """

    @abstractmethod
    def list_ids(self) -> List[int]:
        """Return the identifiers of every stored item."""

    @abstractmethod
    def fetch(self, item_id: int) -> Optional[Item]:
        """Load one item, None if it does not exist."""

    @abstractmethod
    def upsert(self, item: Item) -> Item:
        """Insert or replace an item and return its persisted form."""

    @abstractmethod
    def find_all(self) -> List[Item]:
        """Return every stored item."""

    @abstractmethod
    def delete(self, item_id: int) -> bool:
        """Delete an item. Returns False if it did not exist."""

    def exists(self, item_id: int) -> bool:
        """Check whether an item exists."""
        return self.fetch(item_id) is not None


class BaseRepository(ABC, Generic[T]):
    """Abstract base repository for Supabase table operations.

    Provides dependency inversion - depend on repository interface, not concrete tables.
    """

    def __init__(self):
        """Initialize repository with Supabase client."""
        self._client: SupabaseClient = SupabaseClient()

    @property
    def db(self):
        """Get Supabase client instance."""
        return self._client.client

    @abstractmethod
    def table_name(self) -> str:
        """Return the table name this repository manages."""
        pass
