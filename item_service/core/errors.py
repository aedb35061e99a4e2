"""Error taxonomy for the Item Service.

Per-item errors (ItemNotFoundError, ItemStoreError) are caught at the unit
boundary inside a batch. BatchError subclasses are the only failures a
batch surfaces to its caller.
"""

from typing import Any, Optional


class ItemServiceError(Exception):
    """Base class for all Item Service errors."""


class ItemNotFoundError(ItemServiceError):
    """Raised when an item does not exist at fetch time."""

    def __init__(self, item_id: Any):
        self.item_id = item_id
        super().__init__(f"Item {item_id} not found")


class ItemStoreError(ItemServiceError):
    """Raised when the backing store fails an operation."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"Item store {operation} failed: {detail}")


class BatchError(ItemServiceError):
    """Batch-level hard failure. No partial result accompanies it."""

    def __init__(self, message: str, batch_id: Optional[str] = None):
        self.batch_id = batch_id
        super().__init__(message)


class BatchListingError(BatchError):
    """Listing the batch identifiers failed; nothing was processed."""


class BatchAggregationError(BatchError):
    """The wait-for-all barrier did not complete."""
