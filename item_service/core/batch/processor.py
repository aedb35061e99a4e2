"""Batch item processor for the Item Service.

Marks every stored item as PROCESSED in one batch run.
"""

import asyncio
import secrets
import time
from typing import Dict, Optional

from item_service.config import config
from item_service.core.batch.models import BatchResult, ItemOutcome
from item_service.core.batch.pool import WorkerPool
from item_service.core.batch.strategies import (
    BatchStrategy,
    ConcurrentBatchStrategy,
    SequentialBatchStrategy,
)
from item_service.core.errors import (
    BatchAggregationError,
    BatchListingError,
    ItemNotFoundError,
)
from item_service.core.logging import logger
from item_service.infrastructure.database.models import Item, ItemStatus
from item_service.infrastructure.database.repositories.base import ItemRepository


class BatchItemProcessor:
    """Orchestrates a batch run over every item in the store.

    The batch is the id list read once at the start of process_all(). Each id
    gets one unit of work (fetch, set status, upsert) on the shared worker
    pool. Per-item failures are recorded and excluded from the result; only
    a failed listing or an incomplete barrier fails the batch.
    """

    def __init__(
        self,
        repository: ItemRepository,
        pool: WorkerPool,
        strategy: Optional[BatchStrategy] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize batch processor.

        Args:
            repository: Item store to read from and write to
            pool: Worker pool owned by the service lifetime
            strategy: Execution strategy (defaults to ITEM_PROCESSING_MODE)
            timeout: Seconds to wait for all units (defaults to ITEM_BATCH_TIMEOUT_SECONDS)
        """
        self.repository = repository
        self.pool = pool

        # Register available strategies
        self.strategies: Dict[str, BatchStrategy] = {
            "concurrent": ConcurrentBatchStrategy(),
            "sequential": SequentialBatchStrategy(),
        }
        self.strategy = strategy or self.strategies[config.processing_mode()]
        self.timeout = timeout if timeout is not None else config.batch_timeout_seconds()

    async def process_all(self, batch_id: Optional[str] = None) -> BatchResult:
        """Process every item currently in the store.

        Args:
            batch_id: Optional batch ID (generated if not provided)

        Returns:
            BatchResult whose items are the successfully saved items,
            in identifier-listing order

        Raises:
            BatchListingError: If the identifiers could not be listed
            BatchAggregationError: If the units did not all finish in time
        """
        if batch_id is None:
            batch_id = f"batch_{int(time.time() * 1000)}_{secrets.token_urlsafe(8)}"

        try:
            item_ids = list(await self.pool.run(self.repository.list_ids))
        except Exception as e:
            logger.error("batch_listing_failed", batch_id=batch_id, error=str(e))
            raise BatchListingError(f"Could not list item ids: {e}", batch_id=batch_id) from e

        logger.info(
            "batch_processing_started",
            batch_id=batch_id,
            total=len(item_ids),
            strategy=type(self.strategy).__name__,
        )

        async def unit(item_id: int) -> ItemOutcome:
            return await self._process_item(batch_id, item_id)

        try:
            if self.timeout:
                result = await asyncio.wait_for(
                    self.strategy.execute(batch_id, item_ids, unit), timeout=self.timeout
                )
            else:
                result = await self.strategy.execute(batch_id, item_ids, unit)
        except asyncio.TimeoutError as e:
            logger.error(
                "batch_aggregation_timeout",
                batch_id=batch_id,
                total=len(item_ids),
                timeout=self.timeout,
            )
            raise BatchAggregationError(
                f"Batch did not complete within {self.timeout}s", batch_id=batch_id
            ) from e

        logger.info(
            "batch_processing_completed",
            batch_id=batch_id,
            successful=result.successful,
            failed=result.failed,
            processing_time=result.processing_time_seconds,
        )

        return result

    async def _process_item(self, batch_id: str, item_id: int) -> ItemOutcome:
        """Run one unit of work. Never raises for item-level failures."""
        try:
            saved = await self.pool.run(self._mark_processed, item_id)
        except Exception as e:
            logger.warning(
                "item_processing_failed",
                batch_id=batch_id,
                item_id=item_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return ItemOutcome.failure(item_id, e)

        logger.debug("item_processed", batch_id=batch_id, item_id=item_id)
        return ItemOutcome.success(item_id, saved)

    def _mark_processed(self, item_id: int) -> Item:
        # runs on a pool thread
        item = self.repository.fetch(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)

        item.status = ItemStatus.PROCESSED.value
        return self.repository.upsert(item)
