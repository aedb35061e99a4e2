"""Concurrent batch processing strategy for the Item Service.

Uses asyncio.gather() as the wait-for-all barrier over every unit of work.
"""

import asyncio
import time
from typing import List

from item_service.core.batch.models import BatchResult, ItemOutcome
from item_service.core.batch.strategies.base import BatchStrategy, ItemUnit
from item_service.core.logging import logger


class ConcurrentBatchStrategy(BatchStrategy):
    """Concurrent batch processing strategy.

    Dispatches one unit per item id at once. The units themselves run their
    store calls on the bounded worker pool, which caps real parallelism.
    """

    mode = "concurrent"

    async def execute(
        self,
        batch_id: str,
        item_ids: List[int],
        unit: ItemUnit,
    ) -> BatchResult:
        """Execute batch using concurrent processing.

        Args:
            batch_id: Unique batch identifier
            item_ids: Identifiers making up the batch
            unit: Coroutine function processing one identifier

        Returns:
            BatchResult with execution summary and processed items
        """
        start_time = time.time()

        logger.info(
            "concurrent_batch_started",
            batch_id=batch_id,
            total=len(item_ids),
            strategy=self.mode,
        )

        # gather keeps submission order; return_exceptions keeps the barrier
        # intact if a unit breaks its no-raise contract
        results = await asyncio.gather(
            *[unit(item_id) for item_id in item_ids],
            return_exceptions=True,
        )

        outcomes = []
        for item_id, result in zip(item_ids, results):
            if isinstance(result, BaseException):
                logger.error(
                    "item_unit_crashed",
                    batch_id=batch_id,
                    item_id=item_id,
                    error=str(result),
                )
                result = ItemOutcome.failure(item_id, result)
            outcomes.append(result)

        total_time = time.time() - start_time
        batch = BatchResult.create(
            batch_id=batch_id,
            outcomes=outcomes,
            processing_time=total_time,
            processing_mode=self.mode,
        )

        logger.info(
            "concurrent_batch_completed",
            batch_id=batch_id,
            successful=batch.successful,
            failed=batch.failed,
            processing_time=round(total_time, 2),
        )

        return batch
