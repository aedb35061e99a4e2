"""Sequential batch processing strategy for the Item Service.

Processes items one by one sequentially. Fallback strategy for reliability.
"""

import time
from typing import List

from item_service.core.batch.models import BatchResult
from item_service.core.batch.strategies.base import BatchStrategy, ItemUnit
from item_service.core.logging import logger


class SequentialBatchStrategy(BatchStrategy):
    """Sequential batch processing strategy.

    Processes items one by one in listing order. Useful against stores that
    do not tolerate concurrent writers.
    """

    mode = "sequential"

    async def execute(
        self,
        batch_id: str,
        item_ids: List[int],
        unit: ItemUnit,
    ) -> BatchResult:
        """Execute batch using sequential processing.

        Args:
            batch_id: Unique batch identifier
            item_ids: Identifiers making up the batch
            unit: Coroutine function processing one identifier

        Returns:
            BatchResult with execution summary and processed items
        """
        start_time = time.time()

        logger.info(
            "sequential_batch_started",
            batch_id=batch_id,
            total=len(item_ids),
            strategy=self.mode,
        )

        outcomes = []
        for item_id in item_ids:
            outcomes.append(await unit(item_id))

        total_time = time.time() - start_time
        batch = BatchResult.create(
            batch_id=batch_id,
            outcomes=outcomes,
            processing_time=total_time,
            processing_mode=self.mode,
        )

        logger.info(
            "sequential_batch_completed",
            batch_id=batch_id,
            successful=batch.successful,
            failed=batch.failed,
            processing_time=round(total_time, 2),
        )

        return batch
