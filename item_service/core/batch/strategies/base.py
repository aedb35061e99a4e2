"""Base batch processing strategy for the Item Service.

Defines strategy interface following Strategy pattern (Open/Closed principle).
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, List

from item_service.core.batch.models import BatchResult, ItemOutcome

# One unit of work: item id in, outcome out. Units never raise.
ItemUnit = Callable[[int], Awaitable[ItemOutcome]]


class BatchStrategy(ABC):
    """Abstract base class for batch processing strategies.

    Different strategies implement different execution approaches:
    - ConcurrentBatchStrategy: Dispatches every unit at once and joins on all of them
    - SequentialBatchStrategy: Runs units one by one (fallback)

    Every strategy returns only after all units have finished, and keeps
    outcomes in identifier-listing order.
    """

    mode: str = ""

    @abstractmethod
    async def execute(
        self,
        batch_id: str,
        item_ids: List[int],
        unit: ItemUnit,
    ) -> BatchResult:
        """Execute batch processing using this strategy.

        Args:
            batch_id: Unique batch identifier
            item_ids: Identifiers making up the batch
            unit: Coroutine function processing one identifier

        Returns:
            BatchResult with execution summary and processed items
        """
        pass
