"""Batch processing strategies for the Item Service.

Strategy pattern implementation for different batch execution approaches.
"""

from item_service.core.batch.strategies.base import BatchStrategy, ItemUnit
from item_service.core.batch.strategies.concurrent_strategy import ConcurrentBatchStrategy
from item_service.core.batch.strategies.sequential_strategy import SequentialBatchStrategy

__all__ = [
    "BatchStrategy",
    "ItemUnit",
    "ConcurrentBatchStrategy",
    "SequentialBatchStrategy",
]
