"""Batch processing module for the Item Service.

Provides orchestration for batch item processing using Strategy pattern.

Components:
- BatchItemProcessor: Main orchestrator
- WorkerPool: Service-lifetime thread pool for store calls
- BatchResult / ItemOutcome: Type-safe result models
- BatchStrategy: Strategy interface
- ConcurrentBatchStrategy: Concurrent execution with a wait-for-all barrier
- SequentialBatchStrategy: Sequential execution fallback
"""

from item_service.core.batch.models import BatchResult, ItemOutcome
from item_service.core.batch.pool import WorkerPool
from item_service.core.batch.processor import BatchItemProcessor
from item_service.core.batch.strategies import (
    BatchStrategy,
    ConcurrentBatchStrategy,
    SequentialBatchStrategy,
)

__all__ = [
    "BatchItemProcessor",
    "BatchResult",
    "ItemOutcome",
    "WorkerPool",
    "BatchStrategy",
    "ConcurrentBatchStrategy",
    "SequentialBatchStrategy",
]
