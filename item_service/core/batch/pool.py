"""Worker pool for batch item processing.

Wraps a fixed-size ThreadPoolExecutor that runs blocking item store calls
off the event loop. One pool lives for the whole service lifetime: it is
created at startup, injected into the processor, and shut down on exit.
"""

import asyncio
import contextvars
import functools
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Optional

from item_service.config import config
from item_service.core.logging import logger


class WorkerPool:
    """Fixed-size thread pool shared across batch invocations."""

    def __init__(self, size: Optional[int] = None):
        """Initialize worker pool.

        Args:
            size: Number of worker threads (defaults to ITEM_WORKER_POOL_SIZE)
        """
        self.size = size or config.worker_pool_size()
        self._executor = ThreadPoolExecutor(
            max_workers=self.size, thread_name_prefix="item-worker"
        )
        self._closed = False

        logger.info("worker_pool_started", size=self.size)

    @property
    def closed(self) -> bool:
        return self._closed

    async def run(self, fn: Callable[..., Any], *args: Any) -> Any:
        """Run a blocking callable on the pool and await its result.

        Raises:
            RuntimeError: If the pool has been shut down
        """
        if self._closed:
            raise RuntimeError("Worker pool is shut down")

        # carry structlog contextvars (request_id) into the worker thread
        loop = asyncio.get_running_loop()
        ctx = contextvars.copy_context()
        return await loop.run_in_executor(
            self._executor, functools.partial(ctx.run, fn, *args)
        )

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work and release the worker threads."""
        if self._closed:
            return
        self._closed = True
        self._executor.shutdown(wait=wait)
        logger.info("worker_pool_stopped", size=self.size)

    def __enter__(self) -> "WorkerPool":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()
