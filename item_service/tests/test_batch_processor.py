"""Unit tests for BatchItemProcessor."""

import time

import pytest

from item_service.core.batch import (
    BatchItemProcessor,
    ConcurrentBatchStrategy,
    SequentialBatchStrategy,
)
from item_service.core.errors import BatchAggregationError, BatchListingError


def _processor(repo, pool, **kwargs):
    kwargs.setdefault("strategy", ConcurrentBatchStrategy())
    return BatchItemProcessor(repo, pool, **kwargs)


class TestProcessAllSuccess:
    """Test batches where every unit succeeds."""

    @pytest.mark.asyncio
    async def test_all_items_processed(self, faulty_repository, pool):
        """Test N items in store yield N processed items."""
        repo = faulty_repository(5)

        result = await _processor(repo, pool).process_all()

        assert len(result.items) == 5
        assert all(item.status == "PROCESSED" for item in result.items)
        assert result.successful == 5
        assert result.failed == 0
        assert result.status == "completed"
        assert result.processing_mode == "concurrent"
        assert repo.upsert_calls == 5

    @pytest.mark.asyncio
    async def test_store_reflects_updates(self, faulty_repository, pool):
        """Test the store holds the PROCESSED status afterwards."""
        repo = faulty_repository(3)

        await _processor(repo, pool).process_all()

        assert all(item.status == "PROCESSED" for item in repo.find_all())

    @pytest.mark.asyncio
    async def test_results_follow_listing_order(self, faulty_repository, pool):
        """Test results keep id order even when early ids finish last."""
        repo = faulty_repository(4, delays={1: 0.2, 2: 0.1})

        result = await _processor(repo, pool).process_all()

        assert [item.id for item in result.items] == [1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_only_status_changes(self, faulty_repository, pool):
        """Test processing keeps every other field intact."""
        repo = faulty_repository(1)
        before = repo.fetch(1)

        result = await _processor(repo, pool).process_all()

        after = result.items[0]
        assert after.id == before.id
        assert after.name == before.name
        assert after.description == before.description
        assert after.email == before.email

    @pytest.mark.asyncio
    async def test_twice_is_idempotent(self, faulty_repository, pool):
        """Test a second run yields the same items, still PROCESSED."""
        repo = faulty_repository(3)
        processor = _processor(repo, pool)

        first = await processor.process_all()
        second = await processor.process_all()

        assert [i.id for i in first.items] == [i.id for i in second.items]
        assert all(item.status == "PROCESSED" for item in second.items)
        assert len(repo.find_all()) == 3

    @pytest.mark.asyncio
    async def test_pool_reused_across_runs(self, faulty_repository, pool):
        """Test the processor does not shut the shared pool down."""
        repo = faulty_repository(2)
        processor = _processor(repo, pool)

        await processor.process_all()

        assert not pool.closed
        result = await processor.process_all()
        assert result.successful == 2


class TestProcessAllFailures:
    """Test per-item failure isolation."""

    @pytest.mark.asyncio
    async def test_fetch_failure_excluded(self, faulty_repository, pool):
        """Test one failing fetch yields N-1 items and no exception."""
        repo = faulty_repository(4, fail_fetch={2})

        result = await _processor(repo, pool).process_all()

        assert [item.id for item in result.items] == [1, 3, 4]
        assert None not in result.items
        assert result.failed == 1
        assert result.failures[0]["item_id"] == 2
        assert result.failures[0]["error_type"] == "ItemStoreError"
        assert result.status == "completed_with_errors"

    @pytest.mark.asyncio
    async def test_deleted_item_excluded(self, faulty_repository, pool):
        """Test an id deleted before its fetch is reported as not found."""
        repo = faulty_repository(2, ghost_ids=[99])

        result = await _processor(repo, pool).process_all()

        assert [item.id for item in result.items] == [1, 2]
        assert result.failures == [
            {"item_id": 99, "error": "Item 99 not found", "error_type": "ItemNotFoundError"}
        ]
        assert repo.upsert_calls == 2

    @pytest.mark.asyncio
    async def test_save_failure_excluded(self, faulty_repository, pool):
        """Test one failing save yields N-1 items and leaves that item untouched."""
        repo = faulty_repository(3, fail_upsert={3})

        result = await _processor(repo, pool).process_all()

        assert [item.id for item in result.items] == [1, 2]
        assert repo.fetch(3).status == "PENDING"

    @pytest.mark.asyncio
    async def test_all_failing_is_empty_success(self, faulty_repository, pool):
        """Test every unit failing gives an empty result, not an error."""
        repo = faulty_repository(3, fail_fetch={1, 2, 3})

        result = await _processor(repo, pool).process_all()

        assert result.items == []
        assert result.total == 3
        assert result.failed == 3

    @pytest.mark.asyncio
    async def test_empty_store(self, faulty_repository, pool):
        """Test an empty store yields an empty successful result."""
        repo = faulty_repository(0)

        result = await _processor(repo, pool).process_all()

        assert result.items == []
        assert result.total == 0
        assert result.status == "completed"

    @pytest.mark.asyncio
    async def test_listing_failure_raises(self, faulty_repository, pool):
        """Test a failed listing raises BatchListingError with zero writes."""
        repo = faulty_repository(3, fail_list=True)

        with pytest.raises(BatchListingError) as exc_info:
            await _processor(repo, pool).process_all(batch_id="batch_test")

        assert exc_info.value.batch_id == "batch_test"
        assert repo.fetch_calls == 0
        assert repo.upsert_calls == 0


class TestCompletionBarrier:
    """Test process_all waits for every unit."""

    @pytest.mark.asyncio
    async def test_slow_success_included(self, faulty_repository, pool):
        """Test a slow unit is still part of the result."""
        repo = faulty_repository(3, delays={2: 0.3})

        start = time.monotonic()
        result = await _processor(repo, pool).process_all()

        assert time.monotonic() - start >= 0.3
        assert [item.id for item in result.items] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_slow_failure_accounted(self, faulty_repository, pool):
        """Test a slow failing unit is waited for and then excluded."""
        repo = faulty_repository(3, delays={3: 0.3}, fail_fetch={3})

        start = time.monotonic()
        result = await _processor(repo, pool).process_all()

        assert time.monotonic() - start >= 0.3
        assert result.total == 3
        assert result.failed == 1
        assert [item.id for item in result.items] == [1, 2]

    @pytest.mark.asyncio
    async def test_units_run_concurrently(self, faulty_repository, pool):
        """Test wall-clock time tracks the slowest unit, not the sum."""
        repo = faulty_repository(4, delays={1: 0.3, 2: 0.3, 3: 0.3, 4: 0.3})

        start = time.monotonic()
        result = await _processor(repo, pool).process_all()

        assert time.monotonic() - start < 1.0
        assert result.successful == 4

    @pytest.mark.asyncio
    async def test_timeout_raises_aggregation_error(self, faulty_repository, pool):
        """Test exceeding the batch timeout fails the batch as a whole."""
        repo = faulty_repository(2, delays={2: 0.5})

        with pytest.raises(BatchAggregationError):
            await _processor(repo, pool, timeout=0.1).process_all()


class TestSequentialStrategy:
    """Test the sequential fallback has the same outcome semantics."""

    @pytest.mark.asyncio
    async def test_sequential_matches_concurrent(self, faulty_repository, pool):
        """Test sequential mode returns the same items and failures."""
        repo = faulty_repository(4, fail_fetch={3})

        result = await _processor(repo, pool, strategy=SequentialBatchStrategy()).process_all()

        assert [item.id for item in result.items] == [1, 2, 4]
        assert result.failed == 1
        assert result.processing_mode == "sequential"

    @pytest.mark.asyncio
    async def test_mode_from_config(self, faulty_repository, pool, monkeypatch):
        """Test ITEM_PROCESSING_MODE selects the strategy."""
        monkeypatch.setenv("ITEM_PROCESSING_MODE", "sequential")

        processor = BatchItemProcessor(faulty_repository(1), pool)

        assert isinstance(processor.strategy, SequentialBatchStrategy)
