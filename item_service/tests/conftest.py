"""Shared fixtures for Item Service tests."""

import threading
import time

import pytest

from item_service.core.batch import WorkerPool
from item_service.core.errors import ItemStoreError
from item_service.infrastructure.database.models import Item, ItemStatus
from item_service.infrastructure.database.repositories import InMemoryItemRepository


class FaultyItemRepository(InMemoryItemRepository):
    """In-memory store with injectable failures and latency.

    - fail_list: list_ids raises ItemStoreError
    - fail_fetch / fail_upsert: ids whose fetch / upsert raises ItemStoreError
    - ghost_ids: ids returned by list_ids that no longer exist
    - delays: per-id seconds to sleep inside fetch
    """

    def __init__(self, items=None, fail_list=False, fail_fetch=(), fail_upsert=(),
                 ghost_ids=(), delays=None):
        self._calls_lock = threading.Lock()
        self.fail_upsert = set()
        self.upsert_calls = 0
        super().__init__(items)
        # seeding does not count
        self.upsert_calls = 0
        self.fetch_calls = 0
        self.fail_list = fail_list
        self.fail_fetch = set(fail_fetch)
        self.fail_upsert = set(fail_upsert)
        self.ghost_ids = list(ghost_ids)
        self.delays = dict(delays or {})

    def list_ids(self):
        if self.fail_list:
            raise ItemStoreError("list_ids", "connection refused")
        return super().list_ids() + self.ghost_ids

    def fetch(self, item_id):
        with self._calls_lock:
            self.fetch_calls += 1
        delay = self.delays.get(item_id)
        if delay:
            time.sleep(delay)
        if item_id in self.fail_fetch:
            raise ItemStoreError("fetch", "DB error")
        return super().fetch(item_id)

    def upsert(self, item):
        with self._calls_lock:
            self.upsert_calls += 1
        if item.id in self.fail_upsert:
            raise ItemStoreError("upsert", "write rejected")
        return super().upsert(item)


def make_items(count, status=ItemStatus.PENDING.value):
    """Build unsaved items named Item1..ItemN."""
    return [
        Item(
            id=None,
            name=f"Item{n}",
            description="Desc",
            status=status,
            email=f"user{n}@example.com",
        )
        for n in range(1, count + 1)
    ]


@pytest.fixture
def faulty_repository():
    """Factory for FaultyItemRepository seeded with `count` pending items."""
    def factory(count=0, **kwargs):
        return FaultyItemRepository(make_items(count), **kwargs)
    return factory


@pytest.fixture
def pool():
    """Worker pool torn down after each test."""
    with WorkerPool(size=4) as worker_pool:
        yield worker_pool
