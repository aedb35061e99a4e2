"""System routes for the Item Service."""

import asyncio
from datetime import datetime
from typing import Any, Dict

from fastapi import APIRouter, Depends

from item_service.api.dependencies import get_repository, get_worker_pool
from item_service.config import config
from item_service.core.batch import WorkerPool
from item_service.infrastructure.database.repositories import ItemRepository

router = APIRouter(tags=["System"])


async def check_store(repo: ItemRepository, pool: WorkerPool) -> Dict[str, Any]:
    """Test item store connectivity. Returns dict with status and details."""
    try:
        ids = await asyncio.wait_for(pool.run(repo.list_ids), timeout=2.0)
        return {"status": "healthy", "backend": config.store_backend(), "items": len(ids)}
    except asyncio.TimeoutError:
        return {"status": "timeout", "error": "Request timed out after 2s"}
    except Exception as e:
        return {"status": "unavailable", "error": str(e)[:100]}


@router.get("/health")
async def health_check(
    repo: ItemRepository = Depends(get_repository),
    pool: WorkerPool = Depends(get_worker_pool),
):
    """Health check. Returns service status, version, worker pool and store health."""
    store_health = await check_store(repo, pool)

    return {
        "status": "healthy" if store_health.get("status") == "healthy" else "degraded",
        "service": "item-service",
        "version": "1.0.0",
        "worker_pool": {"size": pool.size, "closed": pool.closed},
        "dependencies": {"store": store_health},
        "missing_config": config.get_missing_config(),
        "timestamp": datetime.now().isoformat() + "Z",
    }
