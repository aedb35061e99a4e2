"""FastAPI dependencies for the Item Service.

Dependency injection functions for route handlers. Everything is read from
app.state, which the application lifespan populates.
"""

from fastapi import Request

from item_service.core.batch import BatchItemProcessor, WorkerPool
from item_service.infrastructure.database.repositories import ItemRepository


def get_repository(request: Request) -> ItemRepository:
    """Get the item store from app state."""
    return request.app.state.repository


def get_worker_pool(request: Request) -> WorkerPool:
    """Get the service-lifetime worker pool from app state."""
    return request.app.state.worker_pool


def get_processor(request: Request) -> BatchItemProcessor:
    """Get the batch item processor from app state."""
    return request.app.state.processor
