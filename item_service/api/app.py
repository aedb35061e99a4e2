"""FastAPI application factory for the Item Service."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from item_service.api.middleware import request_id_middleware
from item_service.api.routes import items, system
from item_service.config import config
from item_service.core.batch import BatchItemProcessor, WorkerPool
from item_service.core.errors import ItemStoreError
from item_service.core.logging import logger
from item_service.infrastructure.database.repositories import (
    ItemRepository,
    get_item_repository,
)


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Join validation messages as 'field: message; field: message'."""
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{field}: {message}" if field else message)
    return "; ".join(messages)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Map request validation failures to 400 with joined messages."""
    error = _format_validation_errors(exc)
    logger.info("request_validation_failed", path=request.url.path, error=error)
    return JSONResponse(status_code=400, content={"success": False, "error": error})


async def store_exception_handler(request: Request, exc: ItemStoreError):
    """Map item store failures on CRUD routes to 500."""
    logger.error("item_store_error", path=request.url.path, operation=exc.operation, error=exc.detail)
    return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})


def create_app(
    repository: Optional[ItemRepository] = None,
    pool: Optional[WorkerPool] = None,
) -> FastAPI:
    """Create and configure FastAPI app. Factory pattern for testability.

    Args:
        repository: Item store (defaults to the backend chosen by config)
        pool: Worker pool; when injected the caller owns its shutdown
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_pool = pool is None
        worker_pool = pool or WorkerPool(config.worker_pool_size())
        store = repository or get_item_repository()

        app.state.repository = store
        app.state.worker_pool = worker_pool
        app.state.processor = BatchItemProcessor(store, worker_pool)

        logger.info(
            "item_service_started",
            store=type(store).__name__,
            pool_size=worker_pool.size,
        )
        try:
            yield
        finally:
            if owns_pool:
                worker_pool.shutdown()
            logger.info("item_service_stopped")

    app = FastAPI(
        title="item-service",
        description=(
            "CRUD API for items plus a batch endpoint that marks every stored "
            "item as PROCESSED concurrently."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware
    app.middleware("http")(request_id_middleware)

    # Error mapping
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ItemStoreError, store_exception_handler)

    # Register routes
    app.include_router(system.router)
    app.include_router(items.router)

    return app
