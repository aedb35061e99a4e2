"""Request ID middleware for the Item Service."""

import uuid

import structlog
from fastapi import Request


async def request_id_middleware(request: Request, call_next):
    """Add unique request ID to each request and response headers."""
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    # Bind into structured logging context for everything this request logs
    with structlog.contextvars.bound_contextvars(request_id=request_id):
        response = await call_next(request)

    response.headers["X-Request-ID"] = request_id
    return response
