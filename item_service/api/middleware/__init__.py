"""Middleware for the Item Service."""

from item_service.api.middleware.request_id import request_id_middleware

__all__ = ["request_id_middleware"]
