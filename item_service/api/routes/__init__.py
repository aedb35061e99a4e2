"""Routes for the Item Service."""

from item_service.api.routes import items, system

__all__ = ["items", "system"]
