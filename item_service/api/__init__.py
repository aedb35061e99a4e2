"""HTTP API for the Item Service."""

from item_service.api.app import create_app

__all__ = ["create_app"]
