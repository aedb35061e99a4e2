"""Pydantic models for the Item Service.

All models are organized by domain:
- base: Base models for inheritance (DRY)
- items: Item create and update requests
"""

# Base models
from item_service.models.base import BaseItemModel

# Item models
from item_service.models.items import ItemCreateRequest, ItemUpdateRequest

__all__ = [
    # Base models
    "BaseItemModel",
    # Items
    "ItemCreateRequest",
    "ItemUpdateRequest",
]
