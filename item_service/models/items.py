"""Item-related Pydantic models for the Item Service.

These models handle creating and updating items.
"""

from typing import Optional

from item_service.infrastructure.database.models import Item
from item_service.models.base import BaseItemModel


class ItemCreateRequest(BaseItemModel):
    """Request for POST /api/items endpoint - create item."""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Item 1",
                    "description": "First item",
                    "status": "PENDING",
                    "email": "owner@example.com"
                }
            ]
        }
    }

    def to_item(self, item_id: Optional[int] = None) -> Item:
        """Build the domain item, optionally bound to an existing id."""
        return Item(
            id=item_id,
            name=self.name,
            description=self.description,
            status=self.status,
            email=self.email,
        )


class ItemUpdateRequest(ItemCreateRequest):
    """Request for PUT /api/items/{item_id} endpoint - replace item.

    Any id in the body is ignored; the path id wins.
    """
    id: Optional[int] = None
