"""Base Pydantic models for the Item Service - DRY principle applied.

These base models are inherited by endpoint-specific models to avoid field duplication.
"""

from pydantic import BaseModel, EmailStr, Field

from item_service.infrastructure.database.models import ItemStatus


class BaseItemModel(BaseModel):
    """Base model for endpoints accepting an item body."""
    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Short display label"
    )
    description: str = Field(
        "",
        max_length=1000,
        description="Free text description"
    )
    status: str = Field(
        ItemStatus.PENDING.value,
        min_length=1,
        description="Lifecycle status (e.g., 'PENDING', 'PROCESSED')"
    )
    email: EmailStr = Field(
        ...,
        description="Contact email address (validated with email-validator)"
    )
