"""Database models for the Item Service.

Type-safe dataclasses representing database records.
"""

from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional


class ItemStatus(str, Enum):
    """Lifecycle tags for an item.

    - PENDING: Created, not yet processed
    - PROCESSED: Touched by a batch run
    """

    PENDING = "PENDING"
    PROCESSED = "PROCESSED"


@dataclass
class Item:
    """Represents a record in the items table."""

    id: Optional[int]
    name: str
    description: str
    status: str
    email: str

    def to_record(self) -> Dict[str, Any]:
        """Serialize to a table row. Omits id until the store assigns one."""
        record = asdict(self)
        if record["id"] is None:
            del record["id"]
        return record

    @classmethod
    def from_record(cls, row: Dict[str, Any]) -> "Item":
        """Build an Item from a table row."""
        return cls(
            id=row.get("id"),
            name=row.get("name", ""),
            description=row.get("description", ""),
            status=row.get("status", ItemStatus.PENDING.value),
            email=row.get("email", ""),
        )

    def copy(self, **changes: Any) -> "Item":
        """Return a detached copy, optionally with changed fields."""
        return replace(self, **changes)
