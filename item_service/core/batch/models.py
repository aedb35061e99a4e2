"""Batch processing models for the Item Service.

Type-safe models for per-item outcomes and batch results.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from item_service.infrastructure.database.models import Item


@dataclass
class ItemOutcome:
    """Result of one unit of work (fetch, mark processed, save)."""

    item_id: int
    status: str  # 'success', 'error'
    item: Optional[Item] = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @classmethod
    def success(cls, item_id: int, item: Item) -> "ItemOutcome":
        return cls(item_id=item_id, status="success", item=item)

    @classmethod
    def failure(cls, item_id: int, error: BaseException) -> "ItemOutcome":
        return cls(
            item_id=item_id,
            status="error",
            error=str(error),
            error_type=type(error).__name__,
        )


@dataclass
class BatchResult:
    """Result of a batch processing run.

    items holds the saved items of successful units, in identifier-listing
    order. Failed units appear only in failures.
    """

    batch_id: str
    status: str  # 'completed', 'completed_with_errors'
    total: int
    successful: int
    failed: int
    processing_time_seconds: float
    processing_mode: str  # 'concurrent', 'sequential'
    items: List[Item] = field(default_factory=list)
    failures: List[Dict[str, Any]] = field(default_factory=list)
    timestamp: str = ""

    @classmethod
    def create(
        cls,
        batch_id: str,
        outcomes: List[ItemOutcome],
        processing_time: float,
        processing_mode: str,
    ) -> "BatchResult":
        """Factory method to aggregate unit outcomes with auto-generated timestamp."""
        items = [outcome.item for outcome in outcomes if outcome.ok]
        failures = [
            {"item_id": o.item_id, "error": o.error, "error_type": o.error_type}
            for o in outcomes
            if not o.ok
        ]
        status = "completed" if not failures else "completed_with_errors"

        return cls(
            batch_id=batch_id,
            status=status,
            total=len(outcomes),
            successful=len(items),
            failed=len(failures),
            processing_time_seconds=round(processing_time, 2),
            processing_mode=processing_mode,
            items=items,
            failures=failures,
            timestamp=datetime.now().isoformat() + "Z",
        )

    def summary(self) -> Dict[str, Any]:
        """Counts and timing without the item payloads."""
        return {
            "batch_id": self.batch_id,
            "status": self.status,
            "total": self.total,
            "successful": self.successful,
            "failed": self.failed,
            "processing_time_seconds": self.processing_time_seconds,
            "processing_mode": self.processing_mode,
            "timestamp": self.timestamp,
        }
