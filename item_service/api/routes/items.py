"""Item routes for the Item Service - CRUD plus batch processing."""

from dataclasses import asdict
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from item_service.api.dependencies import get_processor, get_repository
from item_service.core.batch import BatchItemProcessor
from item_service.core.errors import BatchError
from item_service.core.logging import logger
from item_service.infrastructure.database.models import Item
from item_service.infrastructure.database.repositories import ItemRepository
from item_service.models import ItemCreateRequest, ItemUpdateRequest

router = APIRouter(prefix="/api/items", tags=["Items"])

NOT_FOUND = {"success": False, "error": "Item not found."}


def _serialize(item: Item) -> Dict[str, Any]:
    return asdict(item)


def _serialize_all(items: List[Item]) -> List[Dict[str, Any]]:
    return [_serialize(item) for item in items]


@router.get("")
def list_items(repo: ItemRepository = Depends(get_repository)):
    """List every stored item."""
    return _serialize_all(repo.find_all())


@router.post("", status_code=201)
def create_item(
    item_data: ItemCreateRequest,
    repo: ItemRepository = Depends(get_repository),
):
    """Create a new item.

    - **name**: Display label (required)
    - **email**: Contact email, must be well-formed (required)
    - **description**: Optional free text
    - **status**: Optional lifecycle status, defaults to PENDING
    """
    saved = repo.upsert(item_data.to_item())
    logger.info("item_created", item_id=saved.id)
    return _serialize(saved)


@router.get("/process")
async def process_items(processor: BatchItemProcessor = Depends(get_processor)):
    """Mark every stored item as PROCESSED.

    Returns the successfully processed items in id order. Items that failed
    (deleted mid-run, store errors) are left out. Responds 500 only when the
    batch as a whole could not run.
    """
    try:
        result = await processor.process_all()
    except BatchError as e:
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": str(e), "batch_id": e.batch_id},
        )

    return JSONResponse(
        content=_serialize_all(result.items),
        headers={
            "X-Batch-Id": result.batch_id,
            "X-Batch-Failed": str(result.failed),
        },
    )


@router.get("/{item_id}")
def get_item(item_id: int, repo: ItemRepository = Depends(get_repository)):
    """Get an item by ID."""
    item = repo.fetch(item_id)
    if item is None:
        return JSONResponse(status_code=404, content=NOT_FOUND)
    return _serialize(item)


@router.put("/{item_id}")
def update_item(
    item_id: int,
    item_data: ItemUpdateRequest,
    repo: ItemRepository = Depends(get_repository),
):
    """Replace an existing item. The path id overrides any id in the body."""
    if not repo.exists(item_id):
        return JSONResponse(status_code=404, content=NOT_FOUND)

    saved = repo.upsert(item_data.to_item(item_id))
    logger.info("item_updated", item_id=saved.id)
    return _serialize(saved)


@router.delete("/{item_id}", status_code=204)
def delete_item(item_id: int, repo: ItemRepository = Depends(get_repository)):
    """Delete an item by ID."""
    if not repo.delete(item_id):
        return JSONResponse(status_code=404, content=NOT_FOUND)

    logger.info("item_deleted", item_id=item_id)
    return Response(status_code=204)
