"""API routes for individual receipt items."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status

from receipt_api.api.dependencies import get_store
from receipt_api.models.schemas import ReceiptItem, ReceiptItemCreate
from receipt_api.services.store import InMemoryStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/receipt-items", tags=["receipt-items"])


@router.post("", response_model=ReceiptItem)
async def create_receipt_item(item_in: ReceiptItemCreate, store: InMemoryStore = Depends(get_store)) -> ReceiptItem:
    """Create a single item.  Unknown ``receiptId`` values are rejected with 404."""
    item = await store.create_receipt_item(item_in)
    logger.info("[receipt-items] created id=%s receipt_id=%s", item.id, item.receipt_id)
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_receipt_item(item_id: int, store: InMemoryStore = Depends(get_store)) -> Response:
    await store.delete_receipt_item(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
