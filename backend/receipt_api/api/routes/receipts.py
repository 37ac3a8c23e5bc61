"""API routes for receipts and the items attached to them."""

from __future__ import annotations

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import TypeAdapter

from receipt_api.api.dependencies import get_store
from receipt_api.models.schemas import (
    Receipt,
    ReceiptCreate,
    ReceiptItem,
    ReceiptItemCreate,
    ReceiptItemFields,
)
from receipt_api.services.store import InMemoryStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/receipts", tags=["receipts"])

_item_list_adapter = TypeAdapter(List[ReceiptItemFields])


@router.get("", response_model=List[Receipt])
async def list_receipts(store: InMemoryStore = Depends(get_store)) -> List[Receipt]:
    """Return every stored receipt in insertion order."""
    return await store.get_all_receipts()


@router.get("/{receipt_id}", response_model=Receipt)
async def get_receipt(receipt_id: int, store: InMemoryStore = Depends(get_store)) -> Receipt:
    receipt = await store.get_receipt_by_id(receipt_id)
    if receipt is None:
        raise HTTPException(status_code=404, detail="Receipt not found")
    return receipt


@router.post("", response_model=Receipt, status_code=status.HTTP_201_CREATED)
async def create_receipt(receipt_in: ReceiptCreate, store: InMemoryStore = Depends(get_store)) -> Receipt:
    receipt = await store.create_receipt(receipt_in)
    logger.info("[receipts] created id=%s store=%s", receipt.id, receipt.store_name)
    return receipt


@router.post("/{receipt_id}/items", response_model=List[ReceiptItem], status_code=status.HTTP_201_CREATED)
async def create_receipt_items(
    receipt_id: int,
    payload: Any = Body(default=None),
    store: InMemoryStore = Depends(get_store),
) -> List[ReceiptItem]:
    """Attach one item or a list of items to an existing receipt.

    The receipt is looked up before the body is validated, so a missing
    receipt is always a 404.  Every item is validated before any is
    stored; the path ``receipt_id`` wins over a ``receiptId`` in the body.
    """
    receipt = await store.get_receipt_by_id(receipt_id)
    if receipt is None:
        raise HTTPException(status_code=404, detail="Receipt not found")

    # Raises pydantic.ValidationError -> 400 via the registered handler
    if isinstance(payload, list):
        items = _item_list_adapter.validate_python(payload)
    else:
        items = [ReceiptItemFields.model_validate(payload)]

    created: List[ReceiptItem] = []
    for item in items:
        data = ReceiptItemCreate(**item.model_dump(), receipt_id=receipt_id)
        created.append(await store.create_receipt_item(data))
    logger.info("[receipts] added %d item(s) to receipt id=%s", len(created), receipt_id)
    return created


@router.get("/{receipt_id}/items", response_model=List[ReceiptItem])
async def list_receipt_items(receipt_id: int, store: InMemoryStore = Depends(get_store)) -> List[ReceiptItem]:
    return await store.get_receipt_items_by_receipt_id(receipt_id)
