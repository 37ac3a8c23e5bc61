"""API routes for users.

User creation answers 200 rather than 201, matching what existing clients
of this API expect.  Emails are unique: a second user with the same email
is rejected with 409 by the store error handler.
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from receipt_api.api.dependencies import get_store
from receipt_api.models.schemas import Receipt, User, UserCreate
from receipt_api.services.store import InMemoryStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=User)
async def create_user(user_in: UserCreate, store: InMemoryStore = Depends(get_store)) -> User:
    user = await store.create_user(user_in)
    logger.info("[users] created id=%s", user.id)
    return user


@router.get("/{user_id}", response_model=User)
async def get_user_by_id(user_id: int, store: InMemoryStore = Depends(get_store)) -> User:
    user = await store.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/{user_id}/receipts", response_model=List[Receipt])
async def list_user_receipts(user_id: int, store: InMemoryStore = Depends(get_store)) -> List[Receipt]:
    """Receipts owned by ``user_id``; empty when the user has none or does not exist."""
    return await store.get_receipts_by_user_id(user_id)
