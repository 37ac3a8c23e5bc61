"""In-memory record store for users, receipts and receipt items.

The store keeps every record in process memory, keyed by id in insertion
order.  Nothing is persisted: restarting the process drops all data.
Operations are coroutines so a durable backend can replace this class
later without touching the route handlers; here each call completes
immediately.

Ids come from a per-kind counter starting at 1.  Two invariants are
enforced at insert time:

- user emails are unique (``DuplicateEmailError``)
- a receipt item must reference an existing receipt (``ReceiptNotFoundError``)

A receipt's ``user_id`` is stored as given and not checked against users.
"""

from __future__ import annotations

import datetime as dt
import itertools
import logging
import threading
from typing import Dict, List, Optional

from pydantic import EmailStr, TypeAdapter, ValidationError

from receipt_api.models.schemas import (
    Receipt,
    ReceiptCreate,
    ReceiptItem,
    ReceiptItemCreate,
    User,
    UserCreate,
)

logger = logging.getLogger(__name__)

_email_adapter = TypeAdapter(EmailStr)


class StoreError(Exception):
    """Base class for store-level rule violations."""


class DuplicateEmailError(StoreError):
    def __init__(self, email: str):
        super().__init__(f"User with email {email} already exists")
        self.email = email


class ReceiptNotFoundError(StoreError):
    def __init__(self, receipt_id: int):
        super().__init__("Receipt not found")
        self.receipt_id = receipt_id


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class InMemoryStore:
    """Process-local store for the three record kinds."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.reset()

    def reset(self) -> None:
        """Drop all records and restart id counters."""
        with self._lock:
            self._users: Dict[int, User] = {}
            self._users_by_email: Dict[str, int] = {}
            self._receipts: Dict[int, Receipt] = {}
            self._items: Dict[int, ReceiptItem] = {}
            self._user_ids = itertools.count(1)
            self._receipt_ids = itertools.count(1)
            self._item_ids = itertools.count(1)

    @staticmethod
    def _stamp(counter: itertools.count) -> dict:
        now = _utcnow()
        return {"id": next(counter), "created_at": now, "updated_at": now}

    # ------------------------------------------------------------------
    # Users

    async def create_user(self, data: UserCreate) -> User:
        with self._lock:
            if data.email in self._users_by_email:
                raise DuplicateEmailError(data.email)
            user = User(**data.model_dump(), **self._stamp(self._user_ids))
            self._users[user.id] = user
            self._users_by_email[user.email] = user.id
        logger.info("[store] created user id=%s", user.id)
        return user

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Look up a user by email, normalised the same way as on insert.

        Stored emails have their domain lower-cased by ``EmailStr``, so the
        lookup key is passed through the same validator first.
        """
        try:
            key = _email_adapter.validate_python(email)
        except ValidationError:
            return None
        user_id = self._users_by_email.get(key)
        return self._users.get(user_id) if user_id is not None else None

    # ------------------------------------------------------------------
    # Receipts

    async def create_receipt(self, data: ReceiptCreate) -> Receipt:
        with self._lock:
            receipt = Receipt(**data.model_dump(), **self._stamp(self._receipt_ids))
            self._receipts[receipt.id] = receipt
        logger.info("[store] created receipt id=%s user_id=%s", receipt.id, receipt.user_id)
        return receipt

    async def get_receipt_by_id(self, receipt_id: int) -> Optional[Receipt]:
        return self._receipts.get(receipt_id)

    async def get_all_receipts(self) -> List[Receipt]:
        return list(self._receipts.values())

    async def get_receipts_by_user_id(self, user_id: int) -> List[Receipt]:
        return [r for r in self._receipts.values() if r.user_id == user_id]

    # ------------------------------------------------------------------
    # Receipt items

    async def create_receipt_item(self, data: ReceiptItemCreate) -> ReceiptItem:
        with self._lock:
            if data.receipt_id not in self._receipts:
                raise ReceiptNotFoundError(data.receipt_id)
            item = ReceiptItem(**data.model_dump(), **self._stamp(self._item_ids))
            self._items[item.id] = item
        logger.info("[store] created receipt item id=%s receipt_id=%s", item.id, item.receipt_id)
        return item

    async def get_receipt_items_by_receipt_id(self, receipt_id: int) -> List[ReceiptItem]:
        return [i for i in self._items.values() if i.receipt_id == receipt_id]

    async def delete_receipt_item(self, item_id: int) -> None:
        """Remove an item by id.  Deleting an unknown id is not an error."""
        with self._lock:
            removed = self._items.pop(item_id, None)
        if removed is not None:
            logger.info("[store] deleted receipt item id=%s", item_id)


# Process-wide store used by the API
store = InMemoryStore()
