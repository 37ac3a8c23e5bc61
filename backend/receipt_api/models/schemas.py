"""Pydantic schemas for request and response models.

Pydantic models are used for validating and serialising data that
crosses the boundary of the API. The same models double as the stored
records: the in-memory store keeps validated ``User``, ``Receipt`` and
``ReceiptItem`` instances and hands them straight back to the routes.

Attributes are snake_case in Python and camelCase on the wire
(``storeName``, ``receiptId``, ``createdAt``).  Input accepts either
spelling; FastAPI serialises responses by alias.

Each entity comes in two shapes: a ``*Create`` schema holding the
client-supplied fields, and the full record which adds the
server-assigned ``id``, ``created_at`` and ``updated_at``.

Client-supplied numbers are strict: ``true`` or ``"42.5"`` is rejected
rather than coerced.  Integers are still accepted for float fields.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, EmailStr, Field, StrictFloat, StrictInt, field_validator
from pydantic.alias_generators import to_camel

from receipt_api.utils.helpers import parse_iso_datetime


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases for snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Timestamped(CamelModel):
    id: int
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------------------
# Users


class UserCreate(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr


class User(UserCreate, Timestamped):
    """Stored user record."""


# ---------------------------------------------------------------------------
# Receipts


class ReceiptCreate(CamelModel):
    user_id: Optional[StrictInt] = None
    store_name: str = Field(min_length=1)
    date: datetime
    total: StrictFloat

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        # Leave unparseable strings alone so pydantic reports them
        if isinstance(v, str):
            return parse_iso_datetime(v) or v
        return v


class Receipt(ReceiptCreate, Timestamped):
    """Stored receipt record."""


# ---------------------------------------------------------------------------
# Receipt items


class ReceiptItemFields(CamelModel):
    """Item fields as posted under ``/receipts/{receiptId}/items``.

    The owning receipt comes from the path, so any ``receiptId`` in the
    body is ignored.
    """

    name: str = Field(min_length=1)
    price: StrictFloat
    quantity: StrictFloat


class ReceiptItemCreate(ReceiptItemFields):
    receipt_id: StrictInt


class ReceiptItem(ReceiptItemCreate, Timestamped):
    """Stored receipt line item."""


# ---------------------------------------------------------------------------
# Misc API payloads


class ProductUrlRequest(BaseModel):
    url: AnyUrl


class ProductInfo(BaseModel):
    name: str
    price: str


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
