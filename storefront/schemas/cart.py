# storefront/schemas/cart.py
import uuid
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field

EntryKind = Literal["cart", "wishlist"]


class CartEntryCreate(SQLModel):
    """
    Payload for adding to a cart or wishlist.

    - email defaults to the caller; only admins may add for someone else.
    """

    model_config = ConfigDict(extra="forbid")

    email: str | None = None
    kind: EntryKind = "cart"
    item_id: str = Field(min_length=1)
    name: str | None = None
    price: float | None = Field(default=None, ge=0)
    quantity: int = Field(default=1, gt=0)


class CartEntryRead(SQLModel):
    id: uuid.UUID
    email: str
    kind: str
    item_id: str
    name: str | None = None
    price: float | None = None
    quantity: int
    created_at: datetime
