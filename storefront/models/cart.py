# storefront/models/cart.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class CartEntry(SQLModel, table=True):
    """
    Cart or wishlist entry, owned by `email`.

    The item is snapshotted (name, price) at the time it was added so the
    entry still renders if the catalog row changes.
    """

    __tablename__ = "cart_entries"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    email: str = Field(index=True, description="Owner email")

    kind: str = Field(
        default="cart",
        index=True,
        description="cart | wishlist",
    )

    item_id: str = Field(description="Product or shop item id")

    name: str | None = None

    price: float | None = Field(
        default=None,
        description="Price when added",
    )

    quantity: int = Field(default=1, gt=0)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
