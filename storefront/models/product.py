# storefront/models/product.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class CatalogItemBase(SQLModel):
    """
    Columns shared by products and shop items.
    """

    name: str = Field(
        max_length=100,
        index=True,
        description="Display name",
    )

    category: str | None = Field(
        default=None,
        max_length=50,
        index=True,
        description="Category name",
    )

    description: str | None = Field(
        default=None,
        description="Optional long description",
    )

    price: float = Field(
        default=0,
        ge=0,
        description="Unit price",
    )

    image_url: str | None = Field(
        default=None,
        description="Main image URL",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )


class Product(CatalogItemBase, table=True):
    """Product catalog entry."""

    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )


class ShopItem(CatalogItemBase, table=True):
    """Item listed in the shop, with stock on hand."""

    __tablename__ = "shop_items"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    stock: int = Field(
        default=0,
        ge=0,
        description="How many units currently in stock",
    )
