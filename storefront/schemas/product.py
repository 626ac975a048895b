# storefront/schemas/product.py
import uuid
from datetime import datetime

from sqlmodel import SQLModel


class ProductRead(SQLModel):
    """
    Product representation for clients.
    """

    id: uuid.UUID
    name: str
    category: str | None = None
    description: str | None = None
    price: float
    image_url: str | None = None
    created_at: datetime


class ShopItemRead(ProductRead):
    stock: int
