# storefront/repositories/product_repo.py
import uuid
from typing import Generic, TypeVar

from sqlmodel import Session, select

from storefront.database import store_write
from storefront.models.product import Product, ShopItem

ItemT = TypeVar("ItemT", Product, ShopItem)


class CatalogRepository(Generic[ItemT]):
    """
    Data access layer for one catalog table (Product or ShopItem).

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    def __init__(self, model: type[ItemT]):
        self.model = model

    def get_by_id(self, session: Session, item_id: uuid.UUID) -> ItemT | None:
        return session.get(self.model, item_id)

    def list(
        self,
        session: Session,
        skip: int = 0,
        limit: int = 50,
        category: str | None = None,
    ) -> list[ItemT]:
        stmt = select(self.model)
        if category is not None:
            stmt = stmt.where(self.model.category == category)
        stmt = stmt.order_by(self.model.created_at).offset(skip).limit(limit)
        return list(session.exec(stmt).all())

    def create(self, session: Session, item: ItemT) -> ItemT:
        with store_write(session, f"create {self.model.__tablename__}"):
            session.add(item)
            session.commit()
            session.refresh(item)
        return item


class ProductRepository(CatalogRepository[Product]):
    def __init__(self):
        super().__init__(Product)


class ShopItemRepository(CatalogRepository[ShopItem]):
    def __init__(self):
        super().__init__(ShopItem)
