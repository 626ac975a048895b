# storefront/services/product_service.py
import uuid

from sqlmodel import Session

from storefront.core.errors import NotFound
from storefront.repositories.product_repo import CatalogRepository


class CatalogService:
    """
    Read-only catalog listings (products, shop items).

    Catalog management happens outside this API.
    """

    def __init__(self, repo: CatalogRepository, label: str):
        self.repo = repo
        self.label = label

    def list_items(
        self,
        session: Session,
        skip: int = 0,
        limit: int = 50,
        category: str | None = None,
    ):
        return self.repo.list(session, skip=skip, limit=limit, category=category)

    def get_item(self, session: Session, item_id: uuid.UUID):
        """
        Raises:
            NotFound: if the item does not exist.
        """
        item = self.repo.get_by_id(session, item_id)
        if item is None:
            raise NotFound(f"{self.label} not found")
        return item
