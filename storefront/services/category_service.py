# storefront/services/category_service.py
import uuid

from sqlmodel import Session

from storefront.core.errors import BadRequest, NotFound
from storefront.models.category import Category
from storefront.repositories.category_repo import CategoryRepository
from storefront.schemas.category import CategoryCreate, CategoryUpdate
from storefront.schemas.common import DeleteResult, InsertResult, UpdateResult


class CategoryService:
    """
    Business logic for categories.

    Who may write is decided at the router (`category_gate`); this
    service only enforces unique names and existence.
    """

    def __init__(self, repo: CategoryRepository):
        self.repo = repo

    def _ensure_name_free(
        self,
        session: Session,
        name: str,
        exclude_id: uuid.UUID | None = None,
    ) -> None:
        existing = self.repo.get_by_name(session, name)
        if existing is not None and existing.id != exclude_id:
            raise BadRequest("category already exists")

    def list_categories(self, session: Session) -> list[Category]:
        return self.repo.list(session)

    def get_category(self, session: Session, category_id: uuid.UUID) -> Category:
        category = self.repo.get_by_id(session, category_id)
        if category is None:
            raise NotFound("category not found")
        return category

    def create_category(self, session: Session, payload: CategoryCreate) -> InsertResult:
        self._ensure_name_free(session, payload.name)
        category = self.repo.create(session, Category(**payload.model_dump()))
        return InsertResult(insertedId=category.id)

    def update_category(
        self,
        session: Session,
        category_id: uuid.UUID,
        payload: CategoryUpdate,
    ) -> UpdateResult:
        category = self.get_category(session, category_id)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in changes:
            self._ensure_name_free(session, changes["name"], exclude_id=category.id)

        modified = False
        for field, value in changes.items():
            if getattr(category, field) != value:
                setattr(category, field, value)
                modified = True

        if modified:
            self.repo.update(session, category)
        return UpdateResult(matchedCount=1, modifiedCount=int(modified))

    def delete_category(self, session: Session, category_id: uuid.UUID) -> DeleteResult:
        category = self.get_category(session, category_id)
        self.repo.delete(session, category)
        return DeleteResult(deletedCount=1)
