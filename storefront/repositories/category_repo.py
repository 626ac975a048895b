# storefront/repositories/category_repo.py
import uuid

from sqlmodel import Session, select

from storefront.database import store_write
from storefront.models.category import Category


class CategoryRepository:
    """
    Data access layer for Category.
    """

    def get_by_id(self, session: Session, category_id: uuid.UUID) -> Category | None:
        return session.get(Category, category_id)

    def get_by_name(self, session: Session, name: str) -> Category | None:
        stmt = select(Category).where(Category.name == name)
        return session.exec(stmt).first()

    def list(self, session: Session) -> list[Category]:
        stmt = select(Category).order_by(Category.name)
        return list(session.exec(stmt).all())

    def create(self, session: Session, category: Category) -> Category:
        with store_write(session, "create category"):
            session.add(category)
            session.commit()
            session.refresh(category)
        return category

    def update(self, session: Session, category: Category) -> Category:
        with store_write(session, "update category"):
            session.add(category)
            session.commit()
            session.refresh(category)
        return category

    def delete(self, session: Session, category: Category) -> None:
        with store_write(session, "delete category"):
            session.delete(category)
            session.commit()
