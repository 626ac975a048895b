# storefront/repositories/cart_repo.py
import uuid

from sqlmodel import Session, select

from storefront.database import store_write
from storefront.models.cart import CartEntry


class CartRepository:

    # Entries for an owner, optionally one kind only
    def list_for_email(
        self,
        session: Session,
        email: str,
        kind: str | None = None,
    ) -> list[CartEntry]:
        stmt = select(CartEntry).where(CartEntry.email == email)
        if kind is not None:
            stmt = stmt.where(CartEntry.kind == kind)
        return list(session.exec(stmt.order_by(CartEntry.created_at)).all())

    def get_by_id(self, session: Session, entry_id: uuid.UUID) -> CartEntry | None:
        return session.get(CartEntry, entry_id)

    # CRUD
    def create(self, session: Session, entry: CartEntry) -> CartEntry:
        with store_write(session, "create cart entry"):
            session.add(entry)
            session.commit()
            session.refresh(entry)
        return entry

    def delete(self, session: Session, entry: CartEntry) -> None:
        with store_write(session, "delete cart entry"):
            session.delete(entry)
            session.commit()
