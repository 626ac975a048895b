# storefront/services/cart_service.py
import uuid

from sqlmodel import Session

from storefront.core.identity import Caller
from storefront.core.ownership import ensure_can_act, ensure_can_create
from storefront.models.cart import CartEntry
from storefront.repositories.cart_repo import CartRepository
from storefront.schemas.cart import CartEntryCreate
from storefront.schemas.common import DeleteResult, InsertResult


class CartService:
    """
    Business logic for cart / wishlist entries.

    Responsibilities:
      - scope reads by owner email
      - owner-or-admin policy on writes
    """

    def __init__(self, cart_repo: CartRepository):
        self.cart_repo = cart_repo

    def list_entries(
        self,
        session: Session,
        email: str,
        kind: str | None = None,
    ) -> list[CartEntry]:
        return self.cart_repo.list_for_email(session, email, kind)

    def add_entry(
        self,
        session: Session,
        caller: Caller,
        payload: CartEntryCreate,
    ) -> InsertResult:
        owner = payload.email or caller.email
        ensure_can_create(caller, owner)

        entry = CartEntry(
            email=owner,
            kind=payload.kind,
            item_id=payload.item_id,
            name=payload.name,
            price=payload.price,
            quantity=payload.quantity,
        )
        entry = self.cart_repo.create(session, entry)
        return InsertResult(insertedId=entry.id)

    def remove_entry(
        self,
        session: Session,
        caller: Caller,
        entry_id: uuid.UUID,
    ) -> DeleteResult:
        entry = self.cart_repo.get_by_id(session, entry_id)
        ensure_can_act(caller, entry, what="cart entry")

        self.cart_repo.delete(session, entry)
        return DeleteResult(deletedCount=1)
