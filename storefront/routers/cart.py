# storefront/routers/cart.py
import uuid

from fastapi import APIRouter, Depends
from sqlmodel import Session

from storefront.core.gates import RequestContext, authenticated
from storefront.database import get_session
from storefront.repositories.cart_repo import CartRepository
from storefront.schemas.cart import CartEntryCreate, CartEntryRead, EntryKind
from storefront.schemas.common import DeleteResult, InsertResult
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["Carts"])

cart_repo = CartRepository()
service = CartService(cart_repo)


@router.get("", response_model=list[CartEntryRead])
def list_entries(
    email: str,
    kind: EntryKind | None = None,
    session: Session = Depends(get_session),
):
    """
    Cart / wishlist entries for `email`.

    - Public endpoint (reads are not gated).
    """
    return service.list_entries(session, email, kind)


@router.post(
    "",
    response_model=InsertResult,
    response_model_exclude_unset=True,
)
def add_entry(
    payload: CartEntryCreate,
    ctx: RequestContext = Depends(authenticated),
):
    """
    Add an item to the caller's cart or wishlist.

    Auth:
      - Requires a valid bearer token.
      - Adding for another email requires admin.
    """
    return service.add_entry(ctx.session, ctx.caller(), payload)


@router.delete("/{entry_id}", response_model=DeleteResult)
def remove_entry(
    entry_id: uuid.UUID,
    ctx: RequestContext = Depends(authenticated),
):
    """
    Remove an entry (owner or admin).
    """
    return service.remove_entry(ctx.session, ctx.caller(), entry_id)
