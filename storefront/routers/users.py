# storefront/routers/users.py
import uuid
from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlmodel import Session

from storefront.core.gates import RequestContext, admin_only, authenticated
from storefront.database import get_session
from storefront.repositories.user_repo import UserRepository
from storefront.schemas.common import DeleteResult, InsertResult, UpdateResult
from storefront.schemas.user import UserRead, UserRoleUpdate
from storefront.services.user_service import UserService

router = APIRouter(tags=["Users"])

repo = UserRepository()
service = UserService(repo)


# -------- Public endpoints --------


@router.get("/users/{email}", response_model=UserRead | None)
def get_user_by_email(
    email: str,
    session: Session = Depends(get_session),
):
    """
    Fetch a user record by email, or `null` if there is none.
    """
    return service.get_by_email(session, email)


@router.post(
    "/createUser",
    response_model=InsertResult,
    response_model_exclude_unset=True,
)
def create_user(
    payload: dict[str, Any] = Body(...),
    session: Session = Depends(get_session),
):
    """
    Idempotent registration by email.

    - New email       => {"insertedId": <id>}
    - Existing email  => {"message": "user already exists", "insertedId": null}
    """
    return service.create_user(session, payload)


# -------- Self profile --------


@router.put("/users/{email}", response_model=UpdateResult)
def update_profile(
    email: str,
    payload: dict[str, Any] = Body(...),
    ctx: RequestContext = Depends(authenticated),
):
    """
    Merge profile fields into the caller's own record.

    Auth:
      - Requires a valid bearer token for `email`.
    """
    return service.update_profile(ctx.session, ctx.caller(), email, payload)


# -------- Admin endpoints --------


@router.patch("/users/{user_id}", response_model=UpdateResult)
def change_role(
    user_id: uuid.UUID,
    payload: UserRoleUpdate,
    ctx: RequestContext = Depends(admin_only),
):
    """
    Update a user's role (admin only).

    Allowed roles: user, admin.
    """
    return service.update_role(ctx.session, user_id, payload.role)


@router.delete("/users/{user_id}", response_model=DeleteResult)
def delete_user(
    user_id: uuid.UUID,
    ctx: RequestContext = Depends(admin_only),
):
    """Delete a user (admin only)."""
    return service.delete_user(ctx.session, user_id)
