# storefront/core/ownership.py
"""
Owner-or-admin policy for records that carry an owner email
(support tickets, cart / wishlist entries).

Applied inside services rather than as a route gate, because the answer
depends on the specific record being acted on.
"""
from typing import Any

from storefront.core.errors import Forbidden, NotFound
from storefront.core.identity import Caller


def can_act(caller: Caller, owner_email: str | None) -> bool:
    return caller.is_admin or (
        owner_email is not None and caller.email == owner_email
    )


def owner_filter(caller: Caller, requested_email: str | None = None) -> str | None:
    """
    Email to constrain a listing query with.

    Admins get what they asked for (None = every owner). Everyone else
    is pinned to their own email; asking for someone else's is refused.
    """
    if caller.is_admin:
        return requested_email
    if requested_email is not None and requested_email != caller.email:
        raise Forbidden("forbidden access")
    return caller.email


def ensure_can_create(caller: Caller, owner_email: str) -> None:
    """Only admins may create records on behalf of another email."""
    if owner_email != caller.email and not caller.is_admin:
        raise Forbidden("forbidden access")


def ensure_can_act(
    caller: Caller,
    record: Any | None,
    what: str = "resource",
    owner_field: str = "email",
) -> None:
    """Existence first (404), then ownership of `record.<owner_field>` (403)."""
    if record is None:
        raise NotFound(f"{what} not found")
    if not can_act(caller, getattr(record, owner_field, None)):
        raise Forbidden("forbidden access")
