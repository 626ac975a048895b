# storefront/services/user_service.py
import logging
import uuid
from typing import Any

from sqlmodel import Session

from storefront.core.errors import BadRequest, Forbidden
from storefront.core.identity import Caller, Role
from storefront.models.user import User
from storefront.repositories.user_repo import UserRepository
from storefront.schemas.common import DeleteResult, InsertResult, UpdateResult

logger = logging.getLogger(__name__)

# Keys a client may never set through profile payloads.
RESERVED_FIELDS = frozenset({"id", "_id", "email", "role", "created_at"})


def _profile_fields(payload: dict[str, Any]) -> dict[str, Any]:
    dropped = RESERVED_FIELDS.intersection(payload)
    if dropped:
        logger.debug("Ignoring reserved profile keys: %s", sorted(dropped))
    return {k: v for k, v in payload.items() if k not in RESERVED_FIELDS}


class UserService:
    """
    Business logic for User.

    Responsibilities:
      - idempotent registration by email
      - role changes (admin routes) and profile self-updates (owner only)
      - map outcomes to insert / update / delete results
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    def get_by_email(self, session: Session, email: str) -> User | None:
        return self.repo.get_by_email(session, email)

    def create_user(self, session: Session, payload: dict[str, Any]) -> InsertResult:
        """
        Register a user on first sign-in.

        Rules:
          - email is required (400)
          - a duplicate email is not an error: returns insertedId=None
          - role always starts as "user"; only admins promote
        """
        email = payload.get("email")
        if not isinstance(email, str) or not email.strip():
            raise BadRequest("email is required")

        if self.repo.get_by_email(session, email) is not None:
            return InsertResult(message="user already exists", insertedId=None)

        user = User(email=email, role=Role.USER.value, profile=_profile_fields(payload))
        created = self.repo.create(session, user)
        if created is None:
            return InsertResult(message="user already exists", insertedId=None)
        logger.info("Created user %s", created.id)
        return InsertResult(insertedId=created.id)

    def update_role(
        self,
        session: Session,
        user_id: uuid.UUID,
        role: Role,
    ) -> UpdateResult:
        """Change a user's role (admin only, enforced by the route gate)."""
        user = self.repo.get_by_id(session, user_id)
        if user is None:
            return UpdateResult(matchedCount=0, modifiedCount=0)
        if user.role == role.value:
            return UpdateResult(matchedCount=1, modifiedCount=0)

        user.role = role.value
        self.repo.update(session, user)
        logger.info("User %s role set to %s", user_id, role.value)
        return UpdateResult(matchedCount=1, modifiedCount=1)

    def update_profile(
        self,
        session: Session,
        caller: Caller,
        email: str,
        payload: dict[str, Any],
    ) -> UpdateResult:
        """
        Merge `payload` into the profile of the user owning `email`.

        Only the owner may edit their profile; email and role cannot be
        changed here.
        """
        if caller.email != email:
            raise Forbidden("forbidden access")

        user = self.repo.get_by_email(session, email)
        if user is None:
            return UpdateResult(matchedCount=0, modifiedCount=0)

        merged = {**(user.profile or {}), **_profile_fields(payload)}
        if merged == user.profile:
            return UpdateResult(matchedCount=1, modifiedCount=0)

        user.profile = merged
        self.repo.update(session, user)
        return UpdateResult(matchedCount=1, modifiedCount=1)

    def delete_user(self, session: Session, user_id: uuid.UUID) -> DeleteResult:
        """Delete a user (admin only)."""
        user = self.repo.get_by_id(session, user_id)
        if user is None:
            return DeleteResult(deletedCount=0)
        self.repo.delete(session, user)
        logger.info("Deleted user %s", user_id)
        return DeleteResult(deletedCount=1)
