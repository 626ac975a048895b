# storefront/core/directory.py
from sqlmodel import Session

from storefront.core.identity import Caller, Role
from storefront.models.user import User
from storefront.repositories.user_repo import UserRepository


class UserDirectory:
    """
    Resolves an authenticated email to its stored user record.

    The user row is the single source of truth for the role; role
    claims embedded in a token are never trusted.
    """

    def __init__(self, repo: UserRepository | None = None):
        self.repo = repo or UserRepository()

    def find_by_email(self, session: Session, email: str | None) -> User | None:
        """Point lookup by email. Absence is not an error."""
        if not email:
            return None
        return self.repo.get_by_email(session, email)

    @staticmethod
    def to_caller(email: str, user: User | None) -> Caller:
        role = Role.decode(user.role) if user is not None else Role.USER
        return Caller(email=email, role=role)


directory = UserDirectory()
