# storefront/repositories/user_repo.py
import uuid

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from storefront.database import store_write
from storefront.models.user import User


class UserRepository:
    """
    Data access layer for User.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic
    """

    # ----- Basic CRUD -----

    def get_by_id(self, session: Session, user_id: uuid.UUID) -> User | None:
        """Return a User by primary key, or None if not found."""
        return session.get(User, user_id)

    def get_by_email(self, session: Session, email: str) -> User | None:
        """Return a User by unique email, or None if not found."""
        stmt = select(User).where(User.email == email)
        return session.exec(stmt).first()

    def create(self, session: Session, user: User) -> User | None:
        """
        Insert a new User and return the persisted row.

        Returns None when the unique email constraint rejects the row
        (another request registered the same email first).
        """
        with store_write(session, "create user"):
            session.add(user)
            try:
                session.commit()
            except IntegrityError:
                session.rollback()
                return None
            session.refresh(user)
        return user

    def update(self, session: Session, user: User) -> User:
        """Persist changes to an existing User."""
        with store_write(session, "update user"):
            session.add(user)
            session.commit()
            session.refresh(user)
        return user

    def delete(self, session: Session, user: User) -> None:
        with store_write(session, "delete user"):
            session.delete(user)
            session.commit()
