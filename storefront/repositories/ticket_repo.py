# storefront/repositories/ticket_repo.py
import uuid

from sqlmodel import Session, select

from storefront.database import store_write
from storefront.models.ticket import SupportTicket


class TicketRepository:
    """
    Data access layer for SupportTicket.

    - Pure DB operations (CRUD + queries).
    - Ownership is decided by the service; `list` only applies the
      owner filter it is given.
    """

    def get_by_id(self, session: Session, ticket_id: uuid.UUID) -> SupportTicket | None:
        return session.get(SupportTicket, ticket_id)

    def list(
        self,
        session: Session,
        email: str | None = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[SupportTicket]:
        """
        List tickets, newest first.

        Args:
            email: owner filter; None returns every owner's tickets.
            limit: max rows; None returns every match.
        """
        stmt = select(SupportTicket)
        if email is not None:
            stmt = stmt.where(SupportTicket.email == email)
        stmt = stmt.order_by(SupportTicket.created_at.desc()).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(session.exec(stmt).all())

    def create(self, session: Session, ticket: SupportTicket) -> SupportTicket:
        with store_write(session, "create ticket"):
            session.add(ticket)
            session.commit()
            session.refresh(ticket)
        return ticket

    def update(self, session: Session, ticket: SupportTicket) -> SupportTicket:
        with store_write(session, "update ticket"):
            session.add(ticket)
            session.commit()
            session.refresh(ticket)
        return ticket

    def delete(self, session: Session, ticket: SupportTicket) -> None:
        with store_write(session, "delete ticket"):
            session.delete(ticket)
            session.commit()
