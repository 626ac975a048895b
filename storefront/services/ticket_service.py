# storefront/services/ticket_service.py
import logging
import uuid

from sqlmodel import Session

from storefront.core.errors import BadRequest
from storefront.core.identity import Caller
from storefront.core.ownership import ensure_can_act, ensure_can_create, owner_filter
from storefront.models.ticket import SupportTicket
from storefront.repositories.ticket_repo import TicketRepository
from storefront.schemas.common import DeleteResult, InsertResult, UpdateResult
from storefront.schemas.ticket import TicketCreate, TicketUpdate

logger = logging.getLogger(__name__)


class TicketService:
    """
    Business logic for support tickets.

    Every operation goes through the owner-or-admin policy:
      - list   : query constrained to the caller's email unless admin
      - create : only admins may open a ticket for another email
      - update / delete : 404 if missing, then 403 unless owner or admin
    """

    def __init__(self, repo: TicketRepository):
        self.repo = repo

    def list_tickets(
        self,
        session: Session,
        caller: Caller,
        email: str | None = None,
    ) -> list[SupportTicket]:
        return self.repo.list(session, email=owner_filter(caller, email))

    def list_all(self, session: Session) -> list[SupportTicket]:
        """Every ticket (admin routes only)."""
        return self.repo.list(session)

    def create_ticket(
        self,
        session: Session,
        caller: Caller,
        payload: TicketCreate,
    ) -> InsertResult:
        owner = payload.email or caller.email
        if not owner:
            raise BadRequest("email is required")
        ensure_can_create(caller, owner)

        ticket = SupportTicket(
            email=owner,
            subject=payload.subject,
            message=payload.message,
            status=payload.status,
        )
        ticket = self.repo.create(session, ticket)
        logger.info("Ticket %s opened for %s", ticket.id, owner)
        return InsertResult(insertedId=ticket.id)

    def update_ticket(
        self,
        session: Session,
        caller: Caller,
        ticket_id: uuid.UUID,
        payload: TicketUpdate,
    ) -> UpdateResult:
        ticket = self.repo.get_by_id(session, ticket_id)
        ensure_can_act(caller, ticket, what="ticket")

        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        modified = False
        for field, value in changes.items():
            if getattr(ticket, field) != value:
                setattr(ticket, field, value)
                modified = True

        if modified:
            self.repo.update(session, ticket)
        return UpdateResult(matchedCount=1, modifiedCount=int(modified))

    def delete_ticket(
        self,
        session: Session,
        caller: Caller,
        ticket_id: uuid.UUID,
    ) -> DeleteResult:
        ticket = self.repo.get_by_id(session, ticket_id)
        ensure_can_act(caller, ticket, what="ticket")

        self.repo.delete(session, ticket)
        logger.info("Ticket %s deleted by %s", ticket_id, caller.email)
        return DeleteResult(deletedCount=1)
