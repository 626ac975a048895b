# storefront/routers/tickets.py
import uuid

from fastapi import APIRouter, Depends

from storefront.core.gates import RequestContext, admin_only, authenticated
from storefront.repositories.ticket_repo import TicketRepository
from storefront.schemas.common import DeleteResult, InsertResult, UpdateResult
from storefront.schemas.ticket import TicketCreate, TicketRead, TicketUpdate
from storefront.services.ticket_service import TicketService

router = APIRouter(tags=["Support tickets"])

repo = TicketRepository()
service = TicketService(repo)


@router.get("/supportTickets", response_model=list[TicketRead])
def list_tickets(
    email: str | None = None,
    ctx: RequestContext = Depends(authenticated),
):
    """
    List support tickets.

    - Admin: every ticket, or only `email`'s if given.
    - User: only their own tickets (asking for another email => 403).
    """
    return service.list_tickets(ctx.session, ctx.caller(), email)


@router.post(
    "/supportTickets",
    response_model=InsertResult,
    response_model_exclude_unset=True,
)
def create_ticket(
    payload: TicketCreate,
    ctx: RequestContext = Depends(authenticated),
):
    """
    Open a ticket for the caller (or, for admins, on behalf of `email`).
    """
    return service.create_ticket(ctx.session, ctx.caller(), payload)


@router.put("/supportTickets/{ticket_id}", response_model=UpdateResult)
def update_ticket(
    ticket_id: uuid.UUID,
    payload: TicketUpdate,
    ctx: RequestContext = Depends(authenticated),
):
    """Edit a ticket (owner or admin)."""
    return service.update_ticket(ctx.session, ctx.caller(), ticket_id, payload)


@router.delete("/supportTickets/{ticket_id}", response_model=DeleteResult)
def delete_ticket(
    ticket_id: uuid.UUID,
    ctx: RequestContext = Depends(authenticated),
):
    """Delete a ticket (owner or admin)."""
    return service.delete_ticket(ctx.session, ctx.caller(), ticket_id)


@router.get("/tickets", response_model=list[TicketRead])
def list_all_tickets(ctx: RequestContext = Depends(admin_only)):
    """All tickets (admin only)."""
    return service.list_all(ctx.session)
