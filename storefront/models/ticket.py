# storefront/models/ticket.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class SupportTicket(SQLModel, table=True):
    """
    Support request raised by a user.

    `email` is the owner. It relates tickets to users by value only; there
    is no foreign key, so deleting a user leaves their tickets in place.
    """

    __tablename__ = "support_tickets"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    email: str = Field(
        min_length=1,
        index=True,
        description="Owner email (never empty)",
    )

    subject: str = Field(default="", max_length=200)

    message: str = Field(default="", description="Free-form ticket content")

    status: str = Field(
        default="open",
        index=True,
        description="open | in_progress | resolved | closed",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
