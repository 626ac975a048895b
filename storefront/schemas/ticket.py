# storefront/schemas/ticket.py
import uuid
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

TicketStatus = Literal["open", "in_progress", "resolved", "closed"]


class TicketCreate(SQLModel):
    """
    Payload for raising a ticket.

    - email is optional: defaults to the caller. Only admins may set
      another user's email.
    """

    model_config = ConfigDict(extra="forbid")

    email: str | None = None
    subject: str = Field(default="", max_length=200)
    message: str = ""
    status: TicketStatus = "open"

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


class TicketUpdate(SQLModel):
    """
    Partial update payload for tickets.
    All fields are optional; the owner email cannot be changed.
    """

    model_config = ConfigDict(extra="forbid")

    subject: str | None = Field(default=None, max_length=200)
    message: str | None = None
    status: TicketStatus | None = None


class TicketRead(SQLModel):
    id: uuid.UUID
    email: str
    subject: str
    message: str
    status: str
    created_at: datetime
