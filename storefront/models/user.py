# storefront/models/user.py
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Persistent user record.

    Identity:
      - id: assigned by the store on creation
      - email: unique natural key used everywhere else (tokens, tickets, carts)

    Role:
      - stored as "user" | "admin" (legacy rows may hold anything)
      - decoded via `Role.decode`; only "admin" grants admin capability

    Profile:
      - arbitrary client-supplied fields, opaque to the backend
    """

    __tablename__ = "users"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    email: str = Field(
        unique=True,
        index=True,
        description="Unique email, the identity key",
    )

    role: str | None = Field(
        default="user",
        index=True,
        description="Application role: user | admin",
    )

    profile: dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False),
        description="Opaque profile fields (name, photo, ...)",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
