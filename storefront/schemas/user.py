# storefront/schemas/user.py
import uuid
from datetime import datetime
from typing import Any

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel

from storefront.core.identity import Role


class UserRead(SQLModel):
    """Response schema returned to clients."""

    id: uuid.UUID
    email: str
    role: Role
    profile: dict[str, Any] = {}
    created_at: datetime

    @field_validator("role", mode="before")
    @classmethod
    def decode_role(cls, v: Any) -> Role:
        if isinstance(v, Role):
            return v
        return Role.decode(v)


class UserRoleUpdate(SQLModel):
    """
    Admin-only role update schema.
    """

    model_config = ConfigDict(extra="forbid")
    role: Role


class TokenResponse(SQLModel):
    token: str
