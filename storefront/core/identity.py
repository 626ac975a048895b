# storefront/core/identity.py
from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """
    Application role.

    Stored as a plain string on the user row; decode it once with
    `Role.decode` and compare members from then on.
    """

    USER = "user"
    ADMIN = "admin"

    @classmethod
    def decode(cls, raw: str | None) -> "Role":
        """Anything other than "admin" (including unset) is a regular user."""
        if raw is not None and raw.strip().lower() == cls.ADMIN.value:
            return cls.ADMIN
        return cls.USER


@dataclass(frozen=True)
class Caller:
    """Authenticated identity as seen by handlers and the ownership policy."""

    email: str
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN
