# storefront/core/gates.py
"""
Request gates.

A gate inspects a `RequestContext` and either lets the request proceed
or rejects it with an `ApiError`. Gates are composed into named
`GatePipeline`s which are used as FastAPI dependencies:

    @router.get("/tickets")
    def list_all(ctx: RequestContext = Depends(admin_only)):
        ...

Gates run in order, before the handler. The first rejection is raised
and the handler is never invoked, so no store mutation can happen on an
authentication or authorization failure.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from fastapi import Depends, Request
from sqlmodel import Session

from storefront.core.config import Settings
from storefront.core.directory import UserDirectory, directory
from storefront.core.errors import ApiError, Forbidden, Unauthenticated
from storefront.core.identity import Caller, Role
from storefront.core.tokens import TokenError, verify_token
from storefront.database import get_session
from storefront.models.user import User

logger = logging.getLogger(__name__)


class RequestContext:
    """
    Per-request state shared by gates and the handler.

    Lives for exactly one request; nothing here is cached across requests.
    """

    def __init__(
        self,
        session: Session,
        settings: Settings,
        authorization: str | None = None,
        lookup: UserDirectory = directory,
    ):
        self.session = session
        self.settings = settings
        self.authorization = authorization
        self.lookup = lookup
        self.claims: dict[str, Any] | None = None
        self._user: User | None = None
        self._user_loaded = False

    @property
    def email(self) -> str | None:
        if self.claims is None:
            return None
        email = self.claims.get("email")
        if not isinstance(email, str) or not email:
            return None
        return email

    def load_user(self) -> User | None:
        """Directory read for the caller, at most once per request."""
        if not self._user_loaded:
            self._user = self.lookup.find_by_email(self.session, self.email)
            self._user_loaded = True
        return self._user

    def caller(self) -> Caller:
        if not self.email:
            raise Unauthenticated("token has no email claim")
        return self.lookup.to_caller(self.email, self.load_user())


@dataclass(frozen=True)
class Proceed:
    pass


@dataclass(frozen=True)
class Reject:
    error: ApiError


GateOutcome = Proceed | Reject


class Gate(ABC):
    name = "gate"

    @abstractmethod
    def check(self, ctx: RequestContext) -> GateOutcome:
        ...


def bearer_token(header: str) -> str | None:
    """Return the credential after a `Bearer` scheme prefix, else None."""
    scheme, _, token = header.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip()


class AuthenticationGate(Gate):
    """
    Require a valid bearer token.

    - no Authorization header            -> 401
    - wrong scheme / bad / expired token -> 401
    - no string email claim              -> 401
    - otherwise decoded claims are attached to the context
    """

    name = "authenticate"

    def check(self, ctx: RequestContext) -> GateOutcome:
        if not ctx.authorization:
            return Reject(Unauthenticated("unauthorized access"))

        token = bearer_token(ctx.authorization)
        if token is None:
            return Reject(Unauthenticated("unauthorized access"))

        try:
            ctx.claims = verify_token(
                token,
                ctx.settings.ACCESS_TOKEN_SECRET,
                algorithm=ctx.settings.JWT_ALG,
            )
        except TokenError as e:
            logger.debug("Token rejected: %s (%s)", type(e).__name__, e)
            return Reject(Unauthenticated("Token expired or unauthorized access"))

        if ctx.email is None:
            ctx.claims = None
            return Reject(Unauthenticated("token has no email claim"))
        return Proceed()


class AdminGate(Gate):
    """
    Require the caller's stored role to be admin.

    Must run after AuthenticationGate. An unknown email is rejected the
    same way as a non-admin.
    """

    name = "require-admin"

    def check(self, ctx: RequestContext) -> GateOutcome:
        if ctx.claims is None:
            return Reject(Unauthenticated("unauthorized access"))
        user = ctx.load_user()
        if user is None or Role.decode(user.role) is not Role.ADMIN:
            return Reject(Forbidden("forbidden access"))
        return Proceed()


class GatePipeline:
    """Ordered, named list of gates usable as a FastAPI dependency."""

    def __init__(self, name: str, gates: list[Gate]):
        self.name = name
        self.gates = list(gates)

    def run(self, ctx: RequestContext) -> RequestContext:
        for gate in self.gates:
            outcome = gate.check(ctx)
            if isinstance(outcome, Reject):
                logger.info(
                    "Gate %s/%s rejected request: %s",
                    self.name,
                    gate.name,
                    outcome.error.message,
                )
                raise outcome.error
        return ctx

    def __call__(
        self,
        request: Request,
        session: Session = Depends(get_session),
    ) -> RequestContext:
        ctx = RequestContext(
            session=session,
            settings=request.app.state.settings,
            authorization=request.headers.get("Authorization"),
        )
        return self.run(ctx)

    def __repr__(self) -> str:
        names = ", ".join(g.name for g in self.gates)
        return f"GatePipeline({self.name!r}: [{names}])"


authenticated = GatePipeline("authenticated", [AuthenticationGate()])
admin_only = GatePipeline("admin-only", [AuthenticationGate(), AdminGate()])

_CATEGORY_PIPELINES: dict[str, GatePipeline] = {
    "auth": authenticated,
    "admin": admin_only,
}


def category_gate(
    request: Request,
    session: Session = Depends(get_session),
) -> RequestContext | None:
    """
    Gate for category writes, picked per request from
    `Settings.CATEGORY_GATE` ("none" lets every request through).
    """
    pipeline = _CATEGORY_PIPELINES.get(request.app.state.settings.CATEGORY_GATE)
    if pipeline is None:
        return None
    return pipeline(request, session)
