# storefront/core/tokens.py
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from jose import jwt, JWTError, ExpiredSignatureError

# Every issued token is valid for exactly this long.
ACCESS_TOKEN_LIFETIME = timedelta(hours=1)

DEFAULT_ALG = "HS256"


class TokenError(Exception):
    """Base class for every reason a bearer token is rejected."""


class MalformedToken(TokenError):
    pass


class InvalidSignature(TokenError):
    pass


class TokenExpired(TokenError):
    pass


def issue_token(
    claims: Mapping[str, Any],
    secret: str,
    *,
    algorithm: str = DEFAULT_ALG,
    now: datetime | None = None,
) -> str:
    """
    Sign `claims` into a bearer token that expires one hour after `now`.

    The caller's mapping is copied, never mutated. Claims are not
    validated beyond being JSON-serializable; `iat` and `exp` are
    overwritten.
    """
    issued_at = now or datetime.now(timezone.utc)
    payload = dict(claims)
    payload["iat"] = int(issued_at.timestamp())
    payload["exp"] = int((issued_at + ACCESS_TOKEN_LIFETIME).timestamp())
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_token(
    token: str,
    secret: str,
    *,
    algorithm: str = DEFAULT_ALG,
) -> dict[str, Any]:
    """
    Verify and decode a bearer token.

    Verification is local only (signature + `exp`); the user store is
    never consulted, so a token stays valid for its whole lifetime even
    if the user is later deleted or their role changes.

    Raises:
        MalformedToken: token cannot be parsed.
        InvalidSignature: signature does not match `secret`.
        TokenExpired: current time is past `exp`.
    """
    try:
        jwt.get_unverified_claims(token)
    except JWTError as e:
        raise MalformedToken(str(e)) from e

    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except ExpiredSignatureError as e:
        raise TokenExpired(str(e)) from e
    except JWTError as e:
        raise InvalidSignature(str(e)) from e
