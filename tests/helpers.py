"""
Test helpers shared across modules.
"""

from storefront.core.tokens import issue_token

SECRET = "test-secret"


def auth_header(email: str, secret: str = SECRET, **claims) -> dict[str, str]:
    """Authorization header carrying a fresh token for `email`."""
    token = issue_token({"email": email, **claims}, secret)
    return {"Authorization": f"Bearer {token}"}
