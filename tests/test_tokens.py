"""
Credential codec tests.
"""

import base64
import json
from datetime import datetime, timedelta, timezone

import pytest

from storefront.core.tokens import (
    ACCESS_TOKEN_LIFETIME,
    InvalidSignature,
    MalformedToken,
    TokenExpired,
    issue_token,
    verify_token,
)

SECRET = "codec-secret"


def _b64(data: dict) -> str:
    raw = json.dumps(data).encode()
    return base64.urlsafe_b64encode(raw).decode().rstrip("=")


class TestIssueAndVerify:

    @pytest.mark.parametrize(
        "claims",
        [
            {"email": "a@x.com"},
            {"email": "a@x.com", "role": "admin", "name": "Ann"},
            {"email": "b@x.com", "tags": ["x", "y"], "nested": {"k": 1}},
        ],
    )
    def test_roundtrip_keeps_fields(self, claims):
        decoded = verify_token(issue_token(claims, SECRET), SECRET)
        for key, value in claims.items():
            assert decoded[key] == value

    def test_issue_does_not_mutate_claims(self):
        claims = {"email": "a@x.com"}
        issue_token(claims, SECRET)
        assert claims == {"email": "a@x.com"}

    def test_expiry_is_one_hour_after_issue(self):
        now = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        token = issue_token({"email": "a@x.com"}, SECRET, now=now)
        # Inspect without verifying: this token is long expired.
        payload = token.split(".")[1]
        payload += "=" * (-len(payload) % 4)
        claims = json.loads(base64.urlsafe_b64decode(payload))
        assert claims["exp"] - claims["iat"] == ACCESS_TOKEN_LIFETIME.total_seconds()
        assert claims["iat"] == int(now.timestamp())

    def test_still_valid_just_before_expiry(self):
        now = datetime.now(timezone.utc) - timedelta(minutes=59)
        token = issue_token({"email": "a@x.com"}, SECRET, now=now)
        assert verify_token(token, SECRET)["email"] == "a@x.com"


class TestVerifyFailures:

    def test_expired(self):
        now = datetime.now(timezone.utc) - timedelta(hours=1, minutes=1)
        token = issue_token({"email": "a@x.com"}, SECRET, now=now)
        with pytest.raises(TokenExpired):
            verify_token(token, SECRET)

    def test_other_secret(self):
        token = issue_token({"email": "a@x.com"}, "someone-else")
        with pytest.raises(InvalidSignature):
            verify_token(token, SECRET)

    def test_tampered_payload(self):
        token = issue_token({"email": "a@x.com"}, SECRET)
        header, payload, signature = token.split(".")
        exp = int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())
        forged = _b64({"email": "admin@x.com", "exp": exp})
        with pytest.raises(InvalidSignature):
            verify_token(f"{header}.{forged}.{signature}", SECRET)

    @pytest.mark.parametrize("token", ["", "not-a-token", "a.b", "a.b.c"])
    def test_malformed(self, token):
        with pytest.raises(MalformedToken):
            verify_token(token, SECRET)

    def test_signature_checked_before_expiry(self):
        now = datetime.now(timezone.utc) - timedelta(hours=3)
        token = issue_token({"email": "a@x.com"}, "someone-else", now=now)
        with pytest.raises(InvalidSignature):
            verify_token(token, SECRET)
