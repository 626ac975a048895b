"""
Shared fixtures.

Every test gets a fresh app bound to its own in-memory SQLite store.
"""

import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.repositories.user_repo import UserRepository
from storefront.main import create_app

from tests.helpers import SECRET, auth_header


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite://", ACCESS_TOKEN_SECRET=SECRET)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(client, app):
    """The Database opened by the app lifespan."""
    return app.state.db


@pytest.fixture
def make_user(client, db):
    """
    Register a user through the API, optionally promoting them to admin
    directly in the store. Returns {"id", "email", "headers"}.
    """

    def _make(email: str, role: str = "user") -> dict:
        resp = client.post("/createUser", json={"email": email})
        assert resp.status_code == 200
        user_id = resp.json()["insertedId"]

        if role != "user":
            repo = UserRepository()
            with db.session() as session:
                user = repo.get_by_email(session, email)
                user.role = role
                repo.update(session, user)

        return {"id": user_id, "email": email, "headers": auth_header(email)}

    return _make


@pytest.fixture
def admin(make_user):
    return make_user("admin@x.com", role="admin")
