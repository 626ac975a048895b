"""
Store lifecycle and error mapping.
"""

import uuid
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from storefront.core.config import Settings
from storefront.core.errors import Internal
from storefront.database import Database, _with_sslmode, store_write
from storefront.main import create_app
from storefront.repositories.user_repo import UserRepository

from tests.helpers import SECRET, auth_header


class TestSslMode:

    def test_appended(self):
        assert _with_sslmode("postgresql://h/db") == "postgresql://h/db?sslmode=require"

    def test_appended_to_existing_query(self):
        assert _with_sslmode("postgresql://h/db?x=1") == "postgresql://h/db?x=1&sslmode=require"

    def test_kept(self):
        url = "postgresql://h/db?sslmode=disable"
        assert _with_sslmode(url) == url


class TestStoreWrite:

    def test_maps_store_errors_to_internal(self):
        session = MagicMock()
        with pytest.raises(Internal) as exc:
            with store_write(session, "boom"):
                raise OperationalError("INSERT", {}, Exception("disk full"))
        session.rollback.assert_called_once()
        assert exc.value.status_code == 500
        assert "disk full" in exc.value.error

    def test_other_errors_propagate(self):
        with pytest.raises(ValueError):
            with store_write(MagicMock(), "boom"):
                raise ValueError("not a store error")

    def test_internal_error_body(self, client, monkeypatch):
        def fail(self, session, user):
            with store_write(session, "create user"):
                raise OperationalError("INSERT", {}, Exception("connection lost"))

        monkeypatch.setattr(UserRepository, "create", fail)
        resp = client.post("/createUser", json={"email": "a@x.com"})
        assert resp.status_code == 500
        body = resp.json()
        assert body["message"] == "store operation failed"
        assert "connection lost" in body["error"]


class TestReadFailures:

    @pytest.fixture
    def lost_connection(self, monkeypatch):
        def fail(self, session, email):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        monkeypatch.setattr(UserRepository, "get_by_email", fail)

    def test_route_read_returns_json_500(self, client, lost_connection):
        resp = client.get("/users/a@x.com")
        assert resp.status_code == 500
        assert resp.headers["content-type"].startswith("application/json")
        body = resp.json()
        assert body["message"] == "store operation failed"
        assert "connection lost" in body["error"]

    def test_gate_lookup_returns_json_500(self, client, lost_connection):
        resp = client.patch(
            f"/users/{uuid.uuid4()}",
            json={"role": "admin"},
            headers=auth_header("boss@x.com"),
        )
        assert resp.status_code == 500
        assert resp.json()["message"] == "store operation failed"


class TestLifespan:

    def test_db_attached_and_released(self, monkeypatch):
        disposed = []
        monkeypatch.setattr(Database, "dispose", lambda self: disposed.append(self))
        app = create_app(Settings(DATABASE_URL="sqlite://", ACCESS_TOKEN_SECRET=SECRET))
        with TestClient(app):
            assert isinstance(app.state.db, Database)
            assert disposed == []
        assert disposed == [app.state.db]

    def test_failed_startup_releases_engine(self, monkeypatch):
        disposed = []
        monkeypatch.setattr(Database, "dispose", lambda self: disposed.append(self))

        def broken(self):
            raise OperationalError("CONNECT", {}, Exception("refused"))

        monkeypatch.setattr(Database, "create_all", broken)
        app = create_app(Settings(DATABASE_URL="sqlite://", ACCESS_TOKEN_SECRET=SECRET))
        with pytest.raises(OperationalError):
            with TestClient(app):
                pass
        assert len(disposed) == 1
