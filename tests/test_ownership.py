"""
Owner-or-admin policy tests.
"""

from types import SimpleNamespace

import pytest

from storefront.core.errors import Forbidden, NotFound
from storefront.core.identity import Caller, Role
from storefront.core.ownership import (
    can_act,
    ensure_can_act,
    ensure_can_create,
    owner_filter,
)

ALICE = Caller("alice@x.com")
BOB = Caller("bob@x.com")
ADMIN = Caller("root@x.com", Role.ADMIN)


class TestCanAct:

    def test_owner(self):
        assert can_act(ALICE, "alice@x.com")

    def test_stranger(self):
        assert not can_act(BOB, "alice@x.com")

    def test_admin_on_anything(self):
        assert can_act(ADMIN, "alice@x.com")
        assert can_act(ADMIN, None)

    def test_missing_owner(self):
        assert not can_act(ALICE, None)


class TestOwnerFilter:

    def test_admin_without_filter_sees_all(self):
        assert owner_filter(ADMIN) is None

    def test_admin_with_filter(self):
        assert owner_filter(ADMIN, "alice@x.com") == "alice@x.com"

    def test_user_pinned_to_self(self):
        assert owner_filter(ALICE) == "alice@x.com"
        assert owner_filter(ALICE, "alice@x.com") == "alice@x.com"

    def test_user_asking_for_someone_else(self):
        with pytest.raises(Forbidden):
            owner_filter(ALICE, "bob@x.com")


class TestEnsure:

    def test_create_for_self(self):
        ensure_can_create(ALICE, "alice@x.com")

    def test_create_on_behalf_requires_admin(self):
        with pytest.raises(Forbidden):
            ensure_can_create(ALICE, "bob@x.com")
        ensure_can_create(ADMIN, "bob@x.com")

    def test_missing_record_is_404_before_ownership(self):
        with pytest.raises(NotFound) as exc:
            ensure_can_act(BOB, None, what="ticket")
        assert exc.value.message == "ticket not found"

    def test_foreign_record(self):
        record = SimpleNamespace(email="alice@x.com")
        with pytest.raises(Forbidden):
            ensure_can_act(BOB, record)
        ensure_can_act(ALICE, record)
        ensure_can_act(ADMIN, record)


class TestRole:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("admin", Role.ADMIN),
            ("ADMIN", Role.ADMIN),
            ("user", Role.USER),
            (None, Role.USER),
            ("", Role.USER),
            ("moderator", Role.USER),
        ],
    )
    def test_decode(self, raw, expected):
        assert Role.decode(raw) is expected
