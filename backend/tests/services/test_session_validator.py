"""Tests for SessionValidator — token → identity, fail closed, lazy expiry cleanup."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from slate.services.session_validator import SessionValidator
from tests.services.fake_session_store import FakeSessionStore

NOW = datetime(2030, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def store():
    return FakeSessionStore()


@pytest.fixture
def validator(store):
    return SessionValidator(store, clock=lambda: NOW)


async def test_unknown_token_has_no_identity(validator):
    assert await validator.resolve("nope") is None


async def test_empty_token_skips_the_store(validator, store):
    assert await validator.resolve("") is None
    assert await validator.resolve(None) is None
    assert store.calls == []


async def test_live_session_returns_owner_and_is_untouched(validator, store):
    owner = uuid4()
    store.add("t1", owner, NOW + timedelta(days=1))

    assert await validator.resolve("t1") == owner
    assert store.calls == [("find", "t1")]
    assert "t1" in store.records


async def test_expired_session_has_no_identity_and_is_deleted(validator, store):
    store.add("old", uuid4(), NOW - timedelta(seconds=1))

    assert await validator.resolve("old") is None
    assert ("delete", "old") in store.calls
    assert "old" not in store.records


async def test_session_expiring_exactly_now_is_expired(validator, store):
    store.add("edge", uuid4(), NOW)
    assert await validator.resolve("edge") is None
    assert "edge" not in store.records


async def test_lookup_failure_fails_closed(validator, store):
    store.add("t1", uuid4(), NOW + timedelta(days=1))
    store.fail_find = True
    assert await validator.resolve("t1") is None


async def test_failed_delete_still_reports_no_identity(validator, store):
    store.add("old", uuid4(), NOW - timedelta(days=1))
    store.fail_delete = True
    assert await validator.resolve("old") is None


async def test_naive_expiry_compared_as_utc(validator, store):
    owner = uuid4()
    store.add("t1", owner, (NOW + timedelta(minutes=5)).replace(tzinfo=None))
    assert await validator.resolve("t1") == owner
