"""Auth routes — signup/signin/signout/me over the session cookie.

Invariants:
    - The session token only travels in the httpOnly session_token cookie
    - Registration and signin errors never reveal which part was wrong
    - An expired session answers 401 and its row is gone afterwards
"""

from sqlalchemy import select

from slate.api import dependencies
from slate.config import Settings
from slate.models.user_session import UserSession
from tests.services.helpers import sign_up


async def test_signup_returns_public_user_and_sets_cookie(client):
    res = await client.post(
        "/api/auth/signup",
        json={"email": "ada@example.com", "name": "Ada", "password": "s3cret-pass"},
        headers={"user-agent": "Mozilla/5.0 (iPhone) Mobile"},
    )
    assert res.status_code == 201
    user = res.json()["user"]
    assert user["email"] == "ada@example.com"
    assert "password_hash" not in user
    assert "canvas_access_token" not in user
    assert len(client.cookies["session_token"]) == 64
    set_cookie = res.headers["set-cookie"].lower()
    assert "httponly" in set_cookie
    assert "samesite=lax" in set_cookie
    assert "path=/" in set_cookie


async def test_signup_records_device_metadata(client, test_db):
    await client.post(
        "/api/auth/signup",
        json={"email": "ada@example.com", "name": "Ada", "password": "s3cret-pass"},
        headers={"user-agent": "Mozilla/5.0 (iPhone) Mobile"},
    )
    row = (await test_db.execute(select(UserSession))).scalar_one()
    assert row.device_name == "Mobile Device"
    assert row.user_agent == "Mozilla/5.0 (iPhone) Mobile"


async def test_signup_existing_email_is_rejected_generically(client, user):
    res = await client.post(
        "/api/auth/signup",
        json={"email": "ada@example.com", "name": "Ada 2", "password": "another-pass"},
    )
    assert res.status_code == 400
    body = res.json()["error"]
    assert body["code"] == "REGISTRATION_REJECTED"
    assert body["message"] == "Invalid email or password"


async def test_signup_validates_payload(client):
    res = await client.post(
        "/api/auth/signup",
        json={"email": "not-an-email", "name": "Ada", "password": "short"},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    fields = {d["field"] for d in error["details"]}
    assert "body.email" in fields
    assert "body.password" in fields


async def test_signin_with_correct_password(client, user):
    client.cookies.clear()
    res = await client.post(
        "/api/auth/signin",
        json={"email": "ada@example.com", "password": "s3cret-pass"},
    )
    assert res.status_code == 200
    assert res.json()["user"]["id"] == user["id"]
    assert "session_token" in client.cookies


async def test_signin_wrong_password_and_unknown_email_look_the_same(client, user):
    client.cookies.clear()
    wrong = await client.post(
        "/api/auth/signin",
        json={"email": "ada@example.com", "password": "nope-nope"},
    )
    unknown = await client.post(
        "/api/auth/signin",
        json={"email": "ghost@example.com", "password": "nope-nope"},
    )
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json()["error"]["message"] == unknown.json()["error"]["message"]
    assert wrong.json()["error"]["code"] == "NOT_AUTHENTICATED"


async def test_each_signin_creates_a_new_session(client, user, test_db):
    await client.post(
        "/api/auth/signin",
        json={"email": "ada@example.com", "password": "s3cret-pass"},
    )
    rows = (await test_db.execute(select(UserSession))).scalars().all()
    assert len(rows) == 2


async def test_me_returns_current_user(client, user):
    res = await client.get("/api/auth/me")
    assert res.status_code == 200
    assert res.json()["user"] == user


async def test_me_without_cookie_is_401(client):
    res = await client.get("/api/auth/me")
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Not authenticated"


async def test_me_with_unknown_token_is_401(client):
    client.cookies.set("session_token", "f" * 64)
    res = await client.get("/api/auth/me")
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Invalid or expired session"


async def test_expired_session_is_rejected_and_deleted(client, user, wall_clock, test_db):
    wall_clock.advance(days=30, seconds=1)

    res = await client.get("/api/academics/profile")

    assert res.status_code == 401
    rows = (await test_db.execute(select(UserSession))).scalars().all()
    assert rows == []


async def test_session_still_valid_just_before_expiry(client, user, wall_clock):
    wall_clock.advance(days=29, hours=23)
    res = await client.get("/api/auth/me")
    assert res.status_code == 200


async def test_signout_deletes_session_and_clears_cookie(client, user, test_db):
    res = await client.post("/api/auth/signout")
    assert res.status_code == 200
    assert res.json() == {"message": "Signed out successfully"}
    assert "session_token" not in client.cookies
    rows = (await test_db.execute(select(UserSession))).scalars().all()
    assert rows == []

    again = await client.get("/api/auth/me")
    assert again.status_code == 401


async def test_signout_drops_the_users_cache_entries(client, user, cache):
    await client.get("/api/academics/stats")
    other = await cache.get_cached_or_fetch("someone-else", "x", _const("kept"))
    assert len(cache) == 2

    await client.post("/api/auth/signout")

    assert cache.stats()["keys"] == ["someone-else:x"]
    assert other == "kept"


async def test_signout_without_cookie_still_succeeds(client):
    res = await client.post("/api/auth/signout")
    assert res.status_code == 200


async def test_second_account_gets_its_own_session(client, user):
    client.cookies.clear()
    other = await sign_up(client, email="grace@example.com", name="Grace")
    me = await client.get("/api/auth/me")
    assert me.json()["user"]["id"] == other["id"] != user["id"]


async def test_production_cookie_is_secure_strict_and_scoped(client, monkeypatch, test_db):
    production = Settings(environment="production", cookie_domain="slate.example")
    monkeypatch.setattr(dependencies, "get_settings", lambda: production)

    res = await client.post(
        "/api/auth/signup",
        json={"email": "ada@example.com", "name": "Ada", "password": "s3cret-pass"},
    )
    assert res.status_code == 201
    set_cookie = res.headers["set-cookie"].lower()
    assert "httponly" in set_cookie
    assert "secure" in set_cookie
    assert "samesite=strict" in set_cookie
    assert "max-age=2592000" in set_cookie
    assert "domain=slate.example" in set_cookie
    assert "path=/" in set_cookie

    token = set_cookie.split(";")[0].split("=", 1)[1]
    client.cookies.clear()
    out = await client.post(
        "/api/auth/signout", headers={"cookie": f"session_token={token}"},
    )
    assert (await test_db.execute(select(UserSession))).scalars().all() == []
    cleared = out.headers["set-cookie"].lower()
    assert "max-age=0" in cleared
    assert "secure" in cleared
    assert "samesite=strict" in cleared
    assert "domain=slate.example" in cleared
    assert "path=/" in cleared


def _const(value):
    async def produce():
        return value
    return produce
