"""Shared helpers for route tests: a settable wall clock and account setup."""

from datetime import datetime, timedelta, timezone

START = datetime(2030, 3, 1, 9, 0, tzinfo=timezone.utc)


class WallClock:
    """Settable UTC clock, injected wherever the app asks for "now"."""

    def __init__(self, start: datetime = START):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta) -> None:
        self.now += timedelta(**delta)


async def sign_up(client, email="ada@example.com", password="s3cret-pass", name="Ada"):
    """Create an account; the client keeps the session cookie. Returns the user dict."""
    res = await client.post(
        "/api/auth/signup",
        json={"email": email, "name": name, "password": password},
    )
    assert res.status_code == 201, res.text
    return res.json()["user"]


async def switch_user(client, email: str, name: str = "Other"):
    """Drop the current cookie and sign up a second account on the same client."""
    client.cookies.clear()
    return await sign_up(client, email=email, name=name)
