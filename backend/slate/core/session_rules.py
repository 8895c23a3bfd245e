"""Session Rules — pure decisions about session tokens, expiry and device metadata.

Invariants:
    - A session is live iff now < expires_at (strict)
    - Naive datetimes are read as UTC (some stores drop tzinfo on the way back)
    - Tokens are 64 hex chars drawn from 32 bytes of OS randomness
"""

import secrets
from datetime import datetime, timedelta, timezone

from slate.core.domain_types import SessionToken

SESSION_COOKIE_NAME = "session_token"
TOKEN_BYTES = 32


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_session_token() -> SessionToken:
    return SessionToken(secrets.token_hex(TOKEN_BYTES))


def session_expiry(now: datetime, ttl_days: int) -> datetime:
    return now + timedelta(days=ttl_days)


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def is_session_live(expires_at: datetime, now: datetime) -> bool:
    """True while the session has not reached its expiry instant."""
    return as_utc(now) < as_utc(expires_at)


def describe_device(user_agent: str | None) -> str | None:
    """Coarse device label from a User-Agent header."""
    if not user_agent:
        return None
    if "Mobile" in user_agent:
        return "Mobile Device"
    if "Tablet" in user_agent:
        return "Tablet"
    return "Desktop"
