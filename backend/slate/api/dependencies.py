"""Request Dependencies — DB, cache, clock and session-cookie auth for routes.

Invariants:
    - require_auth either yields a UserId or raises AuthenticationError (401)
    - optional_auth never raises for a bad/expired token; it yields None
    - The resolved identity is also stored on request.state.user_id
    - Cookie flags: httpOnly, path "/", Secure + SameSite=strict in production

Design Decisions:
    - The cache lives on app.state (created by the lifespan), not in a module global
    - get_clock is its own dependency so tests can pin "now"
"""

from fastapi import Cookie, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from slate.config import get_settings
from slate.core.domain_types import Clock, UserId
from slate.core.errors import AuthenticationError
from slate.core.repository_protocols import DeviceInfo
from slate.core.session_rules import SESSION_COOKIE_NAME, describe_device, utc_now
from slate.infrastructure.cache import TTLCache
from slate.infrastructure.database import get_db
from slate.infrastructure.session_store import SqlSessionStore
from slate.services.session_validator import SessionValidator


def get_cache(request: Request) -> TTLCache:
    return request.app.state.cache


def get_clock() -> Clock:
    return utc_now


def get_session_store(db: AsyncSession = Depends(get_db)) -> SqlSessionStore:
    return SqlSessionStore(db)


def get_session_validator(
    store: SqlSessionStore = Depends(get_session_store),
    clock: Clock = Depends(get_clock),
) -> SessionValidator:
    return SessionValidator(store, clock)


async def require_auth(
    request: Request,
    session_token: str | None = Cookie(None),
    validator: SessionValidator = Depends(get_session_validator),
) -> UserId:
    """Strict mode: 401 unless the session cookie resolves to a live session."""
    if not session_token:
        raise AuthenticationError("Not authenticated")
    user_id = await validator.resolve(session_token)
    if user_id is None:
        raise AuthenticationError("Invalid or expired session")
    request.state.user_id = user_id
    return user_id


async def optional_auth(
    request: Request,
    session_token: str | None = Cookie(None),
    validator: SessionValidator = Depends(get_session_validator),
) -> UserId | None:
    """Permissive mode: the caller's UserId when signed in, otherwise None."""
    user_id = await validator.resolve(session_token)
    request.state.user_id = user_id
    return user_id


def device_info(request: Request) -> DeviceInfo:
    user_agent = request.headers.get("user-agent")
    return DeviceInfo(
        device_name=describe_device(user_agent),
        user_agent=user_agent,
        ip_address=request.client.host if request.client else None,
    )


# ─── Session cookie ──────────────────────────────────────────────

def _cookie_options() -> dict:
    settings = get_settings()
    options = {
        "httponly": True,
        "secure": settings.is_production,
        "samesite": "strict" if settings.is_production else "lax",
        "path": "/",
    }
    if settings.cookie_domain:
        options["domain"] = settings.cookie_domain
    return options


def set_session_cookie(response: Response, token: str) -> None:
    settings = get_settings()
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=settings.session_ttl_days * 24 * 60 * 60,
        **_cookie_options(),
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(SESSION_COOKIE_NAME, **_cookie_options())
