"""Auth Routes — signup, signin, signout and current user over a session cookie.

Invariants:
    - signup/signin set the session_token cookie; the token is never in the body
    - signout always clears the cookie, even without a live session
    - /me answers 401 for a missing, unknown or expired cookie
"""

import logging

from fastapi import APIRouter, Cookie, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from slate.api.dependencies import (
    clear_session_cookie, device_info, get_cache, get_clock,
    get_session_store, set_session_cookie,
)
from slate.config import get_settings
from slate.core.domain_types import Clock
from slate.core.errors import AuthenticationError
from slate.infrastructure.cache import TTLCache
from slate.infrastructure.database import get_db
from slate.infrastructure.session_store import SqlSessionStore
from slate.schemas.auth import SigninRequest, SignupRequest
from slate.services.auth_service import AuthService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    store: SqlSessionStore = Depends(get_session_store),
    cache: TTLCache = Depends(get_cache),
    clock: Clock = Depends(get_clock),
) -> AuthService:
    return AuthService(
        db, store, cache, clock, session_ttl_days=get_settings().session_ttl_days,
    )


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    body: SignupRequest,
    request: Request,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
):
    result = await auth.signup(
        body.email, body.name, body.password, body.school_id, device_info(request),
    )
    set_session_cookie(response, result.token)
    return {"user": result.user}


@router.post("/signin")
async def signin(
    body: SigninRequest,
    request: Request,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
):
    result = await auth.signin(body.email, body.password, device_info(request))
    set_session_cookie(response, result.token)
    return {"user": result.user}


@router.post("/signout")
async def signout(
    response: Response,
    session_token: str | None = Cookie(None),
    auth: AuthService = Depends(get_auth_service),
):
    if session_token:
        await auth.signout(session_token)
    clear_session_cookie(response)
    return {"message": "Signed out successfully"}


@router.get("/me")
async def me(
    session_token: str | None = Cookie(None),
    auth: AuthService = Depends(get_auth_service),
):
    if not session_token:
        raise AuthenticationError("Not authenticated")
    user = await auth.current_user(session_token)
    if user is None:
        raise AuthenticationError("Invalid or expired session")
    return {"user": user}
