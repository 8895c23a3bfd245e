"""Auth Service — signup, signin, signout and current-user lookup.

Invariants:
    - Registration and signin failures never reveal whether an email exists
    - Passwords are hashed off the event loop (pbkdf2 is CPU bound)
    - Every successful signup/signin creates exactly one new session row
    - Signout drops the session and every cache entry owned by its user

Design Decisions:
    - Session persistence goes through SessionStore, identity resolution through
      SessionValidator: the same rules back /me and the require_auth dependency
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from slate.core.domain_types import Clock, SessionToken, UserId
from slate.core.errors import AuthenticationError, RegistrationError
from slate.core.repository_protocols import DeviceInfo, SessionStore
from slate.core.session_rules import generate_session_token, session_expiry, utc_now
from slate.infrastructure.cache import TTLCache
from slate.infrastructure.database import guarded
from slate.infrastructure.passwords import hash_password, verify_password
from slate.models.user import User
from slate.services.session_validator import SessionValidator

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass(frozen=True)
class AuthResult:
    user: dict
    token: SessionToken


class AuthService:
    """Account and session operations for one request."""

    def __init__(
        self,
        db: AsyncSession,
        store: SessionStore,
        cache: TTLCache,
        clock: Clock = utc_now,
        session_ttl_days: int = 30,
    ):
        self._db = db
        self._store = store
        self._cache = cache
        self._clock = clock
        self._session_ttl_days = session_ttl_days

    async def signup(
        self,
        email: str,
        name: str,
        password: str,
        school_id: UUID | None = None,
        device: DeviceInfo | None = None,
    ) -> AuthResult:
        if await self._find_user_by_email(email) is not None:
            logger.info("Signup rejected for existing email")
            raise RegistrationError(INVALID_CREDENTIALS)

        password_hash = await run_in_threadpool(hash_password, password)
        user = User(
            email=email, name=name, password_hash=password_hash, school_id=school_id,
        )
        async with guarded(self._db, "create user"):
            self._db.add(user)
            try:
                await self._db.commit()
            except IntegrityError:
                # a concurrent signup took the email after the check above
                await self._db.rollback()
                logger.info("Signup rejected for existing email")
                raise RegistrationError(INVALID_CREDENTIALS)
            await self._db.refresh(user)

        token = await self._open_session(UserId(user.id), device)
        logger.info("User signed up", extra={"user_id": user.id})
        return AuthResult(user=user.public_dict(), token=token)

    async def signin(
        self, email: str, password: str, device: DeviceInfo | None = None,
    ) -> AuthResult:
        user = await self._find_user_by_email(email)
        if user is None:
            raise AuthenticationError(INVALID_CREDENTIALS)
        if not await run_in_threadpool(verify_password, password, user.password_hash):
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = await self._open_session(UserId(user.id), device)
        logger.info("User signed in", extra={"user_id": user.id})
        return AuthResult(user=user.public_dict(), token=token)

    async def signout(self, token: str) -> None:
        """Delete the session behind token (if any) and forget its user's cache."""
        record = await self._store.find_by_token(token)
        if record is None:
            return
        await self._store.delete_by_token(token)
        removed = self._cache.clear_user(record.user_id)
        logger.info(
            "User signed out",
            extra={"user_id": record.user_id, "cache_removed": removed},
        )

    async def current_user(self, token: str | None) -> dict | None:
        """Public user record for a live session token, else None."""
        validator = SessionValidator(self._store, self._clock)
        user_id = await validator.resolve(token)
        if user_id is None:
            return None
        async with guarded(self._db, "load user"):
            user = await self._db.get(User, user_id)
        return user.public_dict() if user else None

    async def _find_user_by_email(self, email: str) -> User | None:
        async with guarded(self._db, "find user"):
            result = await self._db.execute(select(User).where(User.email == email))
            return result.scalar_one_or_none()

    async def _open_session(
        self, user_id: UserId, device: DeviceInfo | None,
    ) -> SessionToken:
        token = generate_session_token()
        expires_at = session_expiry(self._clock(), self._session_ttl_days)
        await self._store.create(user_id, token, expires_at, device)
        return token
