"""Session Validator — resolves a session token to its owning user, failing closed.

Invariants:
    - Returns None for absent, unknown or expired tokens, and on any lookup error
    - An expired session is deleted on detection; a failed delete is logged and
      the answer is still None
    - A live session is returned as-is (never touched, never extended)

Design Decisions:
    - Store and clock injected: the same validator runs against SQL or a fake store
"""

import logging

from slate.core.domain_types import Clock, UserId
from slate.core.repository_protocols import SessionStore
from slate.core.session_rules import is_session_live, utc_now

logger = logging.getLogger(__name__)


class SessionValidator:
    """Token → UserId lookup with lazy expiry cleanup."""

    def __init__(self, store: SessionStore, clock: Clock = utc_now):
        self._store = store
        self._clock = clock

    async def resolve(self, token: str | None) -> UserId | None:
        if not token:
            return None
        try:
            record = await self._store.find_by_token(token)
        except Exception as e:
            logger.warning(f"Session lookup failed, treating as unauthenticated: {e}")
            return None
        if record is None:
            return None

        if not is_session_live(record.expires_at, self._clock()):
            await self._discard_expired(token, record.user_id)
            return None
        return record.user_id

    async def _discard_expired(self, token: str, user_id: UserId) -> None:
        try:
            await self._store.delete_by_token(token)
        except Exception as e:
            logger.warning(
                f"Failed to delete expired session: {e}",
                extra={"user_id": user_id},
            )
            return
        logger.info("Expired session removed", extra={"user_id": user_id})
