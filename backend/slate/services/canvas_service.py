"""Canvas Service — bookkeeping for the user's Canvas LMS access token.

Invariants:
    - connect stores the token as given; it is never echoed back to clients
    - expires_in_days is floored; needs_renewal iff expires_in_days <= 7
"""

import logging
import math
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from slate.core.domain_types import Clock, UserId
from slate.core.errors import ResourceNotFoundError
from slate.core.session_rules import as_utc, utc_now
from slate.infrastructure.database import guarded
from slate.models.user import User

logger = logging.getLogger(__name__)

RENEWAL_WINDOW_DAYS = 7
SECONDS_PER_DAY = 24 * 60 * 60


def describe_token_status(expires_at: datetime | None, now: datetime) -> dict:
    if expires_at is None:
        return {"connected": True, "expires_in_days": None,
                "expires_at": None, "needs_renewal": True}
    expires_at = as_utc(expires_at)
    days = math.floor((expires_at - as_utc(now)).total_seconds() / SECONDS_PER_DAY)
    return {
        "connected": True,
        "expires_in_days": days,
        "expires_at": expires_at,
        "needs_renewal": days <= RENEWAL_WINDOW_DAYS,
    }


async def connect(
    db: AsyncSession, user_id: UserId, api_key: str, expires_at: datetime,
) -> None:
    async with guarded(db, "connect canvas"):
        user = await db.get(User, user_id)
        if user is None:
            raise ResourceNotFoundError("User", str(user_id))
        user.canvas_access_token = api_key
        user.canvas_token_expires_at = as_utc(expires_at)
        await db.commit()
    logger.info("Canvas token stored", extra={"user_id": user_id})


async def token_status(
    db: AsyncSession, user_id: UserId, clock: Clock = utc_now,
) -> dict:
    async with guarded(db, "load canvas status"):
        user = await db.get(User, user_id)
    if user is None or not user.canvas_access_token:
        return {"connected": False}
    return describe_token_status(user.canvas_token_expires_at, clock())
