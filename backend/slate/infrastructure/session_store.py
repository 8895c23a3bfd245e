"""SQL Session Store — core.sessions persistence behind the SessionStore protocol.

Invariants:
    - find_by_token returns a detached SessionRecord, never the ORM row
    - Every method commits its own unit of work
    - SQLAlchemy failures surface as PersistenceError (via guarded)
"""

from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from slate.core.domain_types import SessionToken, UserId
from slate.core.repository_protocols import DeviceInfo, SessionRecord
from slate.infrastructure.database import guarded
from slate.models.user_session import UserSession


class SqlSessionStore:
    """SessionStore backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(
        self,
        user_id: UserId,
        token: SessionToken,
        expires_at: datetime,
        device: DeviceInfo | None = None,
    ) -> None:
        device = device or DeviceInfo()
        async with guarded(self._db, "create session"):
            self._db.add(UserSession(
                user_id=user_id,
                token=token,
                expires_at=expires_at,
                device_name=device.device_name,
                user_agent=device.user_agent,
                ip_address=device.ip_address,
            ))
            await self._db.commit()

    async def find_by_token(self, token: str) -> SessionRecord | None:
        async with guarded(self._db, "find session"):
            result = await self._db.execute(
                select(
                    UserSession.token, UserSession.user_id, UserSession.expires_at,
                ).where(UserSession.token == token),
            )
            row = result.one_or_none()
        if row is None:
            return None
        return SessionRecord(
            token=SessionToken(row.token),
            user_id=UserId(row.user_id),
            expires_at=row.expires_at,
        )

    async def delete_by_token(self, token: str) -> None:
        async with guarded(self._db, "delete session"):
            await self._db.execute(
                delete(UserSession).where(UserSession.token == token),
            )
            await self._db.commit()
