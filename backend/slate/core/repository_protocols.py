"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The session validator sees sessions only through SessionStore
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - SessionRecord is a frozen dataclass, not the ORM row: the validator never
      holds a live ORM object across an await
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from slate.core.domain_types import SessionToken, UserId


@dataclass(frozen=True)
class DeviceInfo:
    """Client metadata captured when a session is created."""
    device_name: str | None = None
    user_agent: str | None = None
    ip_address: str | None = None


@dataclass(frozen=True)
class SessionRecord:
    """The slice of a stored session the validator needs."""
    token: SessionToken
    user_id: UserId
    expires_at: datetime


class SessionStore(Protocol):
    """Contract for session persistence — implemented by shell."""
    async def create(
        self,
        user_id: UserId,
        token: SessionToken,
        expires_at: datetime,
        device: DeviceInfo | None = None,
    ) -> None: ...
    async def find_by_token(self, token: str) -> SessionRecord | None: ...
    async def delete_by_token(self, token: str) -> None: ...
