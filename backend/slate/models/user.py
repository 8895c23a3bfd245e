"""User ORM — account record in core.users.

Invariants:
    - email is unique; password_hash is never serialized to clients
    - canvas_* columns are null until a Canvas token is connected
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from slate.db.base import Base, CORE_SCHEMA


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"schema": CORE_SCHEMA}

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    school_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), nullable=True,
    )
    canvas_access_token: Mapped[str | None] = mapped_column(Text, nullable=True)
    canvas_token_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def public_dict(self) -> dict:
        """Client-facing projection (no secrets)."""
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "school_id": self.school_id,
            "created_at": self.created_at,
        }
