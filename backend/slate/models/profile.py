"""UserProfile ORM — one academics profile per user (upsert target, unique user_id)."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Integer, Float, DateTime, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from slate.db.base import Base, ACADEMICS_SCHEMA, CORE_SCHEMA


class UserProfile(Base):
    __tablename__ = "user_profile"
    __table_args__ = {"schema": ACADEMICS_SCHEMA}

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey(f"{CORE_SCHEMA}.users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    school_id: Mapped[uuid.UUID | None] = mapped_column(UUID(as_uuid=True), nullable=True)
    wgpa: Mapped[float | None] = mapped_column(Float, nullable=True)
    uwgpa: Mapped[float | None] = mapped_column(Float, nullable=True)
    sat_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sat_reading: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sat_math: Mapped[int | None] = mapped_column(Integer, nullable=True)
    act_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    class_rank: Mapped[int | None] = mapped_column(Integer, nullable=True)
    class_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    graduation_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    major_interest: Mapped[list | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
