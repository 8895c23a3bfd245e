"""Bell Schedule ORM — named schedules and the calendar days that use them."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from slate.db.base import Base, CORE_SCHEMA


class BellSchedule(Base):
    __tablename__ = "bell_schedules"
    __table_args__ = {"schema": CORE_SCHEMA}

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    schedule_data: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


class BellScheduleDay(Base):
    """One school's schedule assignment for one calendar day (day = YYYY-MM-DD)."""
    __tablename__ = "bell_schedule_days"
    __table_args__ = (
        UniqueConstraint("school_initials", "day"),
        {"schema": CORE_SCHEMA},
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    school_initials: Mapped[str] = mapped_column(String(20), nullable=False)
    day: Mapped[str] = mapped_column(String(10), nullable=False)
    bell_schedule_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey(f"{CORE_SCHEMA}.bell_schedules.id", ondelete="CASCADE"),
        nullable=False,
    )
