"""Bell schedule lookup for a school on a given day (public, no owner)."""

from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from slate.core.errors import ResourceNotFoundError
from slate.infrastructure.database import guarded
from slate.models.bell_schedule import BellSchedule, BellScheduleDay


async def schedule_for_day(db: AsyncSession, school_initials: str, day: date) -> dict:
    async with guarded(db, "load bell schedule"):
        result = await db.execute(
            select(BellSchedule.name, BellSchedule.schedule_data)
            .join(BellScheduleDay, BellScheduleDay.bell_schedule_id == BellSchedule.id)
            .where(
                BellScheduleDay.school_initials == school_initials,
                BellScheduleDay.day == day.isoformat(),
            ),
        )
        row = result.one_or_none()
    if row is None:
        raise ResourceNotFoundError("BellSchedule", f"{school_initials}/{day.isoformat()}")
    return {"name": row.name, "schedule": row.schedule_data}
