"""Schedule Routes — today's bell schedule for a school. Public, no session needed."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from slate.api.dependencies import get_clock
from slate.core.domain_types import Clock
from slate.infrastructure.database import get_db
from slate.services.schedules_service import schedule_for_day

router = APIRouter(prefix="/api/schedules", tags=["schedules"])


@router.get("/{school_initials}/today")
async def todays_schedule(
    school_initials: str,
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
):
    return await schedule_for_day(db, school_initials, clock().date())
