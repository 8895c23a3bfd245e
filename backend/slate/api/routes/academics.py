"""Academics Routes — profile, courses, extracurriculars and dashboard stats.

All routes require a session; rows are scoped to the caller.
"""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from slate.api.dependencies import get_cache, get_clock, require_auth
from slate.config import get_settings
from slate.core.domain_types import Clock, UserId
from slate.infrastructure.cache import TTLCache
from slate.infrastructure.database import get_db
from slate.schemas.academics import (
    CourseCreate, CourseUpdate, ExtracurricularCreate, ExtracurricularUpdate,
    ProfileUpsert,
)
from slate.services.academics_service import AcademicsService

router = APIRouter(prefix="/api/academics", tags=["academics"])


def get_academics_service(
    user_id: UserId = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
    cache: TTLCache = Depends(get_cache),
    clock: Clock = Depends(get_clock),
) -> AcademicsService:
    return AcademicsService(
        db, user_id, cache, clock, stats_ttl=get_settings().stats_cache_ttl_seconds,
    )


@router.get("/profile")
async def get_profile(service: AcademicsService = Depends(get_academics_service)):
    return {"profile": await service.get_or_create_profile()}


@router.post("/profile")
async def upsert_profile(
    body: ProfileUpsert,
    service: AcademicsService = Depends(get_academics_service),
):
    profile = await service.upsert_profile(body.model_dump(exclude_unset=True))
    return {"profile": profile}


# ─── Courses ─────────────────────────────────────────────────────

@router.get("/courses")
async def list_courses(service: AcademicsService = Depends(get_academics_service)):
    return {"courses": await service.list_courses()}


@router.post("/courses/create")
async def create_course(
    body: CourseCreate,
    service: AcademicsService = Depends(get_academics_service),
):
    return {"course": await service.create_course(body.model_dump())}


@router.patch("/courses/{course_id}")
async def update_course(
    course_id: UUID,
    body: CourseUpdate,
    service: AcademicsService = Depends(get_academics_service),
):
    course = await service.update_course(course_id, body.model_dump(exclude_unset=True))
    return {"course": course}


@router.delete("/courses/{course_id}")
async def delete_course(
    course_id: UUID,
    service: AcademicsService = Depends(get_academics_service),
):
    await service.delete_course(course_id)
    return {"success": True}


# ─── Extracurriculars ────────────────────────────────────────────

@router.get("/extracurriculars")
async def list_extracurriculars(
    service: AcademicsService = Depends(get_academics_service),
):
    return {"extracurriculars": await service.list_extracurriculars()}


@router.post("/extracurriculars/create")
async def create_extracurricular(
    body: ExtracurricularCreate,
    service: AcademicsService = Depends(get_academics_service),
):
    return {"extracurricular": await service.create_extracurricular(body.model_dump())}


@router.patch("/extracurriculars/{ec_id}")
async def update_extracurricular(
    ec_id: UUID,
    body: ExtracurricularUpdate,
    service: AcademicsService = Depends(get_academics_service),
):
    ec = await service.update_extracurricular(ec_id, body.model_dump(exclude_unset=True))
    return {"extracurricular": ec}


@router.delete("/extracurriculars/{ec_id}")
async def delete_extracurricular(
    ec_id: UUID,
    service: AcademicsService = Depends(get_academics_service),
):
    await service.delete_extracurricular(ec_id)
    return {"success": True}


@router.get("/stats")
async def dashboard_stats(service: AcademicsService = Depends(get_academics_service)):
    return await service.dashboard_stats()
