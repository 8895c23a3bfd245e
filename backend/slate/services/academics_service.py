"""Academics Service — profile, courses, extracurriculars and dashboard stats.

Invariants:
    - Every query filters by user_id; someone else's row reads as missing
    - A profile row exists after get_or_create_profile/upsert_profile returns
    - Any profile, course or extracurricular write drops the owner's cached stats
    - updated_at is stamped on every write
"""

import logging
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from slate.core.domain_types import CacheEndpoint, Clock, UserId
from slate.core.errors import ResourceNotFoundError
from slate.core.profile_stats import build_dashboard_stats
from slate.core.session_rules import utc_now
from slate.infrastructure.cache import TTLCache
from slate.infrastructure.database import guarded
from slate.models.course import Course
from slate.models.extracurricular import Extracurricular
from slate.models.profile import UserProfile

logger = logging.getLogger(__name__)


class AcademicsService:
    def __init__(
        self,
        db: AsyncSession,
        user_id: UserId,
        cache: TTLCache,
        clock: Clock = utc_now,
        stats_ttl: float | None = None,
    ):
        self._db = db
        self._user_id = user_id
        self._cache = cache
        self._clock = clock
        self._stats_ttl = stats_ttl

    # ─── Profile ─────────────────────────────────────────────────

    async def get_or_create_profile(self) -> dict:
        async with guarded(self._db, "load profile"):
            profile = await self._load_profile()
            if profile is None:
                profile = UserProfile(user_id=self._user_id, updated_at=self._clock())
                self._db.add(profile)
                await self._db.commit()
                await self._db.refresh(profile)
                logger.info("Profile created", extra={"user_id": self._user_id})
        return profile.as_dict()

    async def upsert_profile(self, changes: dict) -> dict:
        """Insert or update the caller's profile; only keys present in changes are written."""
        async with guarded(self._db, "upsert profile"):
            profile = await self._load_profile()
            if profile is None:
                profile = UserProfile(user_id=self._user_id)
                self._db.add(profile)
            for name, value in changes.items():
                setattr(profile, name, value)
            profile.updated_at = self._clock()
            await self._db.commit()
            await self._db.refresh(profile)
        self._invalidate_stats()
        return profile.as_dict()

    async def _load_profile(self) -> UserProfile | None:
        result = await self._db.execute(
            select(UserProfile).where(UserProfile.user_id == self._user_id),
        )
        return result.scalar_one_or_none()

    # ─── Courses ─────────────────────────────────────────────────

    async def list_courses(self) -> list[dict]:
        async with guarded(self._db, "list courses"):
            result = await self._db.execute(
                select(Course)
                .where(Course.user_id == self._user_id)
                .order_by(Course.year.desc(), Course.semester.desc()),
            )
            return [c.as_dict() for c in result.scalars().all()]

    async def create_course(self, values: dict) -> dict:
        course = await self._insert(Course(user_id=self._user_id, **values), "create course")
        return course.as_dict()

    async def update_course(self, course_id: UUID, changes: dict) -> dict:
        course = await self._update(Course, course_id, changes, "Course")
        return course.as_dict()

    async def delete_course(self, course_id: UUID) -> None:
        await self._delete(Course, course_id, "Course")

    # ─── Extracurriculars ────────────────────────────────────────

    async def list_extracurriculars(self) -> list[dict]:
        async with guarded(self._db, "list extracurriculars"):
            result = await self._db.execute(
                select(Extracurricular)
                .where(Extracurricular.user_id == self._user_id)
                .order_by(Extracurricular.created_at.desc()),
            )
            return [e.as_dict() for e in result.scalars().all()]

    async def create_extracurricular(self, values: dict) -> dict:
        ec = await self._insert(
            Extracurricular(user_id=self._user_id, **values), "create extracurricular",
        )
        return ec.as_dict()

    async def update_extracurricular(self, ec_id: UUID, changes: dict) -> dict:
        ec = await self._update(Extracurricular, ec_id, changes, "Extracurricular")
        return ec.as_dict()

    async def delete_extracurricular(self, ec_id: UUID) -> None:
        await self._delete(Extracurricular, ec_id, "Extracurricular")

    # ─── Stats ───────────────────────────────────────────────────

    async def dashboard_stats(self) -> dict:
        """Dashboard summary, served from the cache while fresh."""
        return await self._cache.get_cached_or_fetch(
            self._user_id,
            CacheEndpoint.ACADEMICS_STATS.value,
            self._compute_stats,
            ttl=self._stats_ttl,
        )

    async def _compute_stats(self) -> dict:
        profile = await self.get_or_create_profile()
        async with guarded(self._db, "count academics"):
            courses_count = await self._db.scalar(
                select(func.count()).select_from(Course)
                .where(Course.user_id == self._user_id),
            )
            ecs_count = await self._db.scalar(
                select(func.count()).select_from(Extracurricular)
                .where(Extracurricular.user_id == self._user_id),
            )
        return build_dashboard_stats(profile, courses_count or 0, ecs_count or 0)

    def _invalidate_stats(self) -> None:
        self._cache.clear(self._user_id, CacheEndpoint.ACADEMICS_STATS.value)

    # ─── Owner-scoped row helpers ────────────────────────────────

    async def _insert(self, row, operation: str):
        row.updated_at = self._clock()
        async with guarded(self._db, operation):
            self._db.add(row)
            await self._db.commit()
            await self._db.refresh(row)
        self._invalidate_stats()
        return row

    async def _update(self, model, row_id: UUID, changes: dict, resource: str):
        async with guarded(self._db, f"update {resource.lower()}"):
            result = await self._db.execute(
                select(model).where(model.id == row_id, model.user_id == self._user_id),
            )
            row = result.scalar_one_or_none()
            if row is None:
                raise ResourceNotFoundError(resource, str(row_id))
            for name, value in changes.items():
                setattr(row, name, value)
            row.updated_at = self._clock()
            await self._db.commit()
            await self._db.refresh(row)
        self._invalidate_stats()
        return row

    async def _delete(self, model, row_id: UUID, resource: str) -> None:
        async with guarded(self._db, f"delete {resource.lower()}"):
            result = await self._db.execute(
                delete(model)
                .where(model.id == row_id, model.user_id == self._user_id),
            )
            if result.rowcount == 0:
                raise ResourceNotFoundError(resource, str(row_id))
            await self._db.commit()
        self._invalidate_stats()
