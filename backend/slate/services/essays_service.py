"""Essays Service — prompt catalogue, user essays with version history, examples.

Invariants:
    - word_count is always recomputed from content on the server
    - A new essay is version 1 with a matching essay_versions row
    - An update that changes content bumps version and records the new snapshot;
      metadata-only updates leave version untouched
    - User essays and their versions are owner-scoped (others' read as missing)
    - Example essays expose public rows only
"""

import logging
from uuid import UUID

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from slate.core.domain_types import Clock, ExampleSort, UserId
from slate.core.errors import ResourceNotFoundError
from slate.core.session_rules import utc_now
from slate.core.text_metrics import count_words_from_html
from slate.infrastructure.database import guarded
from slate.models.essay_prompt import EssayPrompt
from slate.models.essay_version import EssayVersion
from slate.models.example_essay import ExampleEssay
from slate.models.user_essay import UserEssay
from slate.services.pagination import fetch_page

logger = logging.getLogger(__name__)


# ─── Prompts (shared catalogue) ──────────────────────────────────

async def search_prompts(
    db: AsyncSession,
    limit: int,
    offset: int,
    query: str | None = None,
    college_id: UUID | None = None,
    prompt_type: str | None = None,
    year: int | None = None,
    is_active: bool | None = None,
) -> dict:
    stmt = select(EssayPrompt)
    if college_id is not None:
        stmt = stmt.where(EssayPrompt.college_id == college_id)
    if prompt_type is not None:
        stmt = stmt.where(EssayPrompt.prompt_type == prompt_type)
    if year is not None:
        stmt = stmt.where(EssayPrompt.year == year)
    if is_active is not None:
        stmt = stmt.where(EssayPrompt.is_active == is_active)
    if query:
        pattern = f"%{query}%"
        stmt = stmt.where(or_(
            EssayPrompt.prompt_text.ilike(pattern),
            EssayPrompt.prompt_label.ilike(pattern),
        ))
    stmt = stmt.order_by(EssayPrompt.year.desc(), EssayPrompt.created_at.desc())
    async with guarded(db, "search prompts"):
        return await fetch_page(db, stmt, limit, offset)


async def get_prompt(db: AsyncSession, prompt_id: UUID) -> dict:
    async with guarded(db, "load prompt"):
        prompt = await db.get(EssayPrompt, prompt_id)
    if prompt is None:
        raise ResourceNotFoundError("EssayPrompt", str(prompt_id))
    return prompt.as_dict()


async def list_examples(
    db: AsyncSession,
    prompt_id: UUID,
    limit: int,
    offset: int,
    sort: ExampleSort = ExampleSort.UPVOTES,
) -> dict:
    """Public example essays for a prompt, best first."""
    order = (
        ExampleEssay.upvotes.desc() if sort == ExampleSort.UPVOTES
        else ExampleEssay.created_at.desc()
    )
    stmt = (
        select(ExampleEssay)
        .where(ExampleEssay.prompt_id == prompt_id, ExampleEssay.is_public.is_(True))
        .order_by(order)
    )
    async with guarded(db, "list example essays"):
        return await fetch_page(db, stmt, limit, offset)


# ─── User essays ─────────────────────────────────────────────────

class UserEssayService:
    """Owner-scoped essay CRUD and version history."""

    def __init__(self, db: AsyncSession, user_id: UserId, clock: Clock = utc_now):
        self._db = db
        self._user_id = user_id
        self._clock = clock

    async def search(
        self,
        limit: int,
        offset: int,
        status: str | None = None,
        user_college_id: UUID | None = None,
        prompt_id: UUID | None = None,
    ) -> dict:
        stmt = select(UserEssay).where(UserEssay.user_id == self._user_id)
        if status is not None:
            stmt = stmt.where(UserEssay.status == status)
        if user_college_id is not None:
            stmt = stmt.where(UserEssay.user_college_id == user_college_id)
        if prompt_id is not None:
            stmt = stmt.where(UserEssay.prompt_id == prompt_id)
        stmt = stmt.order_by(UserEssay.updated_at.desc())
        async with guarded(self._db, "list essays"):
            return await fetch_page(self._db, stmt, limit, offset)

    async def get(self, essay_id: UUID) -> dict:
        async with guarded(self._db, "load essay"):
            essay = await self._owned(essay_id)
        return essay.as_dict()

    async def create(self, values: dict) -> dict:
        content = values.get("content") or ""
        word_count = count_words_from_html(content)
        now = self._clock()
        essay = UserEssay(
            user_id=self._user_id,
            word_count=word_count,
            version=1,
            created_at=now,
            updated_at=now,
            **values,
        )
        async with guarded(self._db, "create essay"):
            self._db.add(essay)
            await self._db.flush()
            self._db.add(EssayVersion(
                essay_id=essay.id, version=1, content=content,
                word_count=word_count, created_at=now,
            ))
            await self._db.commit()
            await self._db.refresh(essay)
        logger.info("Essay created", extra={"user_id": self._user_id})
        return essay.as_dict()

    async def update(self, essay_id: UUID, changes: dict) -> dict:
        now = self._clock()
        async with guarded(self._db, "update essay"):
            essay = await self._owned(essay_id)
            content_changed = (
                "content" in changes and changes["content"] != essay.content
            )
            for name, value in changes.items():
                setattr(essay, name, value)
            if content_changed:
                essay.word_count = count_words_from_html(essay.content)
                essay.version += 1
                self._db.add(EssayVersion(
                    essay_id=essay.id, version=essay.version, content=essay.content,
                    word_count=essay.word_count, created_at=now,
                ))
            essay.updated_at = now
            await self._db.commit()
            await self._db.refresh(essay)
        return essay.as_dict()

    async def delete(self, essay_id: UUID) -> None:
        async with guarded(self._db, "delete essay"):
            await self._owned(essay_id)
            await self._db.execute(
                delete(EssayVersion).where(EssayVersion.essay_id == essay_id),
            )
            await self._db.execute(
                delete(UserEssay)
                .where(UserEssay.id == essay_id, UserEssay.user_id == self._user_id),
            )
            await self._db.commit()

    async def list_versions(self, essay_id: UUID) -> list[dict]:
        async with guarded(self._db, "list essay versions"):
            await self._owned(essay_id)
            result = await self._db.execute(
                select(EssayVersion)
                .where(EssayVersion.essay_id == essay_id)
                .order_by(EssayVersion.version.desc()),
            )
            return [v.as_dict() for v in result.scalars().all()]

    async def get_version(self, essay_id: UUID, version: int) -> dict:
        async with guarded(self._db, "load essay version"):
            await self._owned(essay_id)
            result = await self._db.execute(
                select(EssayVersion).where(
                    EssayVersion.essay_id == essay_id, EssayVersion.version == version,
                ),
            )
            snapshot = result.scalar_one_or_none()
        if snapshot is None:
            raise ResourceNotFoundError("EssayVersion", f"{essay_id}@{version}")
        return snapshot.as_dict()

    async def _owned(self, essay_id: UUID) -> UserEssay:
        result = await self._db.execute(
            select(UserEssay)
            .where(UserEssay.id == essay_id, UserEssay.user_id == self._user_id),
        )
        essay = result.scalar_one_or_none()
        if essay is None:
            raise ResourceNotFoundError("UserEssay", str(essay_id))
        return essay
