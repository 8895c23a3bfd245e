"""Essay Routes — prompt catalogue, user essays with versions, example essays.

Invariants:
    - Prompts and user essays require a session; examples accept anonymous callers
    - List endpoints return the {data, total, limit, offset} envelope
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from slate.api.dependencies import get_clock, optional_auth, require_auth
from slate.core.domain_types import Clock, EssayStatus, ExampleSort, PromptType, UserId
from slate.infrastructure.database import get_db
from slate.schemas.essays import EssayCreate, EssayUpdate
from slate.schemas.pagination import DEFAULT_LIMIT, MAX_LIMIT, Page
from slate.services import essays_service
from slate.services.essays_service import UserEssayService

router = APIRouter(prefix="/api/essays", tags=["essays"])


def get_essay_service(
    user_id: UserId = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> UserEssayService:
    return UserEssayService(db, user_id, clock)


# ─── Prompts ─────────────────────────────────────────────────────

@router.get("/prompts", response_model=Page, dependencies=[Depends(require_auth)])
async def search_prompts(
    query: str | None = Query(None, min_length=1, max_length=200),
    college_id: UUID | None = None,
    prompt_type: PromptType | None = None,
    year: int | None = Query(None, ge=2000, le=2030),
    is_active: bool | None = None,
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await essays_service.search_prompts(
        db, limit, offset,
        query=query,
        college_id=college_id,
        prompt_type=prompt_type.value if prompt_type else None,
        year=year,
        is_active=is_active,
    )


@router.get("/prompts/{prompt_id}", dependencies=[Depends(require_auth)])
async def get_prompt(prompt_id: UUID, db: AsyncSession = Depends(get_db)):
    return {"prompt": await essays_service.get_prompt(db, prompt_id)}


# ─── User essays ─────────────────────────────────────────────────

@router.get("/user", response_model=Page)
async def list_user_essays(
    status_filter: EssayStatus | None = Query(None, alias="status"),
    user_college_id: UUID | None = None,
    prompt_id: UUID | None = None,
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    service: UserEssayService = Depends(get_essay_service),
):
    return await service.search(
        limit, offset,
        status=status_filter.value if status_filter else None,
        user_college_id=user_college_id,
        prompt_id=prompt_id,
    )


@router.post("/user", status_code=status.HTTP_201_CREATED)
async def create_user_essay(
    body: EssayCreate,
    service: UserEssayService = Depends(get_essay_service),
):
    return {"essay": await service.create(body.model_dump())}


@router.get("/user/{essay_id}")
async def get_user_essay(
    essay_id: UUID, service: UserEssayService = Depends(get_essay_service),
):
    return {"essay": await service.get(essay_id)}


@router.patch("/user/{essay_id}")
async def update_user_essay(
    essay_id: UUID,
    body: EssayUpdate,
    service: UserEssayService = Depends(get_essay_service),
):
    essay = await service.update(essay_id, body.model_dump(exclude_unset=True))
    return {"essay": essay}


@router.delete("/user/{essay_id}")
async def delete_user_essay(
    essay_id: UUID, service: UserEssayService = Depends(get_essay_service),
):
    await service.delete(essay_id)
    return {"success": True}


@router.get("/user/{essay_id}/versions")
async def list_essay_versions(
    essay_id: UUID, service: UserEssayService = Depends(get_essay_service),
):
    return {"versions": await service.list_versions(essay_id)}


@router.get("/user/{essay_id}/versions/{version}")
async def get_essay_version(
    essay_id: UUID,
    version: int,
    service: UserEssayService = Depends(get_essay_service),
):
    return {"version": await service.get_version(essay_id, version)}


# ─── Examples ────────────────────────────────────────────────────

@router.get("/examples/{prompt_id}", response_model=Page)
async def list_example_essays(
    prompt_id: UUID,
    sort: ExampleSort = ExampleSort.UPVOTES,
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
    _user_id: UserId | None = Depends(optional_auth),
):
    return await essays_service.list_examples(db, prompt_id, limit, offset, sort)
