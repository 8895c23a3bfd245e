"""Goal Routes — owner-scoped measurable goals."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from slate.api.dependencies import get_clock, require_auth
from slate.core.domain_types import Clock, UserId
from slate.infrastructure.database import get_db
from slate.schemas.pagination import DEFAULT_LIMIT, MAX_LIMIT, Page
from slate.schemas.tasks import GoalCreate, GoalUpdate
from slate.services.tasks_service import GoalService

router = APIRouter(prefix="/api/goals", tags=["goals"])


def get_goal_service(
    user_id: UserId = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> GoalService:
    return GoalService(db, user_id, clock)


@router.get("", response_model=Page)
async def list_goals(
    completed: bool | None = None,
    goal_type: str | None = Query(None, max_length=50),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    service: GoalService = Depends(get_goal_service),
):
    return await service.search(limit, offset, completed=completed, goal_type=goal_type)


@router.post("/create", status_code=status.HTTP_201_CREATED)
async def create_goal(
    body: GoalCreate, service: GoalService = Depends(get_goal_service),
):
    return {"goal": await service.create(body.model_dump())}


@router.get("/{goal_id}")
async def get_goal(goal_id: UUID, service: GoalService = Depends(get_goal_service)):
    return {"goal": await service.get(goal_id)}


@router.patch("/{goal_id}")
async def update_goal(
    goal_id: UUID,
    body: GoalUpdate,
    service: GoalService = Depends(get_goal_service),
):
    return {"goal": await service.update(goal_id, body.model_dump(exclude_unset=True))}


@router.delete("/{goal_id}")
async def delete_goal(goal_id: UUID, service: GoalService = Depends(get_goal_service)):
    await service.delete(goal_id)
    return {"success": True}
