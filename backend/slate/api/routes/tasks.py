"""Task Routes — owner-scoped to-dos with a completion toggle."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from slate.api.dependencies import get_clock, require_auth
from slate.core.domain_types import Clock, UserId
from slate.infrastructure.database import get_db
from slate.schemas.pagination import DEFAULT_LIMIT, MAX_LIMIT, Page
from slate.schemas.tasks import TaskCreate, TaskUpdate
from slate.services.tasks_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def get_task_service(
    user_id: UserId = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> TaskService:
    return TaskService(db, user_id, clock)


@router.get("", response_model=Page)
async def list_tasks(
    category: str | None = Query(None, max_length=100),
    completed: bool | None = None,
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    service: TaskService = Depends(get_task_service),
):
    return await service.search(limit, offset, category=category, completed=completed)


@router.post("/create", status_code=status.HTTP_201_CREATED)
async def create_task(
    body: TaskCreate, service: TaskService = Depends(get_task_service),
):
    return {"task": await service.create(body.model_dump())}


@router.get("/{task_id}")
async def get_task(task_id: UUID, service: TaskService = Depends(get_task_service)):
    return {"task": await service.get(task_id)}


@router.patch("/{task_id}")
async def update_task(
    task_id: UUID,
    body: TaskUpdate,
    service: TaskService = Depends(get_task_service),
):
    return {"task": await service.update(task_id, body.model_dump(exclude_unset=True))}


@router.patch("/{task_id}/toggle")
async def toggle_task(task_id: UUID, service: TaskService = Depends(get_task_service)):
    return {"task": await service.toggle(task_id)}


@router.delete("/{task_id}")
async def delete_task(task_id: UUID, service: TaskService = Depends(get_task_service)):
    await service.delete(task_id)
    return {"success": True}
