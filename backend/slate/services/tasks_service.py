"""Tasks & Goals Service — owner-scoped to-dos and measurable goals.

Invariants:
    - completed_at is set iff completed (toggle keeps them in step)
    - Lists put rows without a due date/deadline last, newest first among ties
    - Missing and foreign rows both raise ResourceNotFoundError
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from slate.core.domain_types import Clock, UserId
from slate.core.errors import ResourceNotFoundError
from slate.core.session_rules import utc_now
from slate.infrastructure.database import guarded
from slate.models.goal import Goal
from slate.models.task import Task
from slate.services.pagination import fetch_page


class OwnedRowService:
    """CRUD for one owner-scoped model; subclasses add listing rules."""

    model = None
    resource = ""

    def __init__(self, db: AsyncSession, user_id: UserId, clock: Clock = utc_now):
        self._db = db
        self._user_id = user_id
        self._clock = clock

    async def get(self, row_id: UUID) -> dict:
        async with guarded(self._db, f"load {self.resource.lower()}"):
            row = await self._owned(row_id)
        return row.as_dict()

    async def create(self, values: dict) -> dict:
        now = self._clock()
        row = self.model(user_id=self._user_id, created_at=now, updated_at=now, **values)
        async with guarded(self._db, f"create {self.resource.lower()}"):
            self._db.add(row)
            await self._db.commit()
            await self._db.refresh(row)
        return row.as_dict()

    async def update(self, row_id: UUID, changes: dict) -> dict:
        async with guarded(self._db, f"update {self.resource.lower()}"):
            row = await self._owned(row_id)
            for name, value in changes.items():
                setattr(row, name, value)
            row.updated_at = self._clock()
            await self._db.commit()
            await self._db.refresh(row)
        return row.as_dict()

    async def delete(self, row_id: UUID) -> None:
        model = self.model
        async with guarded(self._db, f"delete {self.resource.lower()}"):
            result = await self._db.execute(
                delete(model).where(model.id == row_id, model.user_id == self._user_id),
            )
            if result.rowcount == 0:
                raise ResourceNotFoundError(self.resource, str(row_id))
            await self._db.commit()

    async def _owned(self, row_id: UUID):
        model = self.model
        result = await self._db.execute(
            select(model).where(model.id == row_id, model.user_id == self._user_id),
        )
        row = result.scalar_one_or_none()
        if row is None:
            raise ResourceNotFoundError(self.resource, str(row_id))
        return row


class TaskService(OwnedRowService):
    model = Task
    resource = "Task"

    async def search(
        self,
        limit: int,
        offset: int,
        category: str | None = None,
        completed: bool | None = None,
    ) -> dict:
        stmt = select(Task).where(Task.user_id == self._user_id)
        if category is not None:
            stmt = stmt.where(Task.category == category)
        if completed is not None:
            stmt = stmt.where(Task.completed == completed)
        stmt = stmt.order_by(Task.due_date.asc().nulls_last(), Task.created_at.desc())
        async with guarded(self._db, "list tasks"):
            return await fetch_page(self._db, stmt, limit, offset)

    async def toggle(self, task_id: UUID) -> dict:
        """Flip completion; completing stamps completed_at, reopening clears it."""
        now = self._clock()
        async with guarded(self._db, "toggle task"):
            task = await self._owned(task_id)
            task.completed = not task.completed
            task.completed_at = now if task.completed else None
            task.updated_at = now
            await self._db.commit()
            await self._db.refresh(task)
        return task.as_dict()


class GoalService(OwnedRowService):
    model = Goal
    resource = "Goal"

    async def search(
        self,
        limit: int,
        offset: int,
        completed: bool | None = None,
        goal_type: str | None = None,
    ) -> dict:
        stmt = select(Goal).where(Goal.user_id == self._user_id)
        if completed is not None:
            stmt = stmt.where(Goal.completed == completed)
        if goal_type is not None:
            stmt = stmt.where(Goal.goal_type == goal_type)
        stmt = stmt.order_by(Goal.deadline.asc().nulls_last(), Goal.created_at.desc())
        async with guarded(self._db, "list goals"):
            return await fetch_page(self._db, stmt, limit, offset)
