"""Task & Goal Schemas — create/update payloads.

Invariants:
    - Task priority ∈ {low, medium, high}, default medium
    - Goal progress_percentage is an integer in [0, 100]
    - Explicit null clears nullable fields (due_date, deadline, current_value)
      and is rejected for required ones
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from slate.core.domain_types import TaskPriority


class TaskCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    title: str = Field(min_length=1, max_length=500)
    description: str | None = Field(None, max_length=5000)
    due_date: datetime | None = None
    priority: TaskPriority = TaskPriority.MEDIUM
    category: str | None = Field(None, max_length=100)
    related_college_id: UUID | None = None
    link: str | None = Field(None, max_length=500)


class TaskUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    title: str | None = Field(None, min_length=1, max_length=500)
    description: str | None = Field(None, max_length=5000)
    due_date: datetime | None = None
    priority: TaskPriority | None = None
    category: str | None = Field(None, max_length=100)
    related_college_id: UUID | None = None
    link: str | None = Field(None, max_length=500)

    @field_validator("title", "priority")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v


class GoalCreate(BaseModel):
    goal_type: str = Field(min_length=1, max_length=50)
    title: str = Field(min_length=1, max_length=500)
    target_value: str = Field(min_length=1, max_length=1000)
    current_value: str | None = Field(None, max_length=1000)
    progress_percentage: int = Field(0, ge=0, le=100)
    deadline: datetime | None = None


class GoalUpdate(BaseModel):
    goal_type: str | None = Field(None, min_length=1, max_length=50)
    title: str | None = Field(None, min_length=1, max_length=500)
    target_value: str | None = Field(None, min_length=1, max_length=1000)
    current_value: str | None = Field(None, max_length=1000)
    progress_percentage: int | None = Field(None, ge=0, le=100)
    deadline: datetime | None = None
    completed: bool | None = None

    @field_validator("goal_type", "title", "target_value", "progress_percentage", "completed")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v
