"""Essay Schemas — user essay payloads.

Invariants:
    - content is HTML from the rich-text editor, at most 100k chars
    - word_count and version are never accepted from clients
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from slate.core.domain_types import EssayStatus

MAX_CONTENT_CHARS = 100_000


class EssayCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    user_college_id: UUID | None = None
    prompt_id: UUID | None = None
    title: str = Field(min_length=1, max_length=500)
    content: str = Field("", max_length=MAX_CONTENT_CHARS)
    notes: str | None = Field(None, max_length=5000)
    status: EssayStatus = EssayStatus.DRAFT
    ai_suggestions_enabled: bool = True


class EssayUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    user_college_id: UUID | None = None
    prompt_id: UUID | None = None
    title: str | None = Field(None, min_length=1, max_length=500)
    content: str | None = Field(None, max_length=MAX_CONTENT_CHARS)
    notes: str | None = Field(None, max_length=5000)
    status: EssayStatus | None = None
    ai_suggestions_enabled: bool | None = None

    @field_validator("title", "content", "status", "ai_suggestions_enabled")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v
