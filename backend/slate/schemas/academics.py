"""Academics Schemas — profile, course and extracurricular payloads.

Invariants:
    - Profile bounds: wgpa 0–5, uwgpa 0–4, SAT 400–1600 (sections 200–800),
      ACT 1–36, graduation year 2024–2030, at most 5 major interests
    - Every profile field is optional and nullable (upsert touches only sent fields)
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class ProfileUpsert(BaseModel):
    school_id: UUID | None = None
    wgpa: float | None = Field(None, ge=0, le=5.0)
    uwgpa: float | None = Field(None, ge=0, le=4.0)
    sat_score: int | None = Field(None, ge=400, le=1600)
    sat_reading: int | None = Field(None, ge=200, le=800)
    sat_math: int | None = Field(None, ge=200, le=800)
    act_score: int | None = Field(None, ge=1, le=36)
    class_rank: int | None = Field(None, gt=0)
    class_size: int | None = Field(None, gt=0)
    graduation_year: int | None = Field(None, ge=2024, le=2030)
    major_interest: list[str] | None = Field(None, max_length=5)


class CourseCreate(BaseModel):
    course_name: str = Field(min_length=1, max_length=200)
    grade: str | None = Field(None, max_length=10)
    grade_numeric: float | None = Field(None, ge=0, le=120)
    credits: float | None = Field(None, gt=0, le=10)
    is_ap: bool = False
    is_honors: bool = False
    semester: str | None = Field(None, max_length=20)
    year: str | None = Field(None, max_length=20)


class CourseUpdate(BaseModel):
    course_name: str | None = Field(None, min_length=1, max_length=200)
    grade: str | None = Field(None, max_length=10)
    grade_numeric: float | None = Field(None, ge=0, le=120)
    credits: float | None = Field(None, gt=0, le=10)
    is_ap: bool | None = None
    is_honors: bool | None = None
    semester: str | None = Field(None, max_length=20)
    year: str | None = Field(None, max_length=20)

    @field_validator("course_name", "is_ap", "is_honors")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v


class ExtracurricularCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    category: str | None = Field(None, max_length=100)
    role: str | None = Field(None, max_length=200)
    organization: str | None = Field(None, max_length=200)
    description: str | None = Field(None, max_length=5000)
    hours_per_week: float | None = Field(None, ge=0, le=168)
    weeks_per_year: int | None = Field(None, ge=0, le=52)
    grade_levels: list[int] | None = Field(None, max_length=4)
    is_leadership: bool = False


class ExtracurricularUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    category: str | None = Field(None, max_length=100)
    role: str | None = Field(None, max_length=200)
    organization: str | None = Field(None, max_length=200)
    description: str | None = Field(None, max_length=5000)
    hours_per_week: float | None = Field(None, ge=0, le=168)
    weeks_per_year: int | None = Field(None, ge=0, le=52)
    grade_levels: list[int] | None = Field(None, max_length=4)
    is_leadership: bool | None = None

    @field_validator("name", "is_leadership")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v
