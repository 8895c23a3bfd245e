"""Initial schema — core, academics, essays and tasks schemas with all tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMAS = ("core", "academics", "essays", "tasks")


def _id() -> sa.Column:
    return sa.Column("id", UUID(as_uuid=True), primary_key=True)


def _owner() -> sa.Column:
    return sa.Column(
        "user_id", UUID(as_uuid=True),
        sa.ForeignKey("core.users.id", ondelete="CASCADE"), nullable=False, index=True,
    )


def _timestamps(updated: bool = True) -> list[sa.Column]:
    cols = [sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())]
    if updated:
        cols.append(sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()))
    return cols


def upgrade() -> None:
    for schema in SCHEMAS:
        op.execute(f"CREATE SCHEMA IF NOT EXISTS {schema}")

    # ─── core ────────────────────────────────────────────────────
    op.create_table(
        "users",
        _id(),
        sa.Column("email", sa.String(320), nullable=False, unique=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("password_hash", sa.Text, nullable=False),
        sa.Column("school_id", UUID(as_uuid=True), nullable=True),
        sa.Column("canvas_access_token", sa.Text, nullable=True),
        sa.Column("canvas_token_expires_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(updated=False),
        schema="core",
    )
    op.create_table(
        "sessions",
        _id(),
        sa.Column("token", sa.String(128), nullable=False, unique=True, index=True),
        _owner(),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("device_name", sa.String(100), nullable=True),
        sa.Column("user_agent", sa.Text, nullable=True),
        sa.Column("ip_address", sa.String(64), nullable=True),
        *_timestamps(updated=False),
        schema="core",
    )
    op.create_table(
        "bell_schedules",
        _id(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("schedule_data", sa.JSON, nullable=False),
        *_timestamps(updated=False),
        schema="core",
    )
    op.create_table(
        "bell_schedule_days",
        _id(),
        sa.Column("school_initials", sa.String(20), nullable=False),
        sa.Column("day", sa.String(10), nullable=False),
        sa.Column(
            "bell_schedule_id", UUID(as_uuid=True),
            sa.ForeignKey("core.bell_schedules.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.UniqueConstraint("school_initials", "day"),
        schema="core",
    )

    # ─── academics ───────────────────────────────────────────────
    op.create_table(
        "user_profile",
        _id(),
        sa.Column(
            "user_id", UUID(as_uuid=True),
            sa.ForeignKey("core.users.id", ondelete="CASCADE"), nullable=False, unique=True,
        ),
        sa.Column("school_id", UUID(as_uuid=True), nullable=True),
        sa.Column("wgpa", sa.Float, nullable=True),
        sa.Column("uwgpa", sa.Float, nullable=True),
        sa.Column("sat_score", sa.Integer, nullable=True),
        sa.Column("sat_reading", sa.Integer, nullable=True),
        sa.Column("sat_math", sa.Integer, nullable=True),
        sa.Column("act_score", sa.Integer, nullable=True),
        sa.Column("class_rank", sa.Integer, nullable=True),
        sa.Column("class_size", sa.Integer, nullable=True),
        sa.Column("graduation_year", sa.Integer, nullable=True),
        sa.Column("major_interest", sa.JSON, nullable=True),
        *_timestamps(),
        schema="academics",
    )
    op.create_table(
        "user_courses",
        _id(),
        _owner(),
        sa.Column("course_name", sa.String(200), nullable=False),
        sa.Column("grade", sa.String(10), nullable=True),
        sa.Column("grade_numeric", sa.Float, nullable=True),
        sa.Column("credits", sa.Float, nullable=True),
        sa.Column("is_ap", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("is_honors", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("semester", sa.String(20), nullable=True),
        sa.Column("year", sa.String(20), nullable=True),
        *_timestamps(),
        schema="academics",
    )
    op.create_table(
        "extracurriculars",
        _id(),
        _owner(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("role", sa.String(200), nullable=True),
        sa.Column("organization", sa.String(200), nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("hours_per_week", sa.Float, nullable=True),
        sa.Column("weeks_per_year", sa.Integer, nullable=True),
        sa.Column("grade_levels", sa.JSON, nullable=True),
        sa.Column("is_leadership", sa.Boolean, nullable=False, server_default="false"),
        *_timestamps(),
        schema="academics",
    )

    # ─── essays ──────────────────────────────────────────────────
    op.create_table(
        "essay_prompts",
        _id(),
        sa.Column("college_id", UUID(as_uuid=True), nullable=True),
        sa.Column("prompt_label", sa.String(200), nullable=True),
        sa.Column("prompt_text", sa.Text, nullable=False),
        sa.Column("prompt_type", sa.String(30), nullable=False),
        sa.Column("year", sa.Integer, nullable=False),
        sa.Column("word_limit", sa.Integer, nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default="true"),
        *_timestamps(updated=False),
        schema="essays",
    )
    op.create_table(
        "user_essays",
        _id(),
        _owner(),
        sa.Column("user_college_id", UUID(as_uuid=True), nullable=True),
        sa.Column(
            "prompt_id", UUID(as_uuid=True),
            sa.ForeignKey("essays.essay_prompts.id", ondelete="SET NULL"), nullable=True,
        ),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("content", sa.Text, nullable=False, server_default=""),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("word_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("version", sa.Integer, nullable=False, server_default="1"),
        sa.Column("ai_suggestions_enabled", sa.Boolean, nullable=False, server_default="true"),
        *_timestamps(),
        schema="essays",
    )
    op.create_table(
        "essay_versions",
        _id(),
        sa.Column(
            "essay_id", UUID(as_uuid=True),
            sa.ForeignKey("essays.user_essays.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
        sa.Column("version", sa.Integer, nullable=False),
        sa.Column("content", sa.Text, nullable=False, server_default=""),
        sa.Column("word_count", sa.Integer, nullable=False, server_default="0"),
        *_timestamps(updated=False),
        sa.UniqueConstraint("essay_id", "version"),
        schema="essays",
    )
    op.create_table(
        "example_essays",
        _id(),
        sa.Column(
            "prompt_id", UUID(as_uuid=True),
            sa.ForeignKey("essays.essay_prompts.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
        sa.Column("title", sa.String(500), nullable=True),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("upvotes", sa.Integer, nullable=False, server_default="0"),
        sa.Column("is_public", sa.Boolean, nullable=False, server_default="true"),
        *_timestamps(updated=False),
        schema="essays",
    )

    # ─── tasks ───────────────────────────────────────────────────
    op.create_table(
        "tasks",
        _id(),
        _owner(),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("priority", sa.String(10), nullable=False, server_default="medium"),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("related_college_id", UUID(as_uuid=True), nullable=True),
        sa.Column("link", sa.String(500), nullable=True),
        sa.Column("completed", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        schema="tasks",
    )
    op.create_table(
        "goals",
        _id(),
        _owner(),
        sa.Column("goal_type", sa.String(50), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("target_value", sa.String(1000), nullable=False),
        sa.Column("current_value", sa.String(1000), nullable=True),
        sa.Column("progress_percentage", sa.Integer, nullable=False, server_default="0"),
        sa.Column("deadline", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed", sa.Boolean, nullable=False, server_default="false"),
        *_timestamps(),
        schema="tasks",
    )


def downgrade() -> None:
    op.drop_table("goals", schema="tasks")
    op.drop_table("tasks", schema="tasks")
    op.drop_table("example_essays", schema="essays")
    op.drop_table("essay_versions", schema="essays")
    op.drop_table("user_essays", schema="essays")
    op.drop_table("essay_prompts", schema="essays")
    op.drop_table("extracurriculars", schema="academics")
    op.drop_table("user_courses", schema="academics")
    op.drop_table("user_profile", schema="academics")
    op.drop_table("bell_schedule_days", schema="core")
    op.drop_table("bell_schedules", schema="core")
    op.drop_table("sessions", schema="core")
    op.drop_table("users", schema="core")
    for schema in reversed(SCHEMAS):
        op.execute(f"DROP SCHEMA IF EXISTS {schema}")
