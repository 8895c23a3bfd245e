"""SQLAlchemy Declarative Base — shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - as_dict() returns column values only (no relationships, no lazy loads)
"""

from typing import Any

from sqlalchemy.orm import DeclarativeBase

CORE_SCHEMA = "core"
ACADEMICS_SCHEMA = "academics"
ESSAYS_SCHEMA = "essays"
TASKS_SCHEMA = "tasks"

ALL_SCHEMAS = (CORE_SCHEMA, ACADEMICS_SCHEMA, ESSAYS_SCHEMA, TASKS_SCHEMA)


class Base(DeclarativeBase):
    """Base class for all Slate ORM models."""

    def as_dict(self) -> dict[str, Any]:
        return {
            column.key: getattr(self, column.key)
            for column in self.__table__.columns
        }
