"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py) and declare a schema
    - Owner-scoped tables carry user_id → core.users.id (cascade delete)

Design Decisions:
    - One file per entity for locality
    - All models imported here so metadata is complete before create_all/autogenerate
"""

from slate.models.user import User  # noqa: F401
from slate.models.user_session import UserSession  # noqa: F401
from slate.models.bell_schedule import BellSchedule, BellScheduleDay  # noqa: F401
from slate.models.profile import UserProfile  # noqa: F401
from slate.models.course import Course  # noqa: F401
from slate.models.extracurricular import Extracurricular  # noqa: F401
from slate.models.essay_prompt import EssayPrompt  # noqa: F401
from slate.models.user_essay import UserEssay  # noqa: F401
from slate.models.essay_version import EssayVersion  # noqa: F401
from slate.models.example_essay import ExampleEssay  # noqa: F401
from slate.models.task import Task  # noqa: F401
from slate.models.goal import Goal  # noqa: F401
