"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps UUID — owner identity everywhere (cache keys, row filters)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from datetime import datetime
from enum import Enum
from typing import Callable, NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
SessionToken = NewType("SessionToken", str)

# Wall clock returning an aware UTC datetime (injectable for tests)
Clock = Callable[[], datetime]


# ─── Enums ───────────────────────────────────────────────────────

class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class EssayStatus(str, Enum):
    """User essay lifecycle — maps to DB `status` column."""
    DRAFT = "draft"
    IN_REVIEW = "in_review"
    FINAL = "final"
    SUBMITTED = "submitted"


class PromptType(str, Enum):
    COMMON_APP = "common_app"
    COALITION = "coalition"
    UC = "uc"
    COLLEGE_SPECIFIC = "college_specific"


class ExampleSort(str, Enum):
    UPVOTES = "upvotes"
    CREATED_AT = "created_at"


class CacheEndpoint(str, Enum):
    """Logical endpoint names used as the second half of a cache key."""
    ACADEMICS_STATS = "academics:stats"
