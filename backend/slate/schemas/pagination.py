"""Pagination — shared limit/offset bounds and the list envelope."""

from typing import Any

from pydantic import BaseModel

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


class Page(BaseModel):
    """List envelope: data slice plus total count of matching rows."""
    data: list[dict[str, Any]]
    total: int
    limit: int
    offset: int
