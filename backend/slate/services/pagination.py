"""Offset Pagination — shared page query for every list endpoint.

Invariants:
    - total counts the filtered rows, ignoring limit/offset
    - data preserves the ordering of the caller's statement
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


async def fetch_page(
    db: AsyncSession, stmt: Select, limit: int, offset: int,
) -> dict:
    """Run stmt as one page and return the {data, total, limit, offset} envelope."""
    total = await db.scalar(
        select(func.count()).select_from(stmt.order_by(None).subquery()),
    )
    rows = (await db.execute(stmt.limit(limit).offset(offset))).scalars().all()
    return {
        "data": [row.as_dict() for row in rows],
        "total": total or 0,
        "limit": limit,
        "offset": offset,
    }
