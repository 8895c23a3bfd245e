"""Database Infrastructure — SQLAlchemy Base and schema names.

Invariants:
    - Every table lives in one of the four schemas below (never `public`)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL
"""
