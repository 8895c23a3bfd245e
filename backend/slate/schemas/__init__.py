"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies and query strings)
    - Update schemas carry only optional fields; services apply exclude_unset dumps

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
