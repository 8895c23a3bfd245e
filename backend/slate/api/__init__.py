"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; failures use the SlateError envelope

Design Decisions:
    - Thin routes delegate to services; auth is a dependency, not middleware
"""
