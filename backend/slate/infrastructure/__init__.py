"""Infrastructure Layer — persistence, in-process cache and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures mapped to PersistenceError before leaving this layer
"""
