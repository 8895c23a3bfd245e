"""Services Layer — use cases behind the routes.

Invariants:
    - Owner-scoped services take the caller's UserId at construction
    - SQLAlchemy failures surface as PersistenceError (via guarded)

Design Decisions:
    - One module per resource; routes stay thin
"""
