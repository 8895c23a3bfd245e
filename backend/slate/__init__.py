"""Slate Application Package — student-productivity CRUD backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
