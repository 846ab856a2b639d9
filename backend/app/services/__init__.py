"""Services Layer — async orchestration around the pure profile core.

Invariants:
    - Mutations are serialized (one logical mutator at a time)
    - Changesets are persisted before they are committed in memory

Design Decisions:
    - One service object owns the store and the repository (ADR: explicit dependency injection)
"""
