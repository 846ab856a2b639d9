"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Profile rows hold the full record snapshot; the in-memory store is canonical at runtime

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from app.models.profile import Profile  # noqa: F401
