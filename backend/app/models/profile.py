"""Profile ORM — persists one row per stored profile.

Invariants:
    - user_id is the string primary key assigned by the id generator
    - snapshot holds the JSON-safe record (core/profile_snapshot.py)
    - status mirrors snapshot["status"] so inactive rows can be queried without decoding JSON
    - Hard deletion removes the row

Design Decisions:
    - JSON column for the whole record: the in-memory store is queried, not the table
      (ADR: store loaded once at startup, written through on every mutation)
    - created_at / creator_principal denormalized for ordering and auditing
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Profile(Base):
    """Stored profile row."""
    __tablename__ = "profiles"

    user_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    creator_principal: Mapped[str] = mapped_column(
        String(255), nullable=False, default="",
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="active", index=True,
    )
    snapshot: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
