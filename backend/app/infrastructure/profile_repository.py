"""SQL Profile Repository — durable write-through for the in-memory profile store.

Invariants:
    - apply_changes writes a whole changeset in ONE transaction (all rows or none)
    - None in a changeset deletes the row; a record upserts it
    - load_all returns every row, active and inactive, decoded via profile_from_snapshot

Design Decisions:
    - session.merge() for upserts: dialect-neutral (PostgreSQL in prod, SQLite in tests)
    - Errors surface as DatabaseError from DatabaseSessionManager.session()
"""

import logging

from sqlalchemy import delete, select

from app.core.profile_record import ProfileRecord
from app.core.profile_snapshot import profile_from_snapshot, profile_to_snapshot
from app.core.profile_store import Changeset
from app.infrastructure.database import DatabaseSessionManager
from app.models.profile import Profile as ProfileModel

logger = logging.getLogger(__name__)


def _to_row(record: ProfileRecord) -> ProfileModel:
    return ProfileModel(
        user_id=record.user_id,
        creator_principal=record.creator_principal,
        status=record.status.value,
        snapshot=profile_to_snapshot(record),
        created_at=record.created_at,
    )


class SqlProfileRepository:
    """ProfileRepository backed by the `profiles` table."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def load_all(self) -> list[ProfileRecord]:
        async with self._manager.session() as db:
            result = await db.execute(
                select(ProfileModel).order_by(
                    ProfileModel.created_at, ProfileModel.user_id,
                ),
            )
            rows = result.scalars().all()
        logger.info(f"Loaded {len(rows)} profile(s) from database")
        return [profile_from_snapshot(row.snapshot) for row in rows]

    async def apply_changes(self, changes: Changeset) -> None:
        if not changes:
            return
        async with self._manager.session() as db:
            for user_id, record in changes.items():
                if record is None:
                    await db.execute(
                        delete(ProfileModel).where(
                            ProfileModel.user_id == user_id,
                        ),
                    )
                else:
                    await db.merge(_to_row(record))
            await db.commit()
