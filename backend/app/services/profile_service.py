"""Profile Service — async orchestration of the profile store, swipe engine and match finder.

Invariants:
    - One logical mutator: every mutation holds _write_lock from planning through commit,
      including the persistence await
    - External values (id, timestamp, caller) are acquired before planning; a failure
      there aborts with nothing written
    - Persist-then-commit: a changeset reaches the in-memory store only after the
      repository accepted it, so a DatabaseError leaves the store unchanged
    - Reads never take the lock: commit() is synchronous, readers see settled state

Design Decisions:
    - Store, repository, id generator and clock injected (ADR: no process-wide table)
    - Reads are plain methods, mutations are coroutines (only mutations do IO)
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable

from app.core.domain_types import Principal, ProfileId, SwipeDirection
from app.core.match_finder import MatchResult, find_matches
from app.core.profile_record import ProfileAttributes, ProfileRecord
from app.core.profile_store import (
    DEACTIVATED_MESSAGE, DELETED_MESSAGE, UPDATED_MESSAGE,
    Changeset, ProfilePage, ProfileStore,
)
from app.core.repository_protocols import IdGenerator, ProfileRepository
from app.core.swipe_engine import (
    MATCHES_REMOVED_MESSAGE, SWIPE_RECORDED_MESSAGE,
    plan_match_removal, plan_swipe,
)
from app.infrastructure.id_generator import generate_profile_id

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProfileService:
    """Caller-facing profile operations over one injected store."""

    def __init__(
        self,
        repository: ProfileRepository,
        store: ProfileStore | None = None,
        id_generator: IdGenerator = generate_profile_id,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._repository = repository
        self._store = store if store is not None else ProfileStore()
        self._generate_id = id_generator
        self._clock = clock
        self._write_lock = asyncio.Lock()

    @property
    def store(self) -> ProfileStore:
        return self._store

    async def load(self) -> int:
        """Replace the in-memory store with the repository contents."""
        records = await self._repository.load_all()
        async with self._write_lock:
            self._store = ProfileStore(records)
        return len(records)

    async def _persist_and_commit(self, changes: Changeset) -> None:
        await self._repository.apply_changes(changes)
        self._store.commit(changes)

    # ─── Mutations ───────────────────────────────────────────────

    async def create_account(
        self, attributes: ProfileAttributes, caller: Principal,
    ) -> ProfileId:
        async with self._write_lock:
            user_id = self._generate_id()
            record = ProfileRecord(
                user_id=user_id,
                created_at=self._clock(),
                creator_principal=caller,
                attributes=attributes,
            )
            await self._persist_and_commit(
                self._store.plan_create(user_id, record),
            )
        logger.info("Created profile", extra={"user_id": user_id})
        return user_id

    async def update_account(
        self, user_id: ProfileId, patch: ProfileAttributes,
    ) -> str:
        async with self._write_lock:
            await self._persist_and_commit(
                self._store.plan_update(user_id, patch),
            )
        logger.info("Updated profile", extra={"user_id": user_id})
        return UPDATED_MESSAGE.format(user_id=user_id)

    async def delete_account(self, user_id: ProfileId) -> str:
        async with self._write_lock:
            await self._persist_and_commit(self._store.plan_delete(user_id))
        logger.info("Deleted profile", extra={"user_id": user_id})
        return DELETED_MESSAGE.format(user_id=user_id)

    async def set_inactive(self, user_id: ProfileId) -> str:
        async with self._write_lock:
            await self._persist_and_commit(
                self._store.plan_set_inactive(user_id),
            )
        logger.info("Deactivated profile", extra={"user_id": user_id})
        return DEACTIVATED_MESSAGE.format(user_id=user_id)

    async def record_swipe(
        self, actor_id: ProfileId, target_id: ProfileId, direction: SwipeDirection,
    ) -> str:
        async with self._write_lock:
            await self._persist_and_commit(
                plan_swipe(self._store, actor_id, target_id, direction),
            )
        logger.info(
            "Recorded swipe",
            extra={
                "user_id": actor_id, "target_id": target_id,
                "direction": direction.value,
            },
        )
        return SWIPE_RECORDED_MESSAGE.format(
            direction=direction.value, actor_id=actor_id, target_id=target_id,
        )

    async def remove_matches(self, user_id: ProfileId) -> str:
        async with self._write_lock:
            changes = plan_match_removal(self._store, user_id)
            await self._persist_and_commit(changes)
        logger.info(
            "Removed all matches",
            extra={"user_id": user_id, "changed_records": len(changes)},
        )
        return MATCHES_REMOVED_MESSAGE.format(user_id=user_id)

    # ─── Reads ───────────────────────────────────────────────────

    def get_account(self, user_id: ProfileId) -> ProfileRecord:
        return self._store.get(user_id)

    def list_accounts(self, page: int, size: int) -> ProfilePage:
        return self._store.list_page(page, size)

    def find_matches(self, profile_id: ProfileId, page: int, size: int) -> MatchResult:
        return find_matches(self._store, profile_id, page, size)
