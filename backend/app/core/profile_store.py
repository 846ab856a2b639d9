"""Profile Store — keyed collection of ProfileRecord with CRUD and lifecycle rules.

Invariants:
    - user_id keys are unique; an inactive record still reserves its key
    - Inactive records are invisible to get / list / update / delete
    - Every mutation is planned as a Changeset (pure, copies only), then applied by commit()
    - A raised error means nothing was committed
    - Readers receive copies — no caller holds a reference into the store

Design Decisions:
    - Explicit store object injected into every operation (no module-level table)
    - plan_* / commit split: the shell persists a changeset before committing it in memory,
      so a persistence failure leaves the store untouched (ADR: two-phase apply)
    - Listing order is (created_at, user_id): stable for a given store state and
      identical after reloading from the database
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from app.core.domain_types import ProfileId, ProfileStatus
from app.core.enforce_profile import validate_required_fields
from app.core.errors import (
    ProfileAlreadyExistsError, ProfileInactiveError,
    ProfileNotFoundError, ProfileValidationError,
)
from app.core.pagination import paginate
from app.core.profile_record import ProfileAttributes, ProfileRecord, merge

logger = logging.getLogger(__name__)

# user_id -> new record, or None for hard removal
Changeset = dict[ProfileId, ProfileRecord | None]

# Confirmation messages returned by the caller-facing operations
CREATED_MESSAGE = "User profile created with id: {user_id}"
UPDATED_MESSAGE = "User profile updated with id: {user_id}"
DELETED_MESSAGE = "User profile deleted with id: {user_id}"
DEACTIVATED_MESSAGE = "User ID {user_id} has been made inactive."


@dataclass
class ProfilePage:
    """One page of active profiles."""
    total_profiles: int
    profiles: list[ProfileRecord] = field(default_factory=list)


class ProfileStore:
    """In-memory keyed table of profiles — the single canonical copy."""

    def __init__(self, records: Iterable[ProfileRecord] = ()):
        self._records: dict[ProfileId, ProfileRecord] = {
            r.user_id: r.copy() for r in records
        }

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._records

    # ─── Read helpers (stored references, callers must not mutate) ──

    def records(self) -> Iterator[ProfileRecord]:
        return iter(self._records.values())

    def lookup(self, user_id: ProfileId) -> ProfileRecord | None:
        return self._records.get(user_id)

    def require_active(self, user_id: ProfileId) -> ProfileRecord:
        """Return the stored record or raise NotFound / Inactive."""
        record = self._records.get(user_id)
        if record is None:
            raise ProfileNotFoundError(user_id)
        if not record.is_active:
            raise ProfileInactiveError(user_id)
        return record

    def status_of(self, user_id: ProfileId) -> ProfileStatus:
        record = self._records.get(user_id)
        if record is None:
            return ProfileStatus.DELETED
        return record.status

    def active_records(self) -> list[ProfileRecord]:
        return sorted(
            (r for r in self._records.values() if r.is_active),
            key=lambda r: (r.created_at, r.user_id),
        )

    # ─── Planning (pure) ─────────────────────────────────────────

    def plan_create(self, user_id: ProfileId, record: ProfileRecord) -> Changeset:
        if record.user_id != user_id:
            raise ProfileValidationError(
                f"Record id '{record.user_id}' does not match '{user_id}'",
                field="user_id",
            )
        validate_required_fields(record.attributes)
        if user_id in self._records:
            raise ProfileAlreadyExistsError(user_id)
        created = record.copy()
        created.status = ProfileStatus.ACTIVE
        return {user_id: created}

    def plan_update(self, user_id: ProfileId, patch: ProfileAttributes) -> Changeset:
        current = self.require_active(user_id)
        return {user_id: merge(current, patch)}

    def plan_delete(self, user_id: ProfileId) -> Changeset:
        self.require_active(user_id)
        return {user_id: None}

    def plan_set_inactive(self, user_id: ProfileId) -> Changeset:
        current = self._records.get(user_id)
        if current is None:
            raise ProfileNotFoundError(user_id)
        deactivated = current.copy()
        deactivated.status = ProfileStatus.INACTIVE
        return {user_id: deactivated}

    # ─── Commit ──────────────────────────────────────────────────

    def commit(self, changes: Changeset) -> None:
        """Apply a planned changeset in one pass. Never raises on valid plans."""
        for user_id, record in changes.items():
            if record is None:
                self._records.pop(user_id, None)
            else:
                self._records[user_id] = record
        logger.debug(
            "Committed changeset", extra={"changed_records": len(changes)},
        )

    # ─── Operations ──────────────────────────────────────────────

    def create(self, user_id: ProfileId, record: ProfileRecord) -> str:
        self.commit(self.plan_create(user_id, record))
        return CREATED_MESSAGE.format(user_id=user_id)

    def update(self, user_id: ProfileId, patch: ProfileAttributes) -> str:
        self.commit(self.plan_update(user_id, patch))
        return UPDATED_MESSAGE.format(user_id=user_id)

    def delete(self, user_id: ProfileId) -> str:
        self.commit(self.plan_delete(user_id))
        return DELETED_MESSAGE.format(user_id=user_id)

    def set_inactive(self, user_id: ProfileId) -> str:
        self.commit(self.plan_set_inactive(user_id))
        return DEACTIVATED_MESSAGE.format(user_id=user_id)

    def get(self, user_id: ProfileId) -> ProfileRecord:
        return self.require_active(user_id).copy()

    def list_page(self, page: int, size: int) -> ProfilePage:
        active = self.active_records()
        selected = paginate(active, page, size)
        return ProfilePage(
            total_profiles=len(active),
            profiles=[r.copy() for r in selected],
        )
