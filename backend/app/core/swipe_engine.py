"""Swipe Relationship Engine — per-record swipe sets, derived matches, cascading cleanup.

Invariants:
    - Swipe sets never contain the owner's own id
    - record_swipe is idempotent: re-adding an existing member changes nothing
    - A new right swipe queues one LIKE notification on the target; a reciprocated
      right swipe appends each id to the other's matched_profiles
    - After remove_matches(u): u's swipe sets and matched_profiles are empty and no
      record in the store references u in left_swipes, right_swipes or matched_profiles
    - Planning is PURE (works on copies); the changeset is applied in one commit

Design Decisions:
    - Swipes stored per record, not in a bidirectional index: a unilateral swipe on u is
      only discoverable by scanning every record, hence the full sweep after the
      targeted removal (ADR: O(n) acceptable at current volumes; reverse index deferred)
    - Working copies cached per id while planning: several steps may touch the same
      record and must all land on one copy
"""

from app.core.domain_types import ProfileId, SwipeDirection
from app.core.errors import ProfileValidationError
from app.core.profile_record import Notification, ProfileRecord
from app.core.profile_store import Changeset, ProfileStore

SWIPE_RECORDED_MESSAGE = "Recorded {direction} swipe from {actor_id} on {target_id}"
MATCHES_REMOVED_MESSAGE = "Removed all matches for user ID: {user_id}"


class _ChangeBuffer:
    """Write-ahead buffer of record copies, keyed by user_id."""

    def __init__(self, store: ProfileStore):
        self._store = store
        self._copies: dict[ProfileId, ProfileRecord] = {}

    def working_copy(self, user_id: ProfileId) -> ProfileRecord | None:
        if user_id not in self._copies:
            original = self._store.lookup(user_id)
            if original is None:
                return None
            self._copies[user_id] = original.copy()
        return self._copies[user_id]

    def to_changeset(self) -> Changeset:
        return dict(self._copies)


def _swipe_set(record: ProfileRecord, direction: SwipeDirection) -> set[ProfileId]:
    if direction == SwipeDirection.RIGHT:
        return record.right_swipes
    return record.left_swipes


def plan_swipe(
    store: ProfileStore, actor_id: ProfileId, target_id: ProfileId,
    direction: SwipeDirection,
) -> Changeset:
    """Plan actor's swipe on target. Pure — store untouched."""
    store.require_active(actor_id)
    store.require_active(target_id)
    if actor_id == target_id:
        raise ProfileValidationError(
            "A profile cannot swipe on itself", field="target_id",
        )

    buffer = _ChangeBuffer(store)
    actor = buffer.working_copy(actor_id)
    swipes = _swipe_set(actor, direction)
    if target_id in swipes:
        return {}
    swipes.add(target_id)

    if direction == SwipeDirection.RIGHT:
        target = buffer.working_copy(target_id)
        target.notifications.append(
            Notification(sender_id=actor_id, receiver_id=target_id),
        )
        if actor_id in target.right_swipes:
            if target_id not in actor.matched_profiles:
                actor.matched_profiles.append(target_id)
            if actor_id not in target.matched_profiles:
                target.matched_profiles.append(actor_id)
    return buffer.to_changeset()


def record_swipe(
    store: ProfileStore, actor_id: ProfileId, target_id: ProfileId,
    direction: SwipeDirection,
) -> str:
    store.commit(plan_swipe(store, actor_id, target_id, direction))
    return SWIPE_RECORDED_MESSAGE.format(
        direction=direction.value, actor_id=actor_id, target_id=target_id,
    )


def is_mutual_match(a: ProfileRecord, b: ProfileRecord) -> bool:
    return b.user_id in a.right_swipes and a.user_id in b.right_swipes


def plan_match_removal(store: ProfileStore, user_id: ProfileId) -> Changeset:
    """Plan the cascading cleanup of every relationship involving user_id. Pure."""
    original = store.require_active(user_id)

    # Snapshot before any mutation
    right_swiped = set(original.right_swipes)
    left_swiped = set(original.left_swipes)

    buffer = _ChangeBuffer(store)
    own = buffer.working_copy(user_id)
    own.matched_profiles.clear()
    own.right_swipes.clear()
    own.left_swipes.clear()

    for other_id in right_swiped:
        other = buffer.working_copy(other_id)
        if other is not None:
            other.right_swipes.discard(user_id)

    for other_id in left_swiped:
        other = buffer.working_copy(other_id)
        if other is not None:
            other.left_swipes.discard(user_id)

    # Consistency sweep: unilateral swipes on user_id are invisible from its own sets
    for record in store.records():
        if record.user_id == user_id:
            continue
        if (
            user_id in record.right_swipes
            or user_id in record.left_swipes
            or user_id in record.matched_profiles
        ):
            other = buffer.working_copy(record.user_id)
            other.right_swipes.discard(user_id)
            other.left_swipes.discard(user_id)
            other.matched_profiles[:] = [
                m for m in other.matched_profiles if m != user_id
            ]
    return buffer.to_changeset()


def remove_matches(store: ProfileStore, user_id: ProfileId) -> str:
    store.commit(plan_match_removal(store, user_id))
    return MATCHES_REMOVED_MESSAGE.format(user_id=user_id)
