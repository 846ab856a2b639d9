"""Profile Record — entity schema and field-wise merge for partial updates.

Invariants:
    - user_id, created_at, creator_principal never change after creation
    - Every ProfileAttributes field is independently optional (partial updates)
    - merge overrides only fields present (not None) in the patch; sequences replaced whole
    - Relationship state (swipes, matches, notifications) lives outside ProfileAttributes,
      so the generic merge path cannot reach it

Design Decisions:
    - Pure dataclasses, no IO (ADR: functional core)
    - Copies returned everywhere: callers never hold a reference into the store
"""

import copy
from collections import deque
from dataclasses import dataclass, field, fields, replace
from datetime import datetime

from app.core.domain_types import (
    NotificationType, Principal, ProfileId, ProfileStatus,
)


@dataclass
class ProfileAttributes:
    """Descriptive profile fields — all optional."""
    gender: str | None = None
    email: str | None = None
    name: str | None = None
    mobile_number: str | None = None
    dob: str | None = None
    gender_pronouns: str | None = None
    religion: str | None = None
    height: str | None = None
    zodiac: str | None = None
    diet: str | None = None
    occupation: str | None = None
    looking_for: str | None = None
    smoking: str | None = None
    drinking: str | None = None
    hobbies: list[str] | None = None
    sports: list[str] | None = None
    art_and_culture: list[str] | None = None
    pets: str | None = None
    general_habits: list[str] | None = None
    outdoor_activities: list[str] | None = None
    travel: list[str] | None = None
    movies: list[str] | None = None
    interests_in: str | None = None
    age: int | None = None
    location: str | None = None
    min_preferred_age: int | None = None
    max_preferred_age: int | None = None
    preferred_gender: str | None = None
    preferred_location: str | None = None
    introduction: str | None = None
    images: list[str] | None = None


ATTRIBUTE_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(ProfileAttributes))


@dataclass(frozen=True)
class Notification:
    """Queued signal from one profile to another."""
    sender_id: ProfileId
    receiver_id: ProfileId
    notification_type: NotificationType = NotificationType.LIKE


@dataclass
class ProfileRecord:
    """Stored profile — attributes plus relationship state."""
    user_id: ProfileId
    created_at: datetime
    creator_principal: Principal
    attributes: ProfileAttributes = field(default_factory=ProfileAttributes)
    left_swipes: set[ProfileId] = field(default_factory=set)
    right_swipes: set[ProfileId] = field(default_factory=set)
    matched_profiles: list[ProfileId] = field(default_factory=list)
    notifications: deque[Notification] = field(default_factory=deque)
    status: ProfileStatus = ProfileStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == ProfileStatus.ACTIVE

    def copy(self) -> "ProfileRecord":
        return copy.deepcopy(self)


def merge_attributes(
    base: ProfileAttributes, patch: ProfileAttributes,
) -> ProfileAttributes:
    """Field-wise override of base by patch. Pure — returns a new instance."""
    overrides = {
        name: copy.deepcopy(getattr(patch, name))
        for name in ATTRIBUTE_FIELDS
        if getattr(patch, name) is not None
    }
    return replace(base, **overrides)


def merge(base: ProfileRecord, patch: ProfileAttributes) -> ProfileRecord:
    """Apply a partial update to a record copy; identity and relationships untouched."""
    merged = base.copy()
    merged.attributes = merge_attributes(base.attributes, patch)
    return merged
