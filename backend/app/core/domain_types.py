"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ProfileId wraps the opaque hex string key, Principal the creating caller; both are
      applied where raw strings enter (HTTP routes, id generator, snapshot decoder)
    - Lifecycle, swipe direction and notification kind encoded as Enums — no raw string matching
    - DELETED is never stored on a record; it is reported for ids absent from the store

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (snapshot + API payloads)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProfileId = NewType("ProfileId", str)
Principal = NewType("Principal", str)


# ─── Enums ───────────────────────────────────────────────────────

class ProfileStatus(str, Enum):
    """Profile lifecycle states — maps to DB `status` column."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    DELETED = "deleted"


class SwipeDirection(str, Enum):
    """One-directional signal from one profile toward another."""
    LEFT = "left"
    RIGHT = "right"


class NotificationType(str, Enum):
    """Kinds of notification queued on a profile."""
    LIKE = "like"


# ─── Limits ──────────────────────────────────────────────────────

DEFAULT_PAGE_SIZE: int = 10
MAX_PAGE_SIZE: int = 100
