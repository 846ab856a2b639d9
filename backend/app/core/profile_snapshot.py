"""Profile Snapshot — serialization / deserialization for ProfileRecord.

Invariants:
    - profile_to_snapshot produces a JSON-safe dict (no sets, no Enums, no datetimes)
    - profile_from_snapshot reconstructs a ProfileRecord from any valid snapshot dict
    - Missing keys fall back to ProfileRecord / ProfileAttributes defaults (forward-compatible)
    - Unknown attribute keys are ignored

Design Decisions:
    - Sets serialized as sorted lists: deterministic JSON column contents
    - Bulk attribute copy driven by ATTRIBUTE_FIELDS: no per-field boilerplate
"""

from collections import deque
from datetime import datetime

from app.core.domain_types import (
    NotificationType, Principal, ProfileId, ProfileStatus,
)
from app.core.profile_record import (
    ATTRIBUTE_FIELDS, Notification, ProfileAttributes, ProfileRecord,
)


def _serialize_attributes(attributes: ProfileAttributes) -> dict:
    return {
        name: getattr(attributes, name) for name in ATTRIBUTE_FIELDS
    }


def _serialize_notification(notification: Notification) -> dict:
    return {
        "sender_id": notification.sender_id,
        "receiver_id": notification.receiver_id,
        "notification_type": notification.notification_type.value,
    }


def profile_to_snapshot(record: ProfileRecord) -> dict:
    """Serialize ProfileRecord to JSON-safe dict. Pure, no IO."""
    return {
        "user_id": record.user_id,
        "created_at": record.created_at.isoformat(),
        "creator_principal": record.creator_principal,
        "status": record.status.value,
        "attributes": _serialize_attributes(record.attributes),
        "left_swipes": sorted(record.left_swipes),
        "right_swipes": sorted(record.right_swipes),
        "matched_profiles": list(record.matched_profiles),
        "notifications": [
            _serialize_notification(n) for n in record.notifications
        ],
    }


def profile_from_snapshot(data: dict) -> ProfileRecord:
    """Reconstruct ProfileRecord from a snapshot dict."""
    raw_attributes = data.get("attributes") or {}
    attributes = ProfileAttributes(**{
        name: raw_attributes[name]
        for name in ATTRIBUTE_FIELDS
        if name in raw_attributes
    })
    return ProfileRecord(
        user_id=ProfileId(data["user_id"]),
        created_at=datetime.fromisoformat(data["created_at"]),
        creator_principal=Principal(data.get("creator_principal", "")),
        attributes=attributes,
        left_swipes={ProfileId(i) for i in data.get("left_swipes", [])},
        right_swipes={ProfileId(i) for i in data.get("right_swipes", [])},
        matched_profiles=[
            ProfileId(i) for i in data.get("matched_profiles", [])
        ],
        notifications=deque(
            Notification(
                sender_id=ProfileId(n["sender_id"]),
                receiver_id=ProfileId(n["receiver_id"]),
                notification_type=NotificationType(
                    n.get("notification_type", NotificationType.LIKE.value),
                ),
            )
            for n in data.get("notifications", [])
        ),
        status=ProfileStatus(data.get("status", ProfileStatus.ACTIVE.value)),
    )
