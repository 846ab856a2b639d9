"""Domain Types — verifies enum values used on the wire and in snapshots."""

from app.core.domain_types import (
    Principal, ProfileId, ProfileStatus, SwipeDirection, NotificationType,
    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE,
)


def test_profile_id_wraps_str():
    assert ProfileId("abc") == "abc"


def test_principal_wraps_str():
    assert Principal("alice") == "alice"


def test_profile_status_has_three_states():
    assert set(ProfileStatus) == {
        ProfileStatus.ACTIVE,
        ProfileStatus.INACTIVE,
        ProfileStatus.DELETED,
    }


def test_enums_serialize_to_string_values():
    assert ProfileStatus.ACTIVE.value == "active"
    assert SwipeDirection.RIGHT.value == "right"
    assert SwipeDirection("left") is SwipeDirection.LEFT
    assert NotificationType.LIKE.value == "like"


def test_page_size_bounds_are_consistent():
    assert 1 <= DEFAULT_PAGE_SIZE <= MAX_PAGE_SIZE
