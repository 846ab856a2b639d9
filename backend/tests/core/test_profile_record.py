"""Profile Record — merge semantics and copy isolation.

Tests:
    - Only fields present in the patch are overwritten
    - Sequence fields are replaced, never appended
    - Identity and relationship state survive a merge untouched
    - merge never mutates its inputs
"""

from app.core.domain_types import ProfileStatus
from app.core.profile_record import (
    ATTRIBUTE_FIELDS, Notification, ProfileAttributes, merge, merge_attributes,
)


def test_merge_overwrites_only_present_fields(make_attributes):
    base = make_attributes(occupation="chef")
    merged = merge_attributes(base, ProfileAttributes(name="Sam", age=41))

    assert merged.name == "Sam"
    assert merged.age == 41
    for name in ATTRIBUTE_FIELDS:
        if name not in ("name", "age"):
            assert getattr(merged, name) == getattr(base, name)


def test_merge_replaces_sequences_whole(make_attributes):
    base = make_attributes(hobbies=["chess", "climbing"])
    merged = merge_attributes(base, ProfileAttributes(hobbies=["surfing"]))
    assert merged.hobbies == ["surfing"]


def test_merge_with_empty_patch_is_identity(make_attributes):
    base = make_attributes(images=["a.png"])
    assert merge_attributes(base, ProfileAttributes()) == base


def test_merge_does_not_alias_patch_sequences(make_attributes):
    patch = ProfileAttributes(travel=["Lisbon"])
    merged = merge_attributes(make_attributes(), patch)
    patch.travel.append("Oslo")
    assert merged.travel == ["Lisbon"]


def test_record_merge_keeps_identity_and_relationships(make_profile):
    record = make_profile("A")
    record.right_swipes.add("B")
    record.left_swipes.add("C")
    record.matched_profiles.append("B")
    record.notifications.append(Notification(sender_id="B", receiver_id="A"))

    merged = merge(record, ProfileAttributes(location="Lyon"))

    assert merged.attributes.location == "Lyon"
    assert merged.user_id == record.user_id
    assert merged.created_at == record.created_at
    assert merged.creator_principal == record.creator_principal
    assert merged.right_swipes == {"B"}
    assert merged.left_swipes == {"C"}
    assert merged.matched_profiles == ["B"]
    assert list(merged.notifications) == list(record.notifications)
    assert merged.status == ProfileStatus.ACTIVE


def test_record_merge_leaves_base_untouched(make_profile):
    record = make_profile("A")
    merge(record, ProfileAttributes(location="Lyon"))
    assert record.attributes.location == "Paris"


def test_copy_is_deep(make_profile):
    record = make_profile("A", hobbies=["chess"])
    clone = record.copy()
    clone.right_swipes.add("B")
    clone.attributes.hobbies.append("go")
    assert record.right_swipes == set()
    assert record.attributes.hobbies == ["chess"]
