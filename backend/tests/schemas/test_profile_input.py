"""Profile input validation — boundary normalization of client-sent attributes.

Invariants:
    - Surrounding whitespace is stripped from every text field and list entry
    - Length limits apply to the stripped value
    - Unknown keys (relationship state included) are rejected
"""

import pytest
from pydantic import ValidationError

from app.schemas.profile import ProfileInput


def test_text_fields_are_stripped():
    body = ProfileInput(name="  Bo  ", email=" bo@example.com\n", location="\tParis ")
    assert body.name == "Bo"
    assert body.email == "bo@example.com"
    assert body.location == "Paris"


def test_list_entries_are_stripped():
    body = ProfileInput(hobbies=[" chess", "climbing  "])
    assert body.hobbies == ["chess", "climbing"]


def test_stripped_attributes_reach_the_domain():
    attributes = ProfileInput(name="  Bo  ", age=32).to_attributes()
    assert attributes.name == "Bo"
    assert attributes.age == 32


def test_whitespace_only_becomes_empty():
    assert ProfileInput(name="   ").name == ""


def test_length_limit_checked_after_strip():
    assert ProfileInput(gender=" " + "x" * 50 + " ").gender == "x" * 50
    with pytest.raises(ValidationError):
        ProfileInput(gender="x" * 51)


def test_relationship_state_rejected():
    with pytest.raises(ValidationError):
        ProfileInput(right_swipes=["someone"])
