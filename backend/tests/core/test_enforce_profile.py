"""Profile Creation Enforcement — required fields reported by name, in order."""

import pytest

from app.core.enforce_profile import REQUIRED_FIELDS, validate_required_fields
from app.core.errors import ProfileValidationError


def test_complete_attributes_pass(make_attributes):
    validate_required_fields(make_attributes())


@pytest.mark.parametrize("field_name,label,_textual", REQUIRED_FIELDS)
def test_each_missing_field_is_named(make_attributes, field_name, label, _textual):
    with pytest.raises(ProfileValidationError) as exc_info:
        validate_required_fields(make_attributes(**{field_name: None}))
    assert exc_info.value.field == field_name
    assert exc_info.value.message == f"{label} is required"
    assert exc_info.value.http_status == 400


@pytest.mark.parametrize(
    "field_name",
    [name for name, _label, textual in REQUIRED_FIELDS if textual],
)
def test_whitespace_only_text_counts_as_missing(make_attributes, field_name):
    with pytest.raises(ProfileValidationError) as exc_info:
        validate_required_fields(make_attributes(**{field_name: "   "}))
    assert exc_info.value.field == field_name


def test_zero_age_is_present(make_attributes):
    validate_required_fields(make_attributes(age=0, min_preferred_age=0))


def test_first_missing_field_wins(make_attributes):
    with pytest.raises(ProfileValidationError) as exc_info:
        validate_required_fields(make_attributes(email=None, gender=None))
    assert exc_info.value.field == "email"
