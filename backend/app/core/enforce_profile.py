"""Profile Creation Enforcement — required-field checks run once, at creation.

Invariants:
    - Checks run in a fixed order; the first missing field is reported
    - Textual fields must be non-empty after stripping whitespace
    - Numeric fields only need to be present (0 is a valid value)
    - Never enforced again after creation (updates may leave fields unset)

Design Decisions:
    - Raises ProfileValidationError instead of returning an error dict: the store
      propagates it verbatim to the API boundary
"""

from app.core.errors import ProfileValidationError
from app.core.profile_record import ProfileAttributes


# (field, human label, is_textual)
REQUIRED_FIELDS: tuple[tuple[str, str, bool], ...] = (
    ("name", "Name", True),
    ("email", "Email", True),
    ("age", "Age", False),
    ("min_preferred_age", "Minimum preferred age", False),
    ("max_preferred_age", "Maximum preferred age", False),
    ("location", "Location", True),
    ("preferred_location", "Preferred location", True),
    ("gender", "Gender", True),
    ("preferred_gender", "Preferred gender", True),
)


def _is_missing(value: object, textual: bool) -> bool:
    if value is None:
        return True
    return textual and not str(value).strip()


def validate_required_fields(attributes: ProfileAttributes) -> None:
    """Raise ProfileValidationError naming the first missing required field."""
    for name, label, textual in REQUIRED_FIELDS:
        if _is_missing(getattr(attributes, name), textual):
            raise ProfileValidationError(f"{label} is required", field=name)
