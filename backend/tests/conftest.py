"""Root conftest — shared test configuration and profile builders."""

import os
from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

# Ensure tests never reach a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

from app.core.profile_record import ProfileAttributes, ProfileRecord  # noqa: E402
from app.core.profile_store import ProfileStore  # noqa: E402

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


def complete_attributes(**overrides) -> ProfileAttributes:
    """Attributes passing creation validation; overrides replace defaults."""
    values = {
        "name": "Alex",
        "email": "alex@example.com",
        "age": 30,
        "min_preferred_age": 25,
        "max_preferred_age": 35,
        "location": "Paris",
        "preferred_location": "Paris",
        "gender": "female",
        "preferred_gender": "male",
    }
    values.update(overrides)
    return ProfileAttributes(**values)


@pytest.fixture
def make_profile():
    """Factory: ProfileRecord with complete attributes and increasing created_at."""
    ticks = count()

    def _make(user_id: str, **attribute_overrides) -> ProfileRecord:
        return ProfileRecord(
            user_id=user_id,
            created_at=BASE_TIME + timedelta(seconds=next(ticks)),
            creator_principal="principal-test",
            attributes=complete_attributes(**attribute_overrides),
        )
    return _make


@pytest.fixture
def store() -> ProfileStore:
    return ProfileStore()


@pytest.fixture
def couple(store, make_profile):
    """Two mutually compatible profiles A (female -> male) and B (male -> female)."""
    store.create("A", make_profile("A"))
    store.create("B", make_profile(
        "B", name="Bo", gender="male", preferred_gender="female", age=32,
    ))
    return store


@pytest.fixture
def make_attributes():
    return complete_attributes
