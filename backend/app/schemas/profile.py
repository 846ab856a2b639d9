"""Profile Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - ProfileInput: every field optional (same model for create and partial update);
      required-at-creation checks happen in core, not here
    - ProfileInput forbids unknown keys: relationship state cannot be sent by clients
    - Every text value (including list entries) is stripped before length checks,
      so what is stored matches what the creation checks looked at
    - Responses expose swipe sets as sorted lists

Design Decisions:
    - Conversion helpers (to_attributes / from_record) live on the schemas: routes stay thin
    - field_validator for side-effect-free transforms (strip) — keeps models pure
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.domain_types import NotificationType, ProfileStatus, SwipeDirection
from app.core.match_finder import MatchResult
from app.core.profile_record import ATTRIBUTE_FIELDS, ProfileAttributes, ProfileRecord
from app.core.profile_store import ProfilePage


class ProfileInput(BaseModel):
    """Profile attributes as sent by clients — create and partial update."""
    model_config = ConfigDict(extra="forbid")

    gender: str | None = Field(None, max_length=50)
    email: str | None = Field(None, max_length=320)
    name: str | None = Field(None, max_length=200)
    mobile_number: str | None = Field(None, max_length=50)
    dob: str | None = Field(None, max_length=50)
    gender_pronouns: str | None = Field(None, max_length=50)
    religion: str | None = Field(None, max_length=100)
    height: str | None = Field(None, max_length=50)
    zodiac: str | None = Field(None, max_length=50)
    diet: str | None = Field(None, max_length=100)
    occupation: str | None = Field(None, max_length=200)
    looking_for: str | None = Field(None, max_length=200)
    smoking: str | None = Field(None, max_length=50)
    drinking: str | None = Field(None, max_length=50)
    hobbies: list[str] | None = None
    sports: list[str] | None = None
    art_and_culture: list[str] | None = None
    pets: str | None = Field(None, max_length=100)
    general_habits: list[str] | None = None
    outdoor_activities: list[str] | None = None
    travel: list[str] | None = None
    movies: list[str] | None = None
    interests_in: str | None = Field(None, max_length=100)
    age: int | None = Field(None, ge=0)
    location: str | None = Field(None, max_length=200)
    min_preferred_age: int | None = Field(None, ge=0)
    max_preferred_age: int | None = Field(None, ge=0)
    preferred_gender: str | None = Field(None, max_length=50)
    preferred_location: str | None = Field(None, max_length=200)
    introduction: str | None = Field(None, max_length=5000)
    images: list[str] | None = None

    @field_validator("*", mode="before")
    @classmethod
    def strip_text(cls, v):
        if isinstance(v, str):
            return v.strip()
        if isinstance(v, list):
            return [item.strip() if isinstance(item, str) else item for item in v]
        return v

    def to_attributes(self) -> ProfileAttributes:
        return ProfileAttributes(**self.model_dump())


class NotificationResponse(BaseModel):
    sender_id: str
    receiver_id: str
    notification_type: NotificationType


class ProfileResponse(ProfileInput):
    """Stored profile — attributes plus identity and relationship state."""
    model_config = ConfigDict(extra="ignore")

    user_id: str
    created_at: datetime
    creator_principal: str
    status: ProfileStatus
    left_swipes: list[str] = []
    right_swipes: list[str] = []
    matched_profiles: list[str] = []
    notifications: list[NotificationResponse] = []

    @classmethod
    def from_record(cls, record: ProfileRecord) -> "ProfileResponse":
        attributes = {
            name: getattr(record.attributes, name) for name in ATTRIBUTE_FIELDS
        }
        return cls(
            **attributes,
            user_id=record.user_id,
            created_at=record.created_at,
            creator_principal=record.creator_principal,
            status=record.status,
            left_swipes=sorted(record.left_swipes),
            right_swipes=sorted(record.right_swipes),
            matched_profiles=list(record.matched_profiles),
            notifications=[
                NotificationResponse(
                    sender_id=n.sender_id,
                    receiver_id=n.receiver_id,
                    notification_type=n.notification_type,
                )
                for n in record.notifications
            ],
        )


class AccountConfirmation(BaseModel):
    user_id: str
    message: str


class SwipeRequest(BaseModel):
    target_id: str = Field(min_length=1, max_length=64)
    direction: SwipeDirection


class PaginatedProfilesResponse(BaseModel):
    total_profiles: int
    profiles: list[ProfileResponse]

    @classmethod
    def from_page(cls, page: ProfilePage) -> "PaginatedProfilesResponse":
        return cls(
            total_profiles=page.total_profiles,
            profiles=[ProfileResponse.from_record(r) for r in page.profiles],
        )


class MatchResultResponse(BaseModel):
    total_matches: int
    paginated_profiles: list[ProfileResponse]
    error_message: str | None = None

    @classmethod
    def from_result(cls, result: MatchResult) -> "MatchResultResponse":
        return cls(
            total_matches=result.total_matches,
            paginated_profiles=[
                ProfileResponse.from_record(r) for r in result.paginated_profiles
            ],
            error_message=result.error_message,
        )
