"""Match Finder — stateless query for mutually eligible, mutually right-swiped profiles.

Invariants:
    - Read-only over the store; returns copies
    - Candidate c matches profile p iff: c != p, c active,
      min_pref(p) <= age(c) <= max_pref(p), gender(c) == preferred_gender(p),
      location(c) == preferred_location(p), and both right-swiped each other
    - total_matches counted before pagination
    - error_message is always None on success

Design Decisions:
    - Unset age / age bounds fall back to 0 and unset gender / location compare equal
      to unset preferences (literal compatibility; see DESIGN.md open questions)
    - Candidates ordered like the profile listing: (created_at, user_id)
"""

from dataclasses import dataclass, field

from app.core.domain_types import ProfileId
from app.core.pagination import paginate, validate_page_params
from app.core.profile_record import ProfileRecord
from app.core.profile_store import ProfileStore
from app.core.swipe_engine import is_mutual_match


@dataclass
class MatchResult:
    total_matches: int
    paginated_profiles: list[ProfileRecord] = field(default_factory=list)
    error_message: str | None = None


def is_eligible_match(profile: ProfileRecord, candidate: ProfileRecord) -> bool:
    """Boolean eligibility of candidate for profile. Pure."""
    if candidate.user_id == profile.user_id or not candidate.is_active:
        return False
    wanted = profile.attributes
    offered = candidate.attributes
    age = offered.age or 0
    if not (wanted.min_preferred_age or 0) <= age <= (wanted.max_preferred_age or 0):
        return False
    if offered.gender != wanted.preferred_gender:
        return False
    if offered.location != wanted.preferred_location:
        return False
    return is_mutual_match(profile, candidate)


def find_matches(
    store: ProfileStore, profile_id: ProfileId, page: int, size: int,
) -> MatchResult:
    profile = store.require_active(profile_id)
    validate_page_params(page, size)

    matched = [
        candidate for candidate in store.active_records()
        if is_eligible_match(profile, candidate)
    ]
    selected = paginate(matched, page, size)
    return MatchResult(
        total_matches=len(matched),
        paginated_profiles=[r.copy() for r in selected],
    )
