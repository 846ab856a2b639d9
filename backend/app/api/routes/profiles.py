"""Profile Routes — CRUD, lifecycle, swipes and matches over the profile service.

Invariants:
    - Request bodies validated by Pydantic before reaching the handler
    - Domain errors propagate to the global DDateError handler (no try/except here)
    - The caller principal comes from the X-Caller-Principal header (identity provider seam)
    - Raw path and body ids are wrapped as ProfileId here, before reaching the service

Design Decisions:
    - ProfileService read from app.state: one instance per process, built in lifespan
    - Page size bounded by Query(le=...) at the boundary; page/size >= 1 rechecked in core
"""

from fastapi import APIRouter, Depends, Header, Query, Request, status

from app.config import get_settings
from app.core.domain_types import (
    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Principal, ProfileId,
)
from app.core.profile_store import CREATED_MESSAGE
from app.schemas.profile import (
    AccountConfirmation, MatchResultResponse, PaginatedProfilesResponse,
    ProfileInput, ProfileResponse, SwipeRequest,
)
from app.services.profile_service import ProfileService

router = APIRouter(prefix="/api/v1/profiles", tags=["profiles"])


def get_profile_service(request: Request) -> ProfileService:
    """FastAPI dependency — the process-wide ProfileService."""
    return request.app.state.profile_service


def get_caller(
    x_caller_principal: str | None = Header(None),
) -> Principal:
    """Calling principal; falls back to the configured anonymous principal."""
    return Principal(
        x_caller_principal or get_settings().default_caller_principal,
    )


@router.post(
    "", response_model=AccountConfirmation,
    status_code=status.HTTP_201_CREATED,
)
async def create_account(
    body: ProfileInput,
    caller: Principal = Depends(get_caller),
    service: ProfileService = Depends(get_profile_service),
):
    """Create a profile with a server-generated id."""
    user_id = await service.create_account(body.to_attributes(), caller)
    return AccountConfirmation(
        user_id=user_id,
        message=CREATED_MESSAGE.format(user_id=user_id),
    )


@router.get("", response_model=PaginatedProfilesResponse)
async def list_accounts(
    page: int = Query(1, ge=1),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    service: ProfileService = Depends(get_profile_service),
):
    """List active profiles, 1-based pagination."""
    return PaginatedProfilesResponse.from_page(
        service.list_accounts(page, size),
    )


@router.get("/{user_id}", response_model=ProfileResponse)
async def get_account(
    user_id: str, service: ProfileService = Depends(get_profile_service),
):
    return ProfileResponse.from_record(service.get_account(ProfileId(user_id)))


@router.patch("/{user_id}", response_model=AccountConfirmation)
async def update_account(
    user_id: str,
    body: ProfileInput,
    service: ProfileService = Depends(get_profile_service),
):
    """Partial update — only fields present in the body are overwritten."""
    message = await service.update_account(
        ProfileId(user_id), body.to_attributes(),
    )
    return AccountConfirmation(user_id=user_id, message=message)


@router.delete("/{user_id}", response_model=AccountConfirmation)
async def delete_account(
    user_id: str, service: ProfileService = Depends(get_profile_service),
):
    """Hard delete. Irreversible."""
    message = await service.delete_account(ProfileId(user_id))
    return AccountConfirmation(user_id=user_id, message=message)


@router.post("/{user_id}/deactivate", response_model=AccountConfirmation)
async def set_inactive(
    user_id: str, service: ProfileService = Depends(get_profile_service),
):
    """Soft delete — profile hidden everywhere but its id stays reserved."""
    message = await service.set_inactive(ProfileId(user_id))
    return AccountConfirmation(user_id=user_id, message=message)


@router.post("/{user_id}/swipes", response_model=AccountConfirmation)
async def record_swipe(
    user_id: str,
    body: SwipeRequest,
    service: ProfileService = Depends(get_profile_service),
):
    message = await service.record_swipe(
        ProfileId(user_id), ProfileId(body.target_id), body.direction,
    )
    return AccountConfirmation(user_id=user_id, message=message)


@router.get("/{user_id}/matches", response_model=MatchResultResponse)
async def find_matches(
    user_id: str,
    page: int = Query(1, ge=1),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    service: ProfileService = Depends(get_profile_service),
):
    """Mutually eligible, mutually right-swiped profiles."""
    return MatchResultResponse.from_result(
        service.find_matches(ProfileId(user_id), page, size),
    )


@router.delete("/{user_id}/matches", response_model=AccountConfirmation)
async def remove_matches(
    user_id: str, service: ProfileService = Depends(get_profile_service),
):
    """Unmatch from everyone and erase every swipe involving this profile."""
    message = await service.remove_matches(ProfileId(user_id))
    return AccountConfirmation(user_id=user_id, message=message)
