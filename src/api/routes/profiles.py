"""Profile API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_profile_service
from api.schemas.profile import ProfileDetailResponse, ProfileListResponse, ProfileResponse
from core.rate_limit import READ_LIMIT, limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profiles"])


@router.get(
    "/",
    response_model=ProfileListResponse,
    summary="List all profiles",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Get every profile, ordered by username."""
    profiles = await service.get_all()
    return ProfileListResponse(data=[ProfileResponse.from_entity(p) for p in profiles])


@router.get(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile",
    responses={
        400: {"description": "Malformed profile id"},
        404: {"description": "Profile not found"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    profile_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get one profile by its id."""
    profile = await service.get_by_id(profile_id)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))
