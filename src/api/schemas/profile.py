"""Pydantic schemas for Profile API."""

from uuid import UUID

from pydantic import ConfigDict

from api.schemas.common import CamelModel
from domain.entities.profile import Profile


class ProfileResponse(CamelModel):
    """Public view of a profile; the password hash and activation token stay server-side."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "profileId": "3f1c1f2e-6f0d-4a3c-9b8e-2f4b6c7d8e9f",
                "profileEmail": "drumpf@tinyhands.ru",
                "profileUsername": "bernie",
                "profileActivated": True,
            }
        },
    )

    profile_id: UUID
    profile_email: str
    profile_username: str
    profile_activated: bool

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            profile_id=profile.id,
            profile_email=profile.email,
            profile_username=profile.username,
            profile_activated=profile.is_activated,
        )


class ProfileListResponse(CamelModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]


class ProfileDetailResponse(CamelModel):
    """Schema for single Profile."""

    data: ProfileResponse
