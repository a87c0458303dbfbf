"""Profile service layer."""

from typing import Callable, List
from uuid import UUID

from core.exceptions import ProfileNotFoundError
from domain.entities.profile import Profile
from domain.repositories.unit_of_work import IUnitOfWork


class ProfileService:
    """Service layer for Profile reads."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> List[Profile]:
        """Get every profile."""
        async with self._uow_factory() as uow:
            return await uow.profiles.get_all()

    async def get_by_id(self, profile_id: UUID | str) -> Profile:
        """Get a profile, raising if it does not exist."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_id(profile_id)
            if not profile:
                raise ProfileNotFoundError(str(profile_id))
            return profile

