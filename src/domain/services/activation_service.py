"""Account activation service."""

from typing import Callable

import structlog

from core.exceptions import ActivationTokenNotFoundError, InvalidInputError
from domain.entities.profile import Profile
from domain.repositories.unit_of_work import IUnitOfWork
from domain.validation import sanitize_activation_token

logger = structlog.get_logger()


class ActivationService:
    """Moves a profile from pending to activated by consuming its token."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def activate(self, token: str | None) -> Profile:
        """
        Clear the activation token of the profile that owns it.

        The token shape is checked before any lookup. Activation is one-way:
        once cleared, the same token no longer matches any profile.

        Raises:
            InvalidInputError / OutOfRangeError: malformed token
            ActivationTokenNotFoundError: no pending profile owns the token
        """
        token = sanitize_activation_token(token)
        if token is None:
            raise InvalidInputError("Activation token is required.", "token")

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_activation_token(token)
            if profile is None or profile.activation_token != token:
                raise ActivationTokenNotFoundError()

            profile.activation_token = None
            await uow.profiles.update(profile)
            await uow.commit()

        logger.info("profile_activated", profile_id=str(profile.id))
        return profile
