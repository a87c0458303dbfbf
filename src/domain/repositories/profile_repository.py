"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def insert(self, profile: Profile) -> None:
        """Insert a new profile; raise StorageConflictError on duplicates."""
        ...

    async def update(self, profile: Profile) -> None:
        """Write every mutable field of an existing profile."""
        ...

    async def delete(self, profile: Profile) -> None:
        """Delete a profile."""
        ...

    async def get_by_id(self, profile_id: UUID | str | bytes) -> Profile | None:
        """Get a profile by ID."""
        ...

    async def get_by_activation_token(self, activation_token: str) -> Profile | None:
        """Get the profile waiting on an activation token."""
        ...

    async def get_by_email(self, email: str) -> Profile | None:
        """Get a profile by email."""
        ...

    async def get_by_username(self, username: str) -> Profile | None:
        """Get a profile by username."""
        ...

    async def get_all(self) -> list[Profile]:
        """Get every profile, ordered by username."""
        ...

    async def count(self) -> int:
        """Count stored profiles."""
        ...
