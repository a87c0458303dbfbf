"""Post repository protocol."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from domain.entities.post import Post


class IPostRepository(Protocol):
    """Repository interface for Post entities."""

    async def insert(self, post: Post) -> None:
        """Insert a new post."""
        ...

    async def update(self, post: Post) -> None:
        """Write every mutable field of an existing post."""
        ...

    async def delete(self, post: Post) -> None:
        """Delete a post."""
        ...

    async def get_by_id(self, post_id: UUID | str | bytes) -> Post | None:
        """Get a post by ID."""
        ...

    async def get_by_profile_id(self, profile_id: UUID | str | bytes) -> list[Post]:
        """Get all posts written by a profile."""
        ...

    async def get_by_content(self, content: str) -> list[Post]:
        """Get posts whose content contains the given text."""
        ...

    async def get_by_date_range(self, sunrise: datetime, sunset: datetime) -> list[Post]:
        """Get posts dated within an inclusive range."""
        ...

    async def get_by_title(self, title: str) -> list[Post]:
        """Get posts whose title contains the given text."""
        ...

    async def get_all(self) -> list[Post]:
        """Get every post, newest first."""
        ...

    async def count(self) -> int:
        """Count stored posts."""
        ...
