"""Post service layer with business logic."""

from datetime import datetime
from typing import Callable, List, Optional
from uuid import UUID

import structlog

from core.exceptions import PostNotFoundError, ProfileNotFoundError
from domain.entities.post import Post
from domain.identifiers import generate_uuid
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class PostService:
    """Service layer for Post business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> List[Post]:
        """Get every post, newest first."""
        async with self._uow_factory() as uow:
            return await uow.posts.get_all()

    async def get_by_id(self, post_id: UUID | str) -> Post:
        """Get a post, raising if it does not exist."""
        async with self._uow_factory() as uow:
            post = await uow.posts.get_by_id(post_id)
            if not post:
                raise PostNotFoundError(str(post_id))
            return post

    async def get_by_profile_id(self, profile_id: UUID | str) -> List[Post]:
        """Get every post written by a profile."""
        async with self._uow_factory() as uow:
            return await uow.posts.get_by_profile_id(profile_id)

    async def search(
        self,
        content: Optional[str] = None,
        title: Optional[str] = None,
    ) -> List[Post]:
        """Search posts by content, or by title when no content is given."""
        async with self._uow_factory() as uow:
            if content is not None:
                return await uow.posts.get_by_content(content)
            if title is not None:
                return await uow.posts.get_by_title(title)
            return await uow.posts.get_all()

    async def get_by_date_range(self, sunrise: datetime, sunset: datetime) -> List[Post]:
        """Get posts dated within an inclusive range."""
        async with self._uow_factory() as uow:
            return await uow.posts.get_by_date_range(sunrise, sunset)

    async def create(
        self,
        profile_id: UUID | str,
        title: str,
        content: str,
        date: Optional[datetime] = None,
    ) -> Post:
        """Create a post for an existing profile."""
        async with self._uow_factory() as uow:
            author = await uow.profiles.get_by_id(profile_id)
            if not author:
                raise ProfileNotFoundError(str(profile_id))

            post = Post(
                id=generate_uuid(),
                profile_id=author.id,
                content=content,
                date=date,
                title=title,
            )
            await uow.posts.insert(post)
            await uow.commit()

        logger.info("post_created", post_id=str(post.id), profile_id=str(author.id))
        return post

    async def update(
        self,
        post_id: UUID | str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Post:
        """Update a post's title and/or content."""
        async with self._uow_factory() as uow:
            post = await uow.posts.get_by_id(post_id)
            if not post:
                raise PostNotFoundError(str(post_id))

            if title is not None:
                post.title = title
            if content is not None:
                post.content = content

            await uow.posts.update(post)
            await uow.commit()
            return post

    async def delete(self, post_id: UUID | str) -> None:
        """Delete a post."""
        async with self._uow_factory() as uow:
            post = await uow.posts.get_by_id(post_id)
            if not post:
                raise PostNotFoundError(str(post_id))

            await uow.posts.delete(post)
            await uow.commit()

        logger.info("post_deleted", post_id=str(post_id))
