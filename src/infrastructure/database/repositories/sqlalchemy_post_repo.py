"""SQLAlchemy implementation of Post repository."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import InvalidInputError, StorageConflictError
from domain.entities.post import Post
from domain.identifiers import validate_uuid
from domain.validation import sanitize_post_content, sanitize_post_date, sanitize_post_title
from infrastructure.database.models import PostModel


class SQLAlchemyPostRepository:
    """SQLAlchemy implementation of IPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, post: Post) -> None:
        """Insert a new post."""
        self._session.add(self._to_model(post))
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise StorageConflictError(
                "Post id is already taken or its author does not exist"
            ) from exc

    async def update(self, post: Post) -> None:
        """Update an existing post."""
        model = await self._get_model(post.id)
        if not model:
            raise ValueError(f"Post {post.id} not found")

        model.profile_id = post.profile_id.bytes
        model.content = post.content
        model.date = post.date
        model.title = post.title

        await self._session.flush()

    async def delete(self, post: Post) -> None:
        """Delete a post."""
        model = await self._get_model(post.id)
        if not model:
            return

        await self._session.delete(model)
        await self._session.flush()

    async def get_by_id(self, post_id: UUID | str | bytes) -> Post | None:
        """Get a post by ID."""
        model = await self._get_model(validate_uuid(post_id, "post_id"))
        return self._to_entity(model) if model else None

    async def get_by_profile_id(self, profile_id: UUID | str | bytes) -> list[Post]:
        """Get all posts written by a profile, newest first."""
        profile_uuid = validate_uuid(profile_id, "profile_id")
        stmt = (
            select(PostModel)
            .where(PostModel.profile_id == profile_uuid.bytes)
            .order_by(PostModel.date.desc())
        )
        return await self._fetch_all(stmt)

    async def get_by_content(self, content: str) -> list[Post]:
        """Get posts whose content contains the given text."""
        stmt = (
            select(PostModel)
            .where(PostModel.content.contains(sanitize_post_content(content), autoescape=True))
            .order_by(PostModel.date.desc())
        )
        return await self._fetch_all(stmt)

    async def get_by_date_range(self, sunrise: datetime, sunset: datetime) -> list[Post]:
        """Get posts dated within an inclusive range, oldest first."""
        sunrise = sanitize_post_date(sunrise)
        sunset = sanitize_post_date(sunset)
        if sunrise > sunset:
            raise InvalidInputError("Post date range ends before it starts.", "date")

        stmt = (
            select(PostModel)
            .where(PostModel.date >= sunrise, PostModel.date <= sunset)
            .order_by(PostModel.date)
        )
        return await self._fetch_all(stmt)

    async def get_by_title(self, title: str) -> list[Post]:
        """Get posts whose title contains the given text."""
        stmt = (
            select(PostModel)
            .where(PostModel.title.contains(sanitize_post_title(title), autoescape=True))
            .order_by(PostModel.date.desc())
        )
        return await self._fetch_all(stmt)

    async def get_all(self) -> list[Post]:
        """Get every post, newest first."""
        return await self._fetch_all(select(PostModel).order_by(PostModel.date.desc()))

    async def count(self) -> int:
        """Count stored posts."""
        stmt = select(func.count()).select_from(PostModel)
        result = await self._session.execute(stmt)
        return result.scalar() or 0

    async def _fetch_all(self, stmt) -> list[Post]:  # type: ignore[no-untyped-def]
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def _get_model(self, post_id: UUID) -> PostModel | None:
        stmt = select(PostModel).where(PostModel.id == post_id.bytes)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: PostModel) -> Post:
        """Convert ORM model to domain entity."""
        return Post(
            id=model.id,
            profile_id=model.profile_id,
            content=model.content,
            date=model.date,
            title=model.title,
        )

    def _to_model(self, entity: Post) -> PostModel:
        """Convert domain entity to ORM model."""
        return PostModel(
            id=entity.id.bytes,
            profile_id=entity.profile_id.bytes,
            content=entity.content,
            date=entity.date,
            title=entity.title,
        )
