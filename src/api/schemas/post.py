"""Pydantic schemas for Post API."""

from datetime import datetime
from uuid import UUID

from api.schemas.common import CamelModel
from domain.entities.post import Post


class PostCreate(CamelModel):
    """Schema for creating a Post. Field rules are enforced by the entity."""

    post_profile_id: str
    post_title: str
    post_content: str
    post_date: datetime | None = None


class PostUpdate(CamelModel):
    """Schema for updating a Post."""

    post_title: str | None = None
    post_content: str | None = None


class PostResponse(CamelModel):
    """Schema for Post response."""

    post_id: UUID
    post_profile_id: UUID
    post_content: str
    post_date: datetime
    post_title: str

    @classmethod
    def from_entity(cls, post: Post) -> "PostResponse":
        return cls(
            post_id=post.id,
            post_profile_id=post.profile_id,
            post_content=post.content,
            post_date=post.date,
            post_title=post.title,
        )


class PostListResponse(CamelModel):
    """Schema for list of Posts."""

    data: list[PostResponse]


class PostDetailResponse(CamelModel):
    """Schema for single Post."""

    data: PostResponse
