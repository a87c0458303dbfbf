"""Post API routes."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query, Request, status

from api.dependencies import get_post_service
from api.schemas.post import (
    PostCreate,
    PostDetailResponse,
    PostListResponse,
    PostResponse,
    PostUpdate,
)
from core.exceptions import InvalidInputError
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.post_service import PostService

router = APIRouter(prefix="/post", tags=["posts"])


@router.get(
    "/",
    response_model=PostListResponse,
    summary="List posts",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_posts(
    request: Request,
    profile_id: str | None = Query(None, alias="profileId"),
    content: str | None = Query(None),
    title: str | None = Query(None),
    sunrise: datetime | None = Query(None),
    sunset: datetime | None = Query(None),
    service: PostService = Depends(get_post_service),
) -> PostListResponse:
    """
    Get posts, newest first.

    At most one filter applies, checked in this order: author, date range
    (``sunrise`` and ``sunset`` together), content, title.
    """
    if profile_id is not None:
        posts = await service.get_by_profile_id(profile_id)
    elif sunrise is not None or sunset is not None:
        if sunrise is None or sunset is None:
            raise InvalidInputError("Both sunrise and sunset are required.", "date")
        posts = await service.get_by_date_range(sunrise, sunset)
    else:
        posts = await service.search(content=content, title=title)
    return PostListResponse(data=[PostResponse.from_entity(p) for p in posts])


@router.get(
    "/{post_id}",
    response_model=PostDetailResponse,
    summary="Get a post",
    responses={
        400: {"description": "Malformed post id"},
        404: {"description": "Post not found"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_post(
    request: Request,
    post_id: str,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Get one post by its id."""
    post = await service.get_by_id(post_id)
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.post(
    "/",
    response_model=PostDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a post",
    responses={
        201: {"description": "Post created successfully"},
        404: {"description": "Author profile not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_post(
    request: Request,
    body: PostCreate,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Create a post; the date defaults to now."""
    post = await service.create(
        profile_id=body.post_profile_id,
        title=body.post_title,
        content=body.post_content,
        date=body.post_date,
    )
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.put(
    "/{post_id}",
    response_model=PostDetailResponse,
    summary="Update a post",
    responses={
        200: {"description": "Post updated successfully"},
        404: {"description": "Post not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_post(
    request: Request,
    post_id: str,
    body: PostUpdate,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Update a post's title and/or content."""
    post = await service.update(post_id, title=body.post_title, content=body.post_content)
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a post",
    responses={
        204: {"description": "Post deleted successfully"},
        404: {"description": "Post not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_post(
    request: Request,
    post_id: str,
    service: PostService = Depends(get_post_service),
) -> None:
    """Delete a post."""
    await service.delete(post_id)
    return None
