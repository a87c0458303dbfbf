"""Unit tests for PostService."""

from datetime import datetime
from uuid import uuid4

import pytest

from core.exceptions import OutOfRangeError, PostNotFoundError, ProfileNotFoundError
from domain.entities.post import Post
from domain.services.post_service import PostService
from tests.factories import VALID_CONTENT, make_post, make_profile
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> PostService:
    return PostService(lambda: uow)


class TestCreate:
    @pytest.mark.asyncio
    async def test_creates_post_for_author(self, service: PostService, uow: FakeUnitOfWork):
        author = make_profile()
        uow.profiles.get_by_id.return_value = author

        post = await service.create(author.id, title="Hello", content=VALID_CONTENT)

        assert isinstance(post, Post)
        assert post.profile_id == author.id
        uow.posts.insert.assert_called_once_with(post)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_keeps_given_date(self, service: PostService, uow: FakeUnitOfWork):
        uow.profiles.get_by_id.return_value = make_profile()
        date = datetime(2026, 1, 2, 3, 4, 5)

        post = await service.create(uuid4(), title="Dated", content=VALID_CONTENT, date=date)

        assert post.date == date

    @pytest.mark.asyncio
    async def test_unknown_author(self, service: PostService, uow: FakeUnitOfWork):
        uow.profiles.get_by_id.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.create(uuid4(), title="Orphan", content=VALID_CONTENT)

        uow.posts.insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_title_is_not_written(self, service: PostService, uow: FakeUnitOfWork):
        uow.profiles.get_by_id.return_value = make_profile()

        with pytest.raises(OutOfRangeError):
            await service.create(uuid4(), title="t" * 65, content=VALID_CONTENT)

        uow.posts.insert.assert_not_called()
        assert uow.rolled_back


class TestUpdate:
    @pytest.mark.asyncio
    async def test_updates_content(self, service: PostService, uow: FakeUnitOfWork):
        post = make_post(make_profile())
        uow.posts.get_by_id.return_value = post

        result = await service.update(post.id, content="This is an updated post! Yay!")

        assert result.content == "This is an updated post! Yay!"
        uow.posts.update.assert_called_once_with(post)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: PostService, uow: FakeUnitOfWork):
        uow.posts.get_by_id.return_value = None

        with pytest.raises(PostNotFoundError):
            await service.update(uuid4(), title="Nope")


class TestDelete:
    @pytest.mark.asyncio
    async def test_deletes_post(self, service: PostService, uow: FakeUnitOfWork):
        post = make_post(make_profile())
        uow.posts.get_by_id.return_value = post

        await service.delete(post.id)

        uow.posts.delete.assert_called_once_with(post)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: PostService, uow: FakeUnitOfWork):
        uow.posts.get_by_id.return_value = None

        with pytest.raises(PostNotFoundError):
            await service.delete(uuid4())


class TestQueries:
    @pytest.mark.asyncio
    async def test_search_prefers_content(self, service: PostService, uow: FakeUnitOfWork):
        uow.posts.get_by_content.return_value = []

        await service.search(content="valid", title="ignored")

        uow.posts.get_by_content.assert_called_once_with("valid")
        uow.posts.get_by_title.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_by_title(self, service: PostService, uow: FakeUnitOfWork):
        uow.posts.get_by_title.return_value = []

        await service.search(title="valid")

        uow.posts.get_by_title.assert_called_once_with("valid")

    @pytest.mark.asyncio
    async def test_search_without_filters_lists_all(
        self, service: PostService, uow: FakeUnitOfWork
    ):
        uow.posts.get_all.return_value = []

        assert await service.search() == []
        uow.posts.get_all.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, service: PostService, uow: FakeUnitOfWork):
        uow.posts.get_by_id.return_value = None

        with pytest.raises(PostNotFoundError):
            await service.get_by_id(uuid4())
