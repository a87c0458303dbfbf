"""Unit tests for the Post entity."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from core.exceptions import InvalidInputError, OutOfRangeError
from domain.entities.post import Post
from tests.factories import VALID_CONTENT, VALID_TITLE, make_post, make_profile


class TestPost:
    def test_valid_post(self):
        profile = make_profile()
        date = datetime(2026, 10, 19, 12, 0, 0, 123456)
        post = make_post(profile, date=date)

        assert post.profile_id == profile.id
        assert post.content == VALID_CONTENT
        assert post.title == VALID_TITLE
        assert post.date == date

    def test_missing_date_defaults_to_now(self):
        before = datetime.now(timezone.utc).replace(tzinfo=None)
        post = make_post(make_profile())
        assert before <= post.date <= datetime.now(timezone.utc).replace(tzinfo=None)

    def test_empty_content_is_invalid(self):
        with pytest.raises(InvalidInputError):
            Post(uuid4(), uuid4(), "  ", None, VALID_TITLE)

    def test_long_title_is_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            Post(uuid4(), uuid4(), VALID_CONTENT, None, "t" * 65)

    def test_long_content_is_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            Post(uuid4(), uuid4(), "c" * 2001, None, VALID_TITLE)

    def test_bad_author_id_is_rejected(self):
        with pytest.raises(InvalidInputError):
            Post(uuid4(), "author", VALID_CONTENT, None, VALID_TITLE)

    def test_serialize(self):
        profile = make_profile()
        date = datetime(2026, 10, 19, 12, 0)
        post = make_post(profile, date=date)

        assert post.serialize() == {
            "postId": str(post.id),
            "postProfileId": str(profile.id),
            "postContent": VALID_CONTENT,
            "postDate": "2026-10-19T12:00:00",
            "postTitle": VALID_TITLE,
        }
