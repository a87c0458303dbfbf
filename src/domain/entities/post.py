"""Post domain entity."""

from datetime import datetime
from typing import Any
from uuid import UUID

from domain.identifiers import validate_uuid
from domain.validation import sanitize_post_content, sanitize_post_date, sanitize_post_title


class Post:
    """Domain entity for a post written by a profile."""

    __slots__ = ("_id", "_profile_id", "_content", "_date", "_title")

    def __init__(
        self,
        id: UUID | str | bytes,
        profile_id: UUID | str | bytes,
        content: str,
        date: datetime | str | None,
        title: str,
    ) -> None:
        self._id = validate_uuid(id, "id")
        self.profile_id = profile_id
        self.content = content
        self.date = date
        self.title = title

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def profile_id(self) -> UUID:
        return self._profile_id

    @profile_id.setter
    def profile_id(self, value: UUID | str | bytes) -> None:
        self._profile_id = validate_uuid(value, "profile_id")

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: str) -> None:
        self._content = sanitize_post_content(value)

    @property
    def date(self) -> datetime:
        return self._date

    @date.setter
    def date(self, value: datetime | str | None) -> None:
        self._date = sanitize_post_date(value)

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = sanitize_post_title(value)

    def serialize(self) -> dict[str, Any]:
        """Map every field to its wire name; ids as strings, date as ISO 8601."""
        return {
            "postId": str(self._id),
            "postProfileId": str(self._profile_id),
            "postContent": self._content,
            "postDate": self._date.isoformat(),
            "postTitle": self._title,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Post):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Post(id={self._id!s}, title={self._title!r})"
