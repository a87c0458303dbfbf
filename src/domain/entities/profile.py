"""Profile domain entity."""

from typing import Any
from uuid import UUID

from domain.identifiers import validate_uuid
from domain.validation import (
    sanitize_activation_token,
    sanitize_email,
    sanitize_password_hash,
    sanitize_username,
)


class Profile:
    """
    Domain entity for a registered user.

    Every field is validated when the profile is built and again whenever it
    is reassigned, so an invalid profile is never observable. A profile whose
    ``activation_token`` is ``None`` has been activated.
    """

    __slots__ = ("_id", "_activation_token", "_email", "_password_hash", "_username")

    def __init__(
        self,
        id: UUID | str | bytes,
        activation_token: str | None,
        email: str,
        password_hash: str,
        username: str,
    ) -> None:
        self._id = validate_uuid(id, "id")
        self.activation_token = activation_token
        self.email = email
        self.password_hash = password_hash
        self.username = username

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def activation_token(self) -> str | None:
        return self._activation_token

    @activation_token.setter
    def activation_token(self, value: str | None) -> None:
        self._activation_token = sanitize_activation_token(value)

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str) -> None:
        self._email = sanitize_email(value)

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @password_hash.setter
    def password_hash(self, value: str) -> None:
        self._password_hash = sanitize_password_hash(value)

    @property
    def username(self) -> str:
        return self._username

    @username.setter
    def username(self, value: str) -> None:
        self._username = sanitize_username(value)

    @property
    def is_activated(self) -> bool:
        """Check whether the activation token has been consumed."""
        return self._activation_token is None

    def serialize(self) -> dict[str, Any]:
        """Map every field to its wire name, rendering the id as a string."""
        return {
            "profileId": str(self._id),
            "profileActivationToken": self._activation_token,
            "profileEmail": self._email,
            "profileHash": self._password_hash,
            "profileUsername": self._username,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Profile):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Profile(id={self._id!s}, username={self._username!r})"
