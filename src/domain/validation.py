"""Field sanitizers shared by entities and repository lookups.

Every sanitizer is a pure function: it returns the cleaned value or raises
``InvalidInputError`` (empty, malformed or insecure) / ``OutOfRangeError``
(length constraint violated).
"""

import re
from datetime import datetime, timezone

from argon2 import Type, extract_parameters
from argon2.exceptions import InvalidHashError

from core.exceptions import InvalidInputError, OutOfRangeError

ACTIVATION_TOKEN_LENGTH = 32
EMAIL_MAX_LENGTH = 128
PASSWORD_HASH_LENGTH = 97
PASSWORD_HASH_TYPE = Type.I
USERNAME_MAX_LENGTH = 64
POST_TITLE_MAX_LENGTH = 64
POST_CONTENT_MAX_LENGTH = 2000

_TAG = re.compile(r"<[^>]*>?")
_EMAIL_UNSAFE = re.compile(r"[^A-Za-z0-9!#$%&'*+\-=?^_`{|}~@.\[\]]")
_HEX = re.compile(r"^[0-9a-f]+$")


def strip_tags(value: str) -> str:
    """Remove markup and NUL bytes from free text."""
    return _TAG.sub("", value).replace("\x00", "")


def sanitize_text(value: str, field: str, label: str, max_length: int) -> str:
    """Trim and strip markup from free text, then bound its length."""
    if not isinstance(value, str):
        raise InvalidInputError(f"{label} must be a string.", field)
    value = strip_tags(value.strip()).strip()
    if not value:
        raise InvalidInputError(f"{label} is invalid or insecure.", field)
    if len(value) > max_length:
        raise OutOfRangeError(f"{label} is too long.", field)
    return value


def sanitize_activation_token(value: str | None) -> str | None:
    """Normalize an activation token; ``None`` means already activated."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidInputError("Profile activation token must be a string.", "activation_token")

    token = strip_tags(value.strip().lower())
    if not token:
        raise InvalidInputError(
            "Profile activation token is invalid or insecure.", "activation_token"
        )
    if not _HEX.match(token):
        raise InvalidInputError(
            "Profile activation token is not a valid hash value.", "activation_token"
        )
    if len(token) != ACTIVATION_TOKEN_LENGTH:
        raise OutOfRangeError(
            "Profile activation token is an invalid length.", "activation_token"
        )
    return token


def sanitize_email(value: str) -> str:
    """Drop characters that cannot appear in an address and bound the length."""
    if not isinstance(value, str):
        raise InvalidInputError("Profile email must be a string.", "email")
    email = _EMAIL_UNSAFE.sub("", value.strip())
    if not email:
        raise InvalidInputError("Profile email is invalid or insecure.", "email")
    if len(email) > EMAIL_MAX_LENGTH:
        raise OutOfRangeError("Profile email is too long.", "email")
    return email


def sanitize_password_hash(value: str) -> str:
    """Accept only argon2i encoded hashes of the stored length."""
    if not isinstance(value, str):
        raise InvalidInputError("Profile password hash must be a string.", "password_hash")
    password_hash = strip_tags(value.strip())
    if not password_hash:
        raise InvalidInputError("Profile password hash empty or insecure.", "password_hash")

    try:
        parameters = extract_parameters(password_hash)
    except InvalidHashError:
        raise InvalidInputError("Profile password hash is invalid.", "password_hash") from None
    if parameters.type is not PASSWORD_HASH_TYPE:
        raise InvalidInputError("Profile password hash is invalid.", "password_hash")

    if len(password_hash) != PASSWORD_HASH_LENGTH:
        raise OutOfRangeError("Profile password hash invalid length.", "password_hash")
    return password_hash


def sanitize_username(value: str) -> str:
    return sanitize_text(value, "username", "Profile username", USERNAME_MAX_LENGTH)


def sanitize_post_title(value: str) -> str:
    return sanitize_text(value, "title", "Post title", POST_TITLE_MAX_LENGTH)


def sanitize_post_content(value: str) -> str:
    return sanitize_text(value, "content", "Post content", POST_CONTENT_MAX_LENGTH)


def sanitize_post_date(value: datetime | str | None) -> datetime:
    """
    Coerce a post date into a naive UTC datetime.

    ``None`` stamps the current time. Strings must be ISO 8601. Aware
    datetimes are converted to UTC before the zone is dropped.
    """
    if value is None:
        return datetime.now(timezone.utc).replace(tzinfo=None)
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            raise InvalidInputError("Post date is not a valid date.", "date") from None
    if not isinstance(value, datetime):
        raise InvalidInputError("Post date must be a datetime.", "date")
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value
