"""UUID generation and validation for entity identifiers."""

import re
from uuid import UUID, uuid4

from core.exceptions import InvalidInputError, OutOfRangeError

UUID_STRING_LENGTH = 36
UUID_BYTES_LENGTH = 16

_CANONICAL_UUID = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def generate_uuid() -> UUID:
    """Generate a fresh version 4 identifier."""
    return uuid4()


def validate_uuid(value: UUID | str | bytes, field: str = "id") -> UUID:
    """
    Coerce an identifier into a version 4 UUID.

    Accepts a UUID instance, its canonical 36-character string, or the raw
    16 bytes the database stores.

    Raises:
        InvalidInputError: the value cannot be parsed as an identifier
        OutOfRangeError: a parsable identifier that is not version 4
    """
    if isinstance(value, UUID):
        candidate = value
    elif isinstance(value, (bytes, bytearray)):
        if len(value) != UUID_BYTES_LENGTH:
            raise InvalidInputError("Identifier is an invalid length.", field)
        candidate = UUID(bytes=bytes(value))
    elif isinstance(value, str):
        value = value.strip()
        if len(value) != UUID_STRING_LENGTH:
            raise InvalidInputError("Identifier is an invalid length.", field)
        if not _CANONICAL_UUID.match(value):
            raise InvalidInputError("Identifier is not a valid UUID.", field)
        candidate = UUID(value)
    else:
        raise InvalidInputError("Identifier must be a UUID, string or bytes.", field)

    if candidate.version != 4:
        raise OutOfRangeError("Identifier is the incorrect UUID version.", field)
    return candidate
