"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Validation errors (400)
    INVALID_INPUT = "INVALID_INPUT"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    POST_NOT_FOUND = "POST_NOT_FOUND"
    ACTIVATION_TOKEN_NOT_FOUND = "ACTIVATION_TOKEN_NOT_FOUND"

    # Method errors (405)
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

    # Conflict errors (409)
    STORAGE_CONFLICT = "STORAGE_CONFLICT"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (5xx)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    STORAGE_FAILURE = "STORAGE_FAILURE"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class InvalidInputError(AppException):
    """A value is malformed, empty after sanitization, or insecure."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_INPUT,
            message=message,
            status_code=400,
            details={"field": field} if field else None,
        )


class OutOfRangeError(AppException):
    """A value violates its length or version constraint."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.OUT_OF_RANGE,
            message=message,
            status_code=400,
            details={"field": field} if field else None,
        )


class StorageConflictError(AppException):
    """A write collided with a uniqueness constraint."""

    def __init__(self, message: str = "Record conflicts with an existing record") -> None:
        super().__init__(
            error_code=ErrorCode.STORAGE_CONFLICT,
            message=message,
            status_code=409,
        )


class StorageFailureError(AppException):
    """The backing store could not complete the operation."""

    def __init__(self, message: str = "Storage is unavailable") -> None:
        super().__init__(
            error_code=ErrorCode.STORAGE_FAILURE,
            message=message,
            status_code=503,
        )


class MethodNotAllowedError(AppException):
    """HTTP method not supported by the endpoint."""

    def __init__(self, method: str) -> None:
        super().__init__(
            error_code=ErrorCode.METHOD_NOT_ALLOWED,
            message="Invalid HTTP request!",
            status_code=405,
            details={"method": method},
        )


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {profile_id}",
            status_code=404,
            details={"profile_id": profile_id},
        )


class PostNotFoundError(AppException):
    """Post not found."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.POST_NOT_FOUND,
            message=f"Post not found: {post_id}",
            status_code=404,
            details={"post_id": post_id},
        )


class ActivationTokenNotFoundError(AppException):
    """No profile is waiting on this activation token."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.ACTIVATION_TOKEN_NOT_FOUND,
            message=(
                "No profile found for this activation token. "
                "Have you already activated your account?"
            ),
            status_code=404,
        )
