"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema whose JSON keys are camelCase, as the web client expects."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Standardized error response."""

    status: int
    error_code: str
    message: str
    details: Any | None = None


class StatusReply(BaseModel):
    """Uniform status/message reply rendered by the activation page."""

    status: int
    message: str
