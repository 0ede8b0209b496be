"""Uniform response envelope returned by every service operation."""

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.exceptions import ControlledError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_ERROR_MESSAGE = "Something went wrong!"


class ClientResponse(BaseModel, Generic[T]):
    """
    Result wrapper: data (None on failure), message, is_success and status_code.

    Serialized with camelCase keys (isSuccess, statusCode); the HTTP layer copies
    status_code onto the wire response.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    data: T | None = Field(default=None, description="Result payload, null on failure")
    message: str = Field(..., description="Human-readable outcome")
    is_success: bool = Field(..., description="True when the operation succeeded")
    status_code: int = Field(..., description="HTTP-style status code")

    @classmethod
    def ok(cls, data: Any, message: str) -> "ClientResponse[T]":
        return cls(data=data, message=message, is_success=True, status_code=200)

    @classmethod
    def fail(cls, message: str, status_code: int) -> "ClientResponse[T]":
        return cls(data=None, message=message, is_success=False, status_code=status_code)


def failure_from_exception(exc: Exception) -> ClientResponse[Any]:
    """
    Map a raised failure onto an envelope.

    ControlledError keeps its message and status code; anything else becomes a
    500 with the exception text, or the generic message when it has none.
    """
    if isinstance(exc, ControlledError):
        logger.info("Controlled failure (%s): %s", exc.status_code, exc.message)
        return ClientResponse.fail(exc.message, exc.status_code)
    logger.exception("Unexpected failure: %s", exc)
    message = str(exc).strip() or DEFAULT_ERROR_MESSAGE
    return ClientResponse.fail(message, 500)
