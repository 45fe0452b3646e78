"""Response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

SUCCESS_CODE = "0000"
SUCCESS_MESSAGE = "success"


class ApiResponse(BaseModel, Generic[T]):
    """Envelope for successful responses."""

    code: str = SUCCESS_CODE
    message: str = SUCCESS_MESSAGE
    data: T | None = None


class ErrorResponse(BaseModel):
    """Envelope for error responses."""

    code: str
    message: str
    data: None = None


def ok(data: T | None = None) -> ApiResponse[T]:
    """Wrap a payload in the success envelope."""
    return ApiResponse(data=data)
