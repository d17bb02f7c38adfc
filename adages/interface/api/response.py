"""Response envelope shared by every API route."""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, model_serializer, model_validator

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """``{success, data?, error?, message?}`` envelope.

    A successful response carries ``data``; a failed one carries
    ``error``. Empty optional keys are left out of the JSON.
    """

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None

    @model_validator(mode="after")
    def validate_shape(self) -> "ApiResponse[T]":
        if self.success and self.data is None:
            raise ValueError("successful response requires data")
        if not self.success and not self.error:
            raise ValueError("failed response requires an error")
        return self

    @model_serializer(mode="wrap")
    def omit_empty(self, handler) -> dict[str, Any]:
        data = handler(self)
        return {k: v for k, v in data.items() if k == "success" or v is not None}

    @classmethod
    def ok(cls, data: T, message: Optional[str] = None) -> "ApiResponse[T]":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: str, message: Optional[str] = None) -> "ApiResponse[Any]":
        return cls(success=False, error=error, message=message)
