"""Uniform response envelope."""

from typing import Any, Generic, Optional, TypeVar

from qanda.application.usecase.common import CamelModel, PaginationInfo

T = TypeVar("T")


class ApiResponse(CamelModel, Generic[T]):
    """Successful response."""

    success: bool = True
    data: T
    message: Optional[str] = None
    pagination: Optional[PaginationInfo] = None


class ErrorResponse(CamelModel):
    """Error response. details is omitted when empty."""

    success: bool = False
    error: str
    details: Optional[Any] = None
