from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar


class ErrorCodeBase(str, Enum):
    """Base class for error codes.

    This is a string enum where each member is both an Enum and a str.
    """

    value: str


class ErrorCode(ErrorCodeBase):
    """Generic error codes shared by every part of the banner pipeline.

    Domain-specific failures live in ``platform_banner.error_codes``.
    """

    CONFIG_ERROR = "CONFIG_ERROR"  # configuration missing/invalid


ErrorCodeType = TypeVar("ErrorCodeType", bound=ErrorCodeBase)


class AppError(Exception, Generic[ErrorCodeType]):
    """Application error with a structured error code.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error message

    Example:
        >>> raise AppError(code=ErrorCode.CONFIG_ERROR, message="BANNER_LASTFM_USER is required")
    """

    def __init__(self, code: ErrorCodeType, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


__all__ = ["AppError", "ErrorCode", "ErrorCodeBase"]
