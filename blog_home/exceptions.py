"""Custom exceptions for the blog home view."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error reporting."""

    # Generic errors
    BLOG_ERROR = "BLOG_ERROR"

    # Rendering errors
    INVALID_PAGE_NUMBER = "INVALID_PAGE_NUMBER"

    # Configuration errors
    CONFIG_INVALID = "CONFIG_INVALID"


class BlogException(Exception):
    """Base exception for blog errors.

    All custom exceptions should inherit from this class so callers can
    catch everything raised by this package in one place.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.BLOG_ERROR,
        details: dict[str, Any] | None = None,
    ):
        """Initialize blog exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidPageNumberException(BlogException):
    """Home page number outside the valid range (pages start at 1)."""

    def __init__(self, page_num: int):
        super().__init__(
            f"Page number must be >= 1, got {page_num}",
            code=ErrorCode.INVALID_PAGE_NUMBER,
            details={"page_num": page_num},
        )
        self.page_num = page_num


class ConfigurationException(BlogException):
    """Configuration errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.CONFIG_INVALID, details=details)
