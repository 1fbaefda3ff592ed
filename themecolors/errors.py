"""Error codes and error handling utilities for ThemeColors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for ThemeColors operations."""

    # Theme document errors
    THEME_PARSE_FAILED = auto()
    THEME_ORIGIN_MISMATCH = auto()
    THEME_FETCH_FAILED = auto()
    MANIFEST_INVALID = auto()

    # Default catalog errors
    CATALOG_INVALID = auto()
    CATALOG_MISSING = auto()

    # Network errors
    NETWORK_TIMEOUT = auto()
    NETWORK_UNAVAILABLE = auto()
    NETWORK_NOT_FOUND = auto()

    # Operation errors
    OPERATION_CANCELLED = auto()
    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.THEME_PARSE_FAILED: "The theme file could not be parsed.",
    ErrorCode.THEME_ORIGIN_MISMATCH: "A theme path points outside the package that declares it.",
    ErrorCode.THEME_FETCH_FAILED: "The theme file could not be read.",
    ErrorCode.MANIFEST_INVALID: "The package manifest is not a valid JSON object.",

    ErrorCode.CATALOG_INVALID: "The default color catalog is malformed.",
    ErrorCode.CATALOG_MISSING: "The default color catalog file was not found.",

    ErrorCode.NETWORK_TIMEOUT: "Network request timed out. Check your internet connection.",
    ErrorCode.NETWORK_UNAVAILABLE: "Network unavailable. Check your internet connection.",
    ErrorCode.NETWORK_NOT_FOUND: "The requested theme location does not exist.",

    ErrorCode.OPERATION_CANCELLED: "Operation was cancelled.",
    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",
}


@dataclass
class ThemeColorsError(Exception):
    """Base exception for ThemeColors with error code and context."""

    code: ErrorCode
    message: str = ""
    url: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.url:
            parts.append(f"\nLocation: {self.url}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "url": self.url,
            "details": self.details,
            "suggestion": self.suggestion,
        }


def classify_exception(exc: Exception, url: str | None = None) -> ThemeColorsError:
    """Classify a generic exception into a ThemeColorsError with appropriate code."""
    if isinstance(exc, ThemeColorsError):
        return exc

    exc_name = type(exc).__name__
    exc_str = str(exc).lower()

    if isinstance(exc, TimeoutError) or "timed out" in exc_str or "timeout" in exc_str:
        return ThemeColorsError(ErrorCode.NETWORK_TIMEOUT, url=url, details={"original": exc_str})
    if (
        isinstance(exc, FileNotFoundError)
        or "404" in exc_str
        or "not found" in exc_str
        or "no such file" in exc_str
    ):
        return ThemeColorsError(ErrorCode.NETWORK_NOT_FOUND, url=url, details={"original": exc_str})
    if "network" in exc_str or "connection" in exc_str or "unreachable" in exc_str:
        return ThemeColorsError(ErrorCode.NETWORK_UNAVAILABLE, url=url, details={"original": exc_str})
    if isinstance(exc, (OSError, UnicodeDecodeError)):
        return ThemeColorsError(ErrorCode.THEME_FETCH_FAILED, url=url, details={"original": exc_str})
    if isinstance(exc, ValueError):
        return ThemeColorsError(ErrorCode.THEME_PARSE_FAILED, url=url, details={"original": exc_str})

    return ThemeColorsError(
        ErrorCode.OPERATION_FAILED,
        message=f"{exc_name}: {exc}",
        url=url,
        details={"original": exc_str},
    )


def format_error_for_user(error: ThemeColorsError | Exception) -> str:
    """Format an error for display with an actionable suggestion."""
    if isinstance(error, ThemeColorsError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        if error.url:
            parts.append(f"\n\nLocation: {error.url}")
        return "".join(parts)

    classified = classify_exception(error)
    return format_error_for_user(classified)
