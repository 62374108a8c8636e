"""Error codes and error handling utilities for SonicSkin."""

from __future__ import annotations

import errno
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for appearance resolution."""

    # File system errors
    FILE_NOT_FOUND = auto()
    FILE_ACCESS_DENIED = auto()
    FILE_UNREADABLE = auto()
    PATH_INVALID = auto()

    # Font errors
    FONT_UNSUPPORTED_FORMAT = auto()
    FONT_READ_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.FILE_NOT_FOUND: "The file was not found. It may have been moved or deleted.",
    ErrorCode.FILE_ACCESS_DENIED: "Access denied. Check file permissions.",
    ErrorCode.FILE_UNREADABLE: "The file could not be read.",
    ErrorCode.PATH_INVALID: "The specified path is invalid or inaccessible.",

    ErrorCode.FONT_UNSUPPORTED_FORMAT: "Unsupported font format. Only .ttf fonts are supported.",
    ErrorCode.FONT_READ_FAILED: "The font file could not be loaded. The default font is used instead.",
}


@dataclass
class SonicSkinError(Exception):
    """Base exception for SonicSkin with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
        }


class FontLoadError(SonicSkinError):
    """Raised when a custom font file cannot be loaded."""


class UnsupportedFontFormatError(FontLoadError):
    """Raised when a custom font file does not have an accepted extension."""


def error_code_for(exc: BaseException) -> ErrorCode:
    """Classify an OS-level exception into an ErrorCode."""
    if isinstance(exc, FileNotFoundError):
        return ErrorCode.FILE_NOT_FOUND
    if isinstance(exc, PermissionError):
        return ErrorCode.FILE_ACCESS_DENIED
    if isinstance(exc, IsADirectoryError | NotADirectoryError):
        return ErrorCode.PATH_INVALID
    if isinstance(exc, OSError) and exc.errno in (errno.ENAMETOOLONG, errno.EINVAL):
        return ErrorCode.PATH_INVALID
    return ErrorCode.FILE_UNREADABLE


def format_error_for_user(error: SonicSkinError | Exception) -> str:
    """Format an error for display in a settings dialog or on the console."""
    if isinstance(error, SonicSkinError):
        parts = [error.message]
        if error.path:
            parts.append(f"\n\nFile: {error.path.name}")
        return "".join(parts)
    return f"{type(error).__name__}: {error}"
