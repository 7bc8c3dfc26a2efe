"""
Custom exceptions for the UserConfig package.

This module defines a small exception hierarchy that provides:
1. Specific, technical error information for debugging and logging
2. User-friendly error messages for end-users
3. Error codes for consistent error identification
4. Optional context information for additional debugging
"""

from typing import Optional, Dict, Any
import traceback
import sys


class UserConfigError(Exception):
    """Base exception for all UserConfig errors."""

    error_code = "UC-GENERIC-ERROR"
    user_message = "An unexpected configuration error occurred."

    def __init__(
        self,
        message: str = None,
        user_message: str = None,
        error_code: str = None,
        context: Dict[str, Any] = None,
        cause: Exception = None,
        include_traceback: bool = True
    ):
        # Technical message for logs
        self.message = message or self.__class__.__doc__ or "An error occurred."
        super().__init__(self.message)

        self.user_message = user_message or self.__class__.user_message
        self.error_code = error_code or self.__class__.error_code

        self.context = context or {}
        self.cause = cause

        self.traceback = None
        if include_traceback:
            self.traceback = traceback.format_exc() if sys.exc_info()[0] else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception to a dictionary for reporting."""
        error_dict = {
            "error_code": self.error_code,
            "message": self.user_message,
        }

        if self.context.get('debug'):
            error_dict["technical_details"] = {
                "message": self.message,
                "context": self.context,
            }
            if self.traceback:
                error_dict["technical_details"]["traceback"] = self.traceback
            if self.cause:
                error_dict["technical_details"]["cause"] = str(self.cause)

        return error_dict


# Directory Errors - 1000 range
class DirectoryError(UserConfigError):
    """Base exception for configuration directory errors."""
    error_code = "UC-DIR-1000"
    user_message = "The configuration directory could not be prepared."


class DirectoryExistsError(DirectoryError):
    """Exception raised when an exclusive directory already exists."""
    error_code = "UC-DIR-1001"
    user_message = "The configuration directory already exists."

    def __init__(self, directory: str, **kwargs: Any):
        self.directory = directory
        kwargs.setdefault("context", {"directory": directory})
        super().__init__(f"Configuration directory already exists: {directory}", **kwargs)


# Path Errors - 2000 range
class PathError(UserConfigError, ValueError):
    """Base exception for logical path errors."""
    error_code = "UC-PATH-2000"
    user_message = "The requested configuration path is invalid."


class InvalidPathError(PathError):
    """Exception raised when a logical path is absolute or leaves the directory."""
    error_code = "UC-PATH-2001"
    user_message = "Configuration paths must be relative to the configuration directory."

    def __init__(self, path: str, reason: Optional[str] = None, **kwargs: Any):
        self.path = path
        kwargs.setdefault("context", {"path": path})
        message = f"Invalid configuration path: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, **kwargs)


class EmptyPathError(PathError):
    """Exception raised when an operation requires a non-empty logical path."""
    error_code = "UC-PATH-2002"
    user_message = "A configuration path must be given."


# Document Errors - 3000 range
class DocumentError(UserConfigError):
    """Base exception for configuration document errors."""
    error_code = "UC-DOC-3000"
    user_message = "A configuration file could not be processed."


class DocumentFormatError(DocumentError):
    """Exception raised when a YAML document does not hold a mapping."""
    error_code = "UC-DOC-3001"
    user_message = "The configuration file does not contain key-value pairs."
