"""
Error Handling Module

Defines domain exceptions and error categories for the application.
Domain exceptions are pure and have no external dependencies.
Application exceptions can have infrastructure concerns like logging.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """Error category enumeration for structured error handling."""

    UNKNOWN_CLIENT = "unknown_client"
    EXPIRED_CLIENT = "expired_client"
    UNKNOWN_TOKEN = "unknown_token"
    FILE_UNAVAILABLE = "file_unavailable"
    INVALID_REQUEST = "invalid_request"
    SYSTEM_ERROR = "system_error"


# User-friendly error messages with actionable guidance
ERROR_MESSAGES: Dict[ErrorCategory, Dict[str, str]] = {
    ErrorCategory.UNKNOWN_CLIENT: {
        "title": "Unknown Client",
        "message": "No download links were issued for this client.",
        "action": "Reload the entry list to get fresh download links.",
    },
    ErrorCategory.EXPIRED_CLIENT: {
        "title": "Download Links Expired",
        "message": "The download links for this client have expired.",
        "action": "Reload the entry list to get fresh download links.",
    },
    ErrorCategory.UNKNOWN_TOKEN: {
        "title": "Link Not Valid",
        "message": "This download link is unknown or has already been used.",
        "action": "Each link works once. Reload the entry list to get a new one.",
    },
    ErrorCategory.FILE_UNAVAILABLE: {
        "title": "File Unavailable",
        "message": "The attachment could not be read from storage.",
        "action": "The file may have been removed. Please contact the journal owner.",
    },
    ErrorCategory.INVALID_REQUEST: {
        "title": "Invalid Request",
        "message": "The request is missing required information or contains invalid data.",
        "action": "Please check your input and try again.",
    },
    ErrorCategory.SYSTEM_ERROR: {
        "title": "System Error",
        "message": "An unexpected error occurred while processing your request.",
        "action": "Please try again later. If the problem persists, contact support.",
    },
}


# ============================================================================
# Domain Exceptions (Pure - No External Dependencies)
# ============================================================================

class DomainError(Exception):
    """
    Base exception for all domain errors.

    Domain exceptions are pure and have no external dependencies.
    They can optionally wrap original errors for context.
    """

    def __init__(self, message: str, original_error: Exception = None):
        """
        Initialize domain error.

        Args:
            message: Error message
            original_error: Optional original exception that caused this error
        """
        super().__init__(message)
        self.original_error = original_error


class DownloadAuthorizationError(DomainError):
    """Base exception for failed download token operations."""
    pass


class UnknownClientError(DownloadAuthorizationError):
    """Raised when no session exists for the given client identifier."""
    pass


class ExpiredClientError(DownloadAuthorizationError):
    """
    Raised when the client session exists but its deadline has passed.

    The session is left in place for the sweeper.
    """
    pass


class UnknownOrConsumedTokenError(DownloadAuthorizationError):
    """Raised when the token was never issued to the session or was already used."""
    pass


class FileUnavailableError(DownloadAuthorizationError):
    """
    Raised when a consumed descriptor points at a file that cannot be opened.

    The token stays consumed; there is no refund.
    """
    pass


# ============================================================================
# Application Layer Exceptions (Can have infrastructure concerns)
# ============================================================================

class ApplicationError(Exception):
    """
    Base application error with category and user-friendly messaging.

    Bridges domain errors with user-facing error messages and HTTP responses.
    """

    def __init__(
        self,
        category: ErrorCategory,
        technical_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize application error.

        Args:
            category: Error category
            technical_message: Technical error details for logging
            context: Additional context information
        """
        self.category = category
        self.technical_message = technical_message or ""
        self.context = context or {}

        error_info = ERROR_MESSAGES.get(
            category, ERROR_MESSAGES[ErrorCategory.SYSTEM_ERROR]
        )
        self.title = error_info["title"]
        self.message = error_info["message"]
        self.action = error_info["action"]

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for API response.

        Returns:
            Dictionary with error information
        """
        return {
            "error": self.category.value,
            "title": self.title,
            "message": self.message,
            "action": self.action,
        }


def create_error_response(
    category: ErrorCategory,
    technical_message: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 400,
) -> tuple[Dict[str, Any], int]:
    """
    Create a structured error response for API endpoints.

    Args:
        category: Error category
        technical_message: Technical error details for logging
        context: Additional context information
        status_code: HTTP status code

    Returns:
        Tuple of (error_dict, status_code)
    """
    error = ApplicationError(category, technical_message, context)
    return error.to_dict(), status_code
