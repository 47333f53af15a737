"""
Custom exception classes for the application.

All exceptions inherit from AppException and include:
- error_code: Machine-readable error code
- message: Human-readable error message
- status_code: HTTP status code to return
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors."""

    error_code: str = "internal_error"
    message: str = "An unexpected error occurred"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API response."""
        result = {
            "code": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result

    def to_response(self) -> dict[str, Any]:
        """Body returned to the client."""
        return {
            "success": False,
            "error": self.to_dict(),
        }


class NotFoundError(AppException):
    """Raised when a resource is not found."""

    error_code = "not_found"
    message = "Resource not found"
    status_code = 404


class UserNotFoundError(NotFoundError):
    """Raised when a username is unknown to the users table."""

    error_code = "user_not_found"
    message = "User not found"

    def __init__(self, username: str):
        self.username = username
        super().__init__(
            message=f"user {username} does not exist",
            details={"user": username},
        )

    def to_response(self) -> dict[str, Any]:
        return {"user": self.username}


class BagNotFoundError(NotFoundError):
    """Raised when a bag does not exist for the user."""

    error_code = "bag_not_found"
    message = "Bag not found"


class AlertNotFoundError(NotFoundError):
    """Raised when a global alert does not exist."""

    error_code = "alert_not_found"
    message = "Alert not found"


class BadRequestError(AppException):
    """Raised when the request body or path is unusable."""

    error_code = "bad_request"
    message = "Bad request"
    status_code = 400


class ValidationError(AppException):
    """Raised when input validation fails."""

    error_code = "validation_error"
    message = "Invalid input"
    status_code = 422


class StoreError(AppException):
    """Raised when a database operation fails."""

    error_code = "store_error"
    message = "Database operation failed"
    status_code = 500


class MalformedPayloadError(AppException):
    """Raised when a stored payload is not a JSON object."""

    error_code = "malformed_payload"
    message = "Stored payload is not valid JSON"
    status_code = 500
