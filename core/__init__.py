"""
Core modules for the user-info service.

This package contains fundamental utilities used across the application:
- config: Application settings and configuration
- exceptions: Custom exception classes
- usernames: Username domain suffixing
"""

from .config import Settings, get_settings
from .exceptions import (
    AlertNotFoundError,
    AppException,
    BadRequestError,
    BagNotFoundError,
    MalformedPayloadError,
    NotFoundError,
    StoreError,
    UserNotFoundError,
    ValidationError,
)
from .usernames import add_username_suffix

__all__ = [
    # Config
    "get_settings",
    "Settings",
    # Exceptions
    "AppException",
    "NotFoundError",
    "UserNotFoundError",
    "BagNotFoundError",
    "AlertNotFoundError",
    "BadRequestError",
    "ValidationError",
    "StoreError",
    "MalformedPayloadError",
    # Usernames
    "add_username_suffix",
]
