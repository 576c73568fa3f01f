"""ICS-specific exceptions for error handling."""

from typing import Optional


class ICSError(Exception):
    """Base exception for ICS-related errors."""

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.value = value


class ICSParseError(ICSError):
    """Exception raised when ICS content cannot be parsed."""


class ICSDateError(ICSParseError):
    """Exception raised when an ICS date or date-time value is malformed."""


class ICSConfigError(ICSError):
    """Exception raised when configuration is invalid."""
