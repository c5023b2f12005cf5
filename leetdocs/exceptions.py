"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class LeetdocsError(Exception):
    """Base exception for all application-specific errors."""


class AuthenticationError(LeetdocsError):
    """Raised when the login form is rejected or no session cookie is issued."""


class ConfigurationError(LeetdocsError):
    """Raised for issues related to configuration loading or validation."""


class APIError(LeetdocsError):
    """Raised when the site answers with a payload that cannot be used."""
