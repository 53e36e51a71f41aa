"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class NullInputError(BaseAppError):
    """Exception raised when a required argument is missing (None)."""

    pass


class InvalidArgumentError(BaseAppError):
    """Exception raised when a location cannot be resolved into an archive path."""

    pass


class ArchiveIOError(BaseAppError):
    """Exception raised when an archive cannot be opened or read."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
