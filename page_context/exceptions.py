"""
Custom exceptions for the application.
"""

from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(self, message: str = "", code: int = 0):
        super().__init__(message)
        self.message = message
        self.code = code


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class PluginNotFoundError(BaseAppError):
    """Exception raised when an entity type is not registered."""

    pass


class InvalidPluginDefinitionError(BaseAppError):
    """Exception raised when an entity type definition cannot provide a storage."""

    pass


class EntityStorageError(BaseAppError):
    """Exception raised for entity storage and data access errors."""

    pass


class InvalidContextError(BaseAppError, ValueError):
    """
    Exception raised when the route context cannot be used to resolve an entity.

    Wraps a collaborator failure: the wrapped error's message and code are kept
    and the wrapped exception is chained as ``__cause__``.
    """

    @classmethod
    def from_error(cls, error: Exception) -> "InvalidContextError":
        """
        Build an InvalidContextError carrying the message and code of another error.

        Args:
            error: The collaborator exception being wrapped

        Returns:
            A new InvalidContextError (the caller chains it with ``raise ... from``)
        """
        message: str = getattr(error, "message", None) or str(error)
        code: Optional[int] = getattr(error, "code", None)
        return cls(message, code if isinstance(code, int) else 0)
