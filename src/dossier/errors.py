from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when the request carries no valid session or the credentials are wrong."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class AccessDeniedError(UserError):
    """Raised when a logged-in user lacks the role required for an operation."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""


class FileTooLargeError(ValidationError):
    """Raised when an upload exceeds the configured size limit."""


class StorageError(Exception):
    """Raised when the persisted project file cannot be written.

    Not a UserError: the underlying cause (paths, errno) stays in the logs.
    """
