from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class InvalidRequestBodyError(UserError):
    """Raised when the request body is not valid JSON or has the wrong shape."""

    def __init__(self, message: str = "Invalid JSON") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""


class InvalidCredentialsError(UserError):
    """Raised when the submitted password does not match the shared secret."""

    def __init__(self, message: str = "Wrong password") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when a protected operation is called without a valid session."""

    def __init__(self, message: str = "Please log in first") -> None:
        super().__init__(message)


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str = "Not Found") -> None:
        super().__init__(message)


class NotConfiguredError(UserError):
    """Raised when a collaborator (database, upload relay) is not configured."""


class UpstreamError(UserError):
    """Raised when a configured collaborator is reachable but fails."""
