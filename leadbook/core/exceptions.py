"""Custom exceptions for the Leadbook application."""

from __future__ import annotations


class LeadbookException(Exception):
    """Base exception for Leadbook application."""

    pass


class ValidationError(LeadbookException):
    """Raised when input fails validation.

    ``errors`` maps field names to human readable messages so callers can
    surface them next to the offending input.
    """

    def __init__(self, errors: dict[str, str] | str) -> None:
        if isinstance(errors, str):
            errors = {"__all__": errors}
        self.errors = dict(errors)
        super().__init__("; ".join(f"{field}: {message}" for field, message in self.errors.items()))


class NotFoundError(LeadbookException):
    """Raised when a resource is not found or not owned by the caller."""

    pass


class RepositoryError(LeadbookException):
    """Raised when a storage operation fails."""

    pass


class RepositoryUnavailable(RepositoryError):
    """Raised when a read-only repository cannot be queried."""

    pass


class ConfigurationError(LeadbookException):
    """Raised when configuration is invalid."""

    pass


class AuthenticationError(LeadbookException):
    """Raised when authentication fails."""

    pass
