"""
Errors raised by the service layer.
"""


class ServiceError(Exception):
    """Base class for errors reported to API callers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Missing required input or a disallowed value. Reported as a 4xx."""


class StorageError(ServiceError):
    """Any persistence failure. Reported as a 5xx with a generic message."""
