"""
Error types raised by the events service.
Each error carries the HTTP status the gateway should answer with.
"""


class EventServiceError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(EventServiceError):
    status_code = 400


class DuplicateError(EventServiceError):
    status_code = 409


class NotFoundError(EventServiceError):
    status_code = 404


class StorageError(EventServiceError):
    """Reading or writing the events document failed."""

    status_code = 500


class StorageCorruptionError(StorageError):
    """The events document exists but is not valid JSON."""
