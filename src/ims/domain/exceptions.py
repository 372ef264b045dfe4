"""Domain-level exceptions.

Every failure the store or a use case can signal is a subclass of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Required input is missing or malformed."""


class NotFoundError(DomainException):
    """No record or photo exists for the requested ID."""


class StorageError(DomainException):
    """The backing storage could not be read or written."""


class StorageCorruptError(StorageError):
    """The persisted collection is not a valid sequence of records."""


class StorageWriteError(StorageError):
    """Writing the collection or a photo blob failed."""
