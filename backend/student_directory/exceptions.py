"""
Error taxonomy for the student directory.

Storage failures are raised by the repositories, validation failures by the
directory service. None of them are retried; the HTTP layer maps each one to
a single error response.
"""

from typing import Optional


class DirectoryServiceException(Exception):
    """Base exception for all student directory errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class StorageError(DirectoryServiceException):
    """Raised when the relational store fails a read or write."""


class StorageUnavailable(StorageError):
    """Raised when the store cannot be reached or initialized."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        message = f"Storage unavailable during {operation}"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"operation": operation, "reason": reason}
        )


class ConstraintViolation(StorageError):
    """Raised when the store rejects an insert."""

    def __init__(self, table: str, reason: Optional[str] = None):
        message = f"Insert into '{table}' rejected by storage"
        if reason:
            message += f": {reason}"
        super().__init__(message=message, details={"table": table, "reason": reason})


class ValidationError(DirectoryServiceException):
    """Raised when required fields are missing or empty."""

    def __init__(self, fields: list[str]):
        message = "Missing required field(s): " + ", ".join(fields)
        super().__init__(message=message, details={"fields": fields})
