"""
Error types shared by the store, the services and the API layer.

Every failure of a single operation is reported as an
``AssignmentError`` whose ``kind`` tells the caller what went wrong.
Subclasses carry the diagnostic payload of their kind (the rejected
brand, the would‑be complexity sum and so on).  The API layer turns
them into HTTP responses with ``to_http_exception``.
"""

from enum import Enum
from typing import List, Optional

from fastapi import HTTPException, status


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    BRAND_MISMATCH = "brand_mismatch"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    ALREADY_EXISTS = "already_exists"
    STORE_FAILURE = "store_failure"


class AssignmentError(Exception):
    """Base class for all domain and infrastructure errors."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(AssignmentError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"{entity} not found")
        self.entity = entity


class ValidationFailedError(AssignmentError):
    """A required field is missing or has an unusable value."""

    kind = ErrorKind.VALIDATION_FAILED

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Field '{field}' is required")
        self.field = field


class BrandMismatchError(AssignmentError):
    kind = ErrorKind.BRAND_MISMATCH

    def __init__(self, brand: str, allowed: List[str]) -> None:
        super().__init__(
            f"Mechanic does not service brand '{brand}'. Allowed: {', '.join(allowed)}"
        )
        self.brand = brand
        self.allowed = list(allowed)


class CapacityExceededError(AssignmentError):
    kind = ErrorKind.CAPACITY_EXCEEDED

    def __init__(self, would_be_sum: int, limit: int) -> None:
        super().__init__(
            f"Total complexity ({would_be_sum}) exceeds the mechanic's limit ({limit})"
        )
        self.would_be_sum = would_be_sum
        self.limit = limit


class AlreadyExistsError(AssignmentError):
    kind = ErrorKind.ALREADY_EXISTS

    def __init__(self, entity: str, value: str) -> None:
        super().__init__(f"{entity} '{value}' already exists")
        self.entity = entity
        self.value = value


class StoreFailureError(AssignmentError):
    """Opaque wrapper around an error raised by the database driver.

    The original exception is kept in ``cause`` (and chained as
    ``__cause__``); the core never interprets or retries it.
    """

    kind = ErrorKind.STORE_FAILURE

    def __init__(self, cause: Exception) -> None:
        super().__init__(str(cause))
        self.cause = cause


_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.BRAND_MISMATCH: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CAPACITY_EXCEEDED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.STORE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http_exception(error: AssignmentError) -> HTTPException:
    """Map an ``AssignmentError`` to the HTTPException returned to clients."""
    return HTTPException(status_code=_STATUS_BY_KIND[error.kind], detail=error.message)
