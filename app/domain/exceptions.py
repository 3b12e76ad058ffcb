"""Domain exceptions for the admin backend.

Defines domain-level exceptions that represent business outcomes and rule
violations. These exceptions are independent of infrastructure concerns.
Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class AdminException(Exception):
    """Base exception for all application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, record_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(AdminException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class RecordNotFoundException(AdminException):
    """Raised when a record does not exist in the backing store.

    Also raised when the cache holds a not-found placeholder for the id, so
    callers see a single "record not found" outcome either way.
    """

    def __init__(self, entity: str, record_id: int) -> None:
        """Initialize with entity name and id.

        Args:
            entity: Entity name (e.g. 'files', 'roles').
            record_id: The identifier that was not found.
        """
        super().__init__(
            f"{entity} not found: {record_id}",
            "RECORD_NOT_FOUND",
            {"entity": entity, "record_id": record_id},
        )


class QueryParamsException(AdminException):
    """Raised when list filter/sort parameters cannot be translated to a query."""

    def __init__(self, message: str, column: str | None = None) -> None:
        details = {"column": column} if column else {}
        super().__init__(f"query params error: {message}", "QUERY_PARAMS_ERROR", details)


class RecordAlreadyExistsException(AdminException):
    """Raised when an insert collides with an existing key (e.g. a join-table id)."""

    def __init__(self, entity: str, record_id: int | None = None) -> None:
        super().__init__(
            f"{entity} already exists" + (f": {record_id}" if record_id else ""),
            "RECORD_ALREADY_EXISTS",
            {"entity": entity, "record_id": record_id},
        )
