"""Domain layer: exceptions shared by the store, the cache and the API."""

from app.domain.exceptions import (
    AdminException,
    QueryParamsException,
    RecordAlreadyExistsException,
    RecordNotFoundException,
    ValidationException,
)

__all__ = [
    "AdminException",
    "QueryParamsException",
    "RecordAlreadyExistsException",
    "RecordNotFoundException",
    "ValidationException",
]
