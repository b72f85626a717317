"""
Custom exceptions for the Online Library application.

Provides domain-specific exceptions for better error handling and API responses.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from domain.persistable import ValidationOperation


class OnlineLibraryException(Exception):
    """Base exception for all Online Library errors."""

    def __init__(self, message="An error occurred", status_code=500):
        # type: (str, int) -> None
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DataAccessError(OnlineLibraryException):
    """Raised when the document store fails while serving a data-access call."""

    def __init__(self, message="Data access failed"):
        # type: (str) -> None
        super().__init__(message, status_code=500)


class ValidationFailure(OnlineLibraryException):
    """Raised by an entity when it refuses an add, update or delete."""

    def __init__(self, message="Validation failed", operation=None, field=None):
        # type: (str, Optional[ValidationOperation], Optional[str]) -> None
        super().__init__(message, status_code=422)
        self.operation = operation
        self.field = field


class EntityNotFoundError(OnlineLibraryException):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_name="Entity", entity_id=""):
        # type: (str, str) -> None
        msg = f"{entity_name} not found: {entity_id}" if entity_id else f"{entity_name} not found"
        super().__init__(msg, status_code=404)
        self.entity_id = entity_id


class ConfigurationError(OnlineLibraryException):
    """Raised when store connection settings are unusable."""

    def __init__(self, message="Invalid configuration"):
        # type: (str) -> None
        super().__init__(message, status_code=500)
