"""Core module exports."""

from core.config import Settings, get_page_size, get_settings
from core.exceptions import (
    ConfigurationError,
    DataAccessError,
    EntityNotFoundError,
    OnlineLibraryException,
    ValidationFailure,
)
from core.logging_config import (
    get_logger,
    log_error,
    log_request,
    log_response,
    setup_logging,
)

__all__ = [
    "OnlineLibraryException",
    "DataAccessError",
    "ValidationFailure",
    "EntityNotFoundError",
    "ConfigurationError",
    "get_logger",
    "log_request",
    "log_response",
    "log_error",
    "setup_logging",
    "Settings",
    "get_settings",
    "get_page_size",
]
