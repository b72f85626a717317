"""API module exports."""

from app.dependencies import get_book_service, get_library_data_access, get_user_service
from app.router import api_router

__all__ = [
    "api_router",
    "get_library_data_access",
    "get_book_service",
    "get_user_service",
]
