"""
Dependency injection providers.

Provides dependency injection for FastAPI using the Depends pattern.
"""

from fastapi import Depends

from core.config import get_page_size
from infrastructure.mongo_client import get_data_access
from repositories.base import MutableDataAccess
from services.book_service import BookService
from services.change_listener import LoggingChangeListener
from services.user_service import UserService

_audit_listener = LoggingChangeListener()


def get_library_data_access() -> MutableDataAccess:
    """Get the shared data access with the audit listener registered."""
    data_access = get_data_access()
    # Registration ignores duplicates
    data_access.add_listener(_audit_listener)
    return data_access


def get_book_service(data_access: MutableDataAccess = Depends(get_library_data_access)) -> BookService:
    """FastAPI dependency for BookService."""
    return BookService(data_access, page_size=get_page_size())


def get_user_service(data_access: MutableDataAccess = Depends(get_library_data_access)) -> UserService:
    """FastAPI dependency for UserService."""
    return UserService(data_access, page_size=get_page_size())
