"""Services module exports."""

from services.book_service import BookService
from services.change_listener import LoggingChangeListener
from services.paging import fetch_page
from services.user_service import UserService

__all__ = [
    "BookService",
    "UserService",
    "LoggingChangeListener",
    "fetch_page",
]
