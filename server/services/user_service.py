"""
User service for library account management.
"""

from typing import Optional

from core.exceptions import DataAccessError, ValidationFailure
from core.logging_config import get_logger, log_error
from domain.models import LibraryUser
from domain.view_models import Pager
from repositories.base import MutableDataAccess
from services.paging import fetch_page

logger = get_logger("services.user")


class UserService:
    """Service for library users."""

    def __init__(self, data_access: MutableDataAccess, page_size: int = 10):
        self.data_access = data_access
        self.page_size = page_size

    def save(self, user: LibraryUser) -> LibraryUser:
        """Add or update a user."""
        saved = self.data_access.save(user)
        logger.info(f"Saved user {saved.id} ({saved.username})", extra={"user_id": saved.id, "action": "save_user"})
        return saved

    def find_all(self, page_index: int) -> Pager[LibraryUser]:
        """Get one page of users sorted by username."""
        page_index, total, users = fetch_page(self.data_access, LibraryUser, page_index, self.page_size, sort_by="username")
        return Pager[LibraryUser](page_index=page_index, page_size=self.page_size, total_count=total, items=users)

    def find_by_id(self, user_id: str) -> Optional[LibraryUser]:
        return self.data_access.find_by_id(LibraryUser, user_id)

    def find_by_username(self, username: str) -> Optional[LibraryUser]:
        return self.data_access.find_one_by(LibraryUser, username=username)

    def delete(self, user_id: str) -> bool:
        """Delete a user. Returns False if nothing was deleted."""
        try:
            deleted = self.data_access.delete(LibraryUser, user_id)
        except (ValidationFailure, DataAccessError) as e:
            log_error(logger, e, {"user_id": user_id, "action": "delete_user"})
            return False

        if deleted:
            logger.info(f"Deleted user {user_id}", extra={"user_id": user_id, "action": "delete_user"})
        return deleted
