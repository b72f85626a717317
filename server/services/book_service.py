"""
Book service containing business logic for catalogue operations.

This service abstracts business logic away from API routes and the data access layer.
"""

from typing import Optional

from core.exceptions import DataAccessError, ValidationFailure
from core.logging_config import get_logger, log_error
from domain.models import Book
from domain.view_models import BookEditModel, Pager
from repositories.base import MutableDataAccess
from services.paging import fetch_page

logger = get_logger("services.book")


class BookService:
    """Service for book listing and editing."""

    def __init__(self, data_access: MutableDataAccess, page_size: int = 10):
        self.data_access = data_access
        self.page_size = page_size

    def save(self, book: Book) -> Book:
        """
        Add or update a book.

        Args:
            book: Book to persist; gets an ID when it has none

        Returns:
            The saved book

        Raises:
            ValidationFailure: If the book refuses the add or update
            DataAccessError: If the store fails
        """
        saved = self.data_access.save(book)
        logger.info(f"Saved book {saved.id} ({saved.title})", extra={"book_id": saved.id, "action": "save_book"})
        return saved

    def update(self, book_id: str, model: BookEditModel) -> Optional[BookEditModel]:
        """Overwrite an existing book with edited fields. Returns None if it does not exist."""
        if not self.data_access.exists(Book, book_id):
            logger.warning("Attempted to update non-existent book", extra={"book_id": book_id, "action": "update_book"})
            return None
        book = model.model_copy(update={"id": book_id}).to_book()
        return BookEditModel.from_book(self.save(book))

    def find_all(self, page_index: int) -> Pager[BookEditModel]:
        """Get one page of the catalogue sorted by title."""
        page_index, total, books = fetch_page(self.data_access, Book, page_index, self.page_size, sort_by="title")
        return Pager[BookEditModel](
            page_index=page_index,
            page_size=self.page_size,
            total_count=total,
            items=[BookEditModel.from_book(b) for b in books],
        )

    def find_by_id(self, book_id: str) -> Optional[BookEditModel]:
        """Get a book by ID."""
        book = self.data_access.find_by_id(Book, book_id)
        return BookEditModel.from_book(book) if book is not None else None

    def delete(self, book_id: str) -> bool:
        """
        Delete a book.

        Returns:
            True if the book was deleted; False if it did not exist, refused
            the delete, or the store failed
        """
        try:
            deleted = self.data_access.delete(Book, book_id)
        except ValidationFailure as e:
            logger.warning(f"Book {book_id} refused delete: {e.message}", extra={"book_id": book_id, "action": "delete_book"})
            return False
        except DataAccessError as e:
            log_error(logger, e, {"book_id": book_id, "action": "delete_book"})
            return False

        if deleted:
            logger.info(f"Deleted book {book_id}", extra={"book_id": book_id, "action": "delete_book"})
        return deleted
