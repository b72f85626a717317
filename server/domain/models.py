"""
Domain models for the Online Library application.

Persistable entities and their self-validation rules.
"""

from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Optional, Tuple

from pydantic import Field

from core.exceptions import ValidationFailure
from domain.persistable import Persistable, ValidationOperation

if TYPE_CHECKING:
    from repositories.base import DataAccess


def _require_text(value: Optional[str], field: str, operation: ValidationOperation) -> None:
    if value is None or not value.strip():
        raise ValidationFailure(f"{field} must not be blank", operation=operation, field=field)


class Book(Persistable):
    """A title in the library catalogue."""

    collection_name: ClassVar[Optional[str]] = "books"
    index_fields: ClassVar[Tuple[str, ...]] = ("title", "isbn")

    title: str = ""
    author: str = ""
    isbn: Optional[str] = None
    publisher: Optional[str] = None
    publication_year: Optional[int] = Field(default=None, gt=0, le=9999)
    category: Optional[str] = None
    description: str = ""
    total_copies: int = Field(default=1, ge=0)
    available_copies: int = Field(default=1, ge=0)

    @property
    def copies_on_loan(self) -> int:
        return self.total_copies - self.available_copies

    def validate_for(self, operation: ValidationOperation, data_access: "DataAccess") -> None:
        if operation == ValidationOperation.DELETE:
            if self.copies_on_loan > 0:
                raise ValidationFailure(
                    f"Cannot delete book {self.id}: {self.copies_on_loan} copies are on loan",
                    operation=operation,
                )
            return

        _require_text(self.title, "title", operation)
        _require_text(self.author, "author", operation)

        if self.available_copies > self.total_copies:
            raise ValidationFailure(
                "available_copies cannot exceed total_copies",
                operation=operation,
                field="available_copies",
            )

        if self.isbn:
            other = data_access.find_one_by(Book, isbn=self.isbn)
            if other is not None and other.id != self.id:
                raise ValidationFailure(f"ISBN {self.isbn} is already used by book {other.id}", operation=operation, field="isbn")


class UserRole(str, Enum):
    """Access level of a library user."""

    READER = "READER"
    LIBRARIAN = "LIBRARIAN"


class LibraryUser(Persistable):
    """A registered user of the library."""

    collection_name: ClassVar[Optional[str]] = "users"
    index_fields: ClassVar[Tuple[str, ...]] = ("username",)

    username: str = ""
    email: str = ""
    display_name: Optional[str] = None
    role: UserRole = UserRole.READER

    def validate_for(self, operation: ValidationOperation, data_access: "DataAccess") -> None:
        if operation == ValidationOperation.DELETE:
            return

        _require_text(self.username, "username", operation)
        if "@" not in self.email:
            raise ValidationFailure(f"Invalid email address: {self.email!r}", operation=operation, field="email")

        other = data_access.find_one_by(LibraryUser, username=self.username)
        if other is not None and other.id != self.id:
            raise ValidationFailure(f"Username {self.username} is already taken", operation=operation, field="username")


__all__ = [
    "Book",
    "UserRole",
    "LibraryUser",
]
