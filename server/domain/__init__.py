"""Domain module exports."""

from domain.listeners import EntityChangeListener
from domain.models import Book, LibraryUser, UserRole
from domain.persistable import Persistable, ValidationOperation
from domain.view_models import BookEditModel, Pager

__all__ = [
    "Persistable",
    "ValidationOperation",
    "EntityChangeListener",
    "Book",
    "LibraryUser",
    "UserRole",
    "BookEditModel",
    "Pager",
]
