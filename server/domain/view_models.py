"""
View models handed to the web layer.

BookEditModel is the editable projection of a Book; Pager wraps one page of
a listing together with its paging arithmetic.
"""

import math
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, computed_field

from domain.models import Book

T = TypeVar("T")


class BookEditModel(BaseModel):
    """Book fields as edited through the web layer."""

    id: Optional[str] = None
    title: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    isbn: Optional[str] = None
    publisher: Optional[str] = None
    publication_year: Optional[int] = Field(default=None, gt=0, le=9999)
    category: Optional[str] = None
    description: str = ""
    total_copies: int = Field(default=1, ge=0)
    available_copies: int = Field(default=1, ge=0)

    @classmethod
    def from_book(cls, book: Book) -> "BookEditModel":
        return cls.model_validate(book.model_dump())

    def to_book(self) -> Book:
        return Book.model_validate(self.model_dump())


class Pager(BaseModel, Generic[T]):
    """One page of a listing."""

    page_index: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, gt=0)
    total_count: int = Field(default=0, ge=0)
    items: List[T] = Field(default_factory=list)

    @computed_field
    @property
    def page_count(self) -> int:
        return max(1, math.ceil(self.total_count / self.page_size))

    @computed_field
    @property
    def has_previous(self) -> bool:
        return self.page_index > 1

    @computed_field
    @property
    def has_next(self) -> bool:
        return self.page_index < self.page_count

    @staticmethod
    def clamp_page_index(page_index: int, page_size: int, total_count: int) -> int:
        """Bring a requested 1-based page index into [1, page_count]."""
        page_count = max(1, math.ceil(total_count / page_size))
        return min(max(page_index, 1), page_count)
