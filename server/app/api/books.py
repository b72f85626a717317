"""
Book API routes with request logging.

Provides paginated listing and editing of the catalogue.
"""

import time
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query

from core import get_logger
from core.exceptions import EntityNotFoundError
from domain.view_models import BookEditModel
from services.book_service import BookService
from app.dependencies import get_book_service

router = APIRouter(prefix="/api/books", tags=["books"])
logger = get_logger("api.books")


@router.get("")
def list_books(
    page: int = Query(1, description="1-based page index"),
    service: BookService = Depends(get_book_service),
):
    """List one page of books sorted by title."""
    request_id = str(uuid.uuid4())[:8]
    start_time = time.time()

    logger.info(f"[{request_id}] Listing books - page={page}")
    pager = service.find_all(page)

    duration = (time.time() - start_time) * 1000
    logger.info(f"[{request_id}] Page {pager.page_index}/{pager.page_count} with {len(pager.items)} books in {duration:.2f}ms")
    return pager.model_dump()


@router.get("/{book_id}")
def get_book(book_id: str, service: BookService = Depends(get_book_service)):
    """Get a book by ID."""
    book = service.find_by_id(book_id)
    if book is None:
        raise EntityNotFoundError("Book", book_id)
    return book.model_dump()


@router.post("", status_code=201)
def create_book(model: BookEditModel, service: BookService = Depends(get_book_service)):
    """Add a book to the catalogue."""
    request_id = str(uuid.uuid4())[:8]
    logger.info(f"[{request_id}] Creating book - title={model.title!r}")

    # A create never reuses a client-supplied id
    saved = service.save(model.model_copy(update={"id": None}).to_book())

    logger.info(f"[{request_id}] Created book {saved.id}")
    return BookEditModel.from_book(saved).model_dump()


@router.put("/{book_id}")
def update_book(book_id: str, model: BookEditModel, service: BookService = Depends(get_book_service)):
    """Overwrite an existing book."""
    updated = service.update(book_id, model)
    if updated is None:
        raise EntityNotFoundError("Book", book_id)
    return updated.model_dump()


@router.delete("/{book_id}")
def delete_book(book_id: str, service: BookService = Depends(get_book_service)):
    """Delete a book."""
    if service.find_by_id(book_id) is None:
        raise EntityNotFoundError("Book", book_id)
    if not service.delete(book_id):
        raise HTTPException(status_code=409, detail=f"Book {book_id} could not be deleted")
    return {"success": True, "id": book_id}
