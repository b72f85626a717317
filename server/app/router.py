"""Main API router combining all route modules."""

from fastapi import APIRouter

from app.api import books, system, users

api_router = APIRouter()

api_router.include_router(books.router)
api_router.include_router(users.router)
api_router.include_router(system.router)

__all__ = ["api_router"]
