"""
Library user API routes.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from core import get_logger
from core.exceptions import EntityNotFoundError
from domain.models import LibraryUser
from services.user_service import UserService
from app.dependencies import get_user_service

router = APIRouter(prefix="/api/users", tags=["users"])
logger = get_logger("api.users")


@router.get("")
def list_users(
    page: int = Query(1, description="1-based page index"),
    service: UserService = Depends(get_user_service),
):
    """List one page of users sorted by username."""
    return service.find_all(page).model_dump(mode="json")


@router.get("/{user_id}")
def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    user = service.find_by_id(user_id)
    if user is None:
        raise EntityNotFoundError("User", user_id)
    return user.model_dump(mode="json")


@router.post("", status_code=201)
def create_user(user: LibraryUser, service: UserService = Depends(get_user_service)):
    """Register a user."""
    # A create never reuses a client-supplied id
    saved = service.save(user.model_copy(update={"id": None}))
    logger.info(f"Registered user {saved.username}")
    return saved.model_dump(mode="json")


@router.delete("/{user_id}")
def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    if service.find_by_id(user_id) is None:
        raise EntityNotFoundError("User", user_id)
    if not service.delete(user_id):
        raise HTTPException(status_code=409, detail=f"User {user_id} could not be deleted")
    return {"success": True, "id": user_id}
