from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from elearn.api.deps import DUPLICATE_ERRORS, get_storage, not_found
from elearn.schemas.enrollment import EnrollmentRecord
from elearn.schemas.message import MessageRecord
from elearn.schemas.user import UserCreate, UserPublic, UserUpdate
from elearn.storage.base import Storage

router = APIRouter()


def _ensure_available(storage: Storage, data: UserCreate, user_id: int = None):
    """Reject a username or email already held by another user."""
    for existing in (storage.get_user_by_email(data.email), storage.get_user_by_username(data.username)):
        if existing and existing.id != user_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="User with this username or email already exists",
            )


@router.post("/", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
def create_user(user: UserCreate, storage: Storage = Depends(get_storage)):
    """Register a new user."""
    _ensure_available(storage, user)
    try:
        return storage.create_user(user)
    except DUPLICATE_ERRORS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User with this username or email already exists",
        )


@router.get("/{user_id}", response_model=UserPublic)
def get_user(user_id: int, storage: Storage = Depends(get_storage)):
    user = storage.get_user(user_id)
    if not user:
        raise not_found("User")
    return user


@router.put("/{user_id}", response_model=UserPublic)
def update_user(user_id: int, user: UserUpdate, storage: Storage = Depends(get_storage)):
    """Replace a user's profile."""
    _ensure_available(storage, user, user_id=user_id)
    try:
        updated = storage.update_user(user_id, user)
    except DUPLICATE_ERRORS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User with this username or email already exists",
        )
    if not updated:
        raise not_found("User")
    return updated


@router.get("/{user_id}/enrollments", response_model=List[EnrollmentRecord])
def get_user_enrollments(user_id: int, storage: Storage = Depends(get_storage)):
    return storage.get_enrollments_by_student(user_id)


@router.get("/{user_id}/messages", response_model=List[MessageRecord])
def get_user_messages(user_id: int, storage: Storage = Depends(get_storage)):
    """Messages sent by the user followed by messages received."""
    return storage.get_messages_by_user(user_id)
