from fastapi import HTTPException, Request, status
from sqlalchemy.exc import IntegrityError

from elearn.storage.base import Storage
from elearn.storage.errors import UniqueViolationError

# Uniqueness failures from either backend
DUPLICATE_ERRORS = (IntegrityError, UniqueViolationError)


def get_storage(request: Request) -> Storage:
    """Storage selected for this app at startup."""
    return request.app.state.storage


def not_found(entity: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{entity} not found")
