from fastapi import APIRouter, Depends, status
from typing import List
from elearn.api.deps import get_storage, not_found
from elearn.schemas.category import CategoryCreate, CategoryRecord
from elearn.schemas.course import CourseRecord
from elearn.storage.base import Storage

router = APIRouter()


@router.get("/", response_model=List[CategoryRecord])
def list_categories(storage: Storage = Depends(get_storage)):
    return storage.get_categories()


@router.get("/{category_id}", response_model=CategoryRecord)
def get_category(category_id: int, storage: Storage = Depends(get_storage)):
    category = storage.get_category_by_id(category_id)
    if not category:
        raise not_found("Category")
    return category


@router.post("/", response_model=CategoryRecord, status_code=status.HTTP_201_CREATED)
def create_category(category: CategoryCreate, storage: Storage = Depends(get_storage)):
    return storage.create_category(category)


@router.get("/{category_id}/courses", response_model=List[CourseRecord])
def get_category_courses(category_id: int, storage: Storage = Depends(get_storage)):
    return storage.get_courses_by_category(category_id)
