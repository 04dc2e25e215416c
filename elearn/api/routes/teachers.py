from fastapi import APIRouter, Depends
from typing import List
from elearn.api.deps import get_storage, not_found
from elearn.models.user import UserRole
from elearn.schemas.course import CourseRecord
from elearn.schemas.user import UserPublic
from elearn.storage.base import Storage

router = APIRouter()


@router.get("/", response_model=List[UserPublic])
def list_teachers(storage: Storage = Depends(get_storage)):
    return storage.get_teachers()


@router.get("/{teacher_id}", response_model=UserPublic)
def get_teacher(teacher_id: int, storage: Storage = Depends(get_storage)):
    teacher = storage.get_user(teacher_id)
    if not teacher or teacher.role != UserRole.teacher:
        raise not_found("Teacher")
    return teacher


@router.get("/{teacher_id}/courses", response_model=List[CourseRecord])
def get_teacher_courses(teacher_id: int, storage: Storage = Depends(get_storage)):
    return storage.get_courses_by_teacher(teacher_id)
