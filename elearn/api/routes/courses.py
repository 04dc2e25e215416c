from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from typing import List, Optional
from elearn.api.deps import DUPLICATE_ERRORS, get_storage, not_found
from elearn.models.user import UserRole
from elearn.schemas.course import CourseCreate, CourseDetail, CourseRecord, MaterialCreate, MaterialRecord
from elearn.schemas.enrollment import EnrollmentCreate, EnrollmentRecord
from elearn.schemas.review import ReviewCreate, ReviewRecord
from elearn.schemas.user import UserPublic
from elearn.storage.base import Storage

router = APIRouter()


# Request schemas; the course id comes from the path
class MaterialRequest(BaseModel):
    title: str
    type: str
    url: str


class EnrollRequest(BaseModel):
    student_id: int


class ReviewRequest(BaseModel):
    student_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None


def _get_course_or_404(storage: Storage, course_id: int) -> CourseRecord:
    course = storage.get_course_by_id(course_id)
    if not course:
        raise not_found("Course")
    return course


@router.get("/", response_model=List[CourseRecord])
def list_courses(storage: Storage = Depends(get_storage)):
    return storage.get_courses()


@router.get("/{course_id}", response_model=CourseDetail)
def get_course(course_id: int, storage: Storage = Depends(get_storage)):
    """Get a course with its category and teacher."""
    course = _get_course_or_404(storage, course_id)
    category = storage.get_category_by_id(course.category_id) if course.category_id else None
    teacher = storage.get_user(course.teacher_id) if course.teacher_id else None
    return CourseDetail(
        **course.model_dump(),
        category=category,
        teacher=UserPublic.model_validate(teacher.model_dump()) if teacher else None,
    )


@router.post("/", response_model=CourseRecord, status_code=status.HTTP_201_CREATED)
def create_course(course: CourseCreate, storage: Storage = Depends(get_storage)):
    """Create a course. The teacher, when given, must be a user with the teacher role."""
    if course.teacher_id is not None:
        teacher = storage.get_user(course.teacher_id)
        if not teacher or teacher.role != UserRole.teacher:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="teacher_id must reference a teacher",
            )
    return storage.create_course(course)


@router.get("/{course_id}/materials", response_model=List[MaterialRecord])
def list_materials(course_id: int, storage: Storage = Depends(get_storage)):
    return storage.get_materials_by_course(course_id)


@router.post("/{course_id}/materials", response_model=MaterialRecord, status_code=status.HTTP_201_CREATED)
def add_material(course_id: int, material: MaterialRequest, storage: Storage = Depends(get_storage)):
    _get_course_or_404(storage, course_id)
    return storage.create_material(MaterialCreate(course_id=course_id, **material.model_dump()))


@router.get("/{course_id}/enrollments", response_model=List[EnrollmentRecord])
def list_enrollments(course_id: int, storage: Storage = Depends(get_storage)):
    return storage.get_enrollments_by_course(course_id)


@router.post("/{course_id}/enroll", response_model=EnrollmentRecord, status_code=status.HTTP_201_CREATED)
def enroll(course_id: int, request: EnrollRequest, storage: Storage = Depends(get_storage)):
    """Enroll a student in a course."""
    _get_course_or_404(storage, course_id)

    student = storage.get_user(request.student_id)
    if not student:
        raise not_found("User")
    if student.role != UserRole.student:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only students can enroll in courses")

    # The in-memory backend may not reject duplicates itself
    enrollments = storage.get_enrollments_by_student(request.student_id)
    if any(e.course_id == course_id for e in enrollments):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Already enrolled in this course")

    try:
        return storage.create_enrollment(EnrollmentCreate(student_id=request.student_id, course_id=course_id))
    except DUPLICATE_ERRORS:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Already enrolled in this course")


@router.get("/{course_id}/reviews", response_model=List[ReviewRecord])
def list_reviews(course_id: int, storage: Storage = Depends(get_storage)):
    return storage.get_reviews_by_course(course_id)


@router.post("/{course_id}/reviews", response_model=ReviewRecord, status_code=status.HTTP_201_CREATED)
def add_review(course_id: int, review: ReviewRequest, storage: Storage = Depends(get_storage)):
    """Review a course. Only enrolled students may leave a review."""
    enrollments = storage.get_enrollments_by_student(review.student_id)
    if not any(e.course_id == course_id for e in enrollments):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You must be enrolled in the course to leave a review",
        )
    return storage.create_review(ReviewCreate(course_id=course_id, **review.model_dump()))
