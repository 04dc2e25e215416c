from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from elearn.models.university import AcademicYear, Faculty
from elearn.schemas.base import BaseSchema
from elearn.schemas.category import CategoryRecord
from elearn.schemas.user import UserPublic


# Request schemas
class CourseCreate(BaseModel):
    title: str
    description: str
    price: int
    level: str
    thumbnail: Optional[str] = None
    category_id: Optional[int] = None
    teacher_id: Optional[int] = None
    university_id: Optional[int] = None
    faculty: Optional[Faculty] = None
    academic_year: Optional[AcademicYear] = None
    course_code: Optional[str] = None
    is_official: bool = False


class MaterialCreate(BaseModel):
    course_id: int
    title: str
    type: str
    url: str


# Record schemas
class CourseRecord(BaseSchema):
    id: int
    title: str
    description: str
    price: int
    level: str
    thumbnail: Optional[str] = None
    category_id: Optional[int] = None
    teacher_id: Optional[int] = None
    university_id: Optional[int] = None
    faculty: Optional[Faculty] = None
    academic_year: Optional[AcademicYear] = None
    course_code: Optional[str] = None
    is_official: bool = False
    created_at: datetime


class CourseDetail(CourseRecord):
    """Course with its category and teacher resolved by the caller."""
    category: Optional[CategoryRecord] = None
    teacher: Optional[UserPublic] = None


class MaterialRecord(BaseSchema):
    id: int
    course_id: int
    title: str
    type: str
    url: str
    created_at: datetime
