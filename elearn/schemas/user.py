from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from uuid import UUID
from elearn.models.university import AcademicYear, Faculty
from elearn.models.user import UserRole
from elearn.schemas.base import BaseSchema


# Request schemas
class UserCreate(BaseModel):
    username: str
    email: str
    password: str
    role: UserRole = UserRole.student
    full_name: str
    profile_picture: Optional[str] = None
    bio: Optional[str] = None
    experience: Optional[str] = None
    university_id: Optional[int] = None
    faculty: Optional[Faculty] = None
    academic_year: Optional[AcademicYear] = None
    student_id: Optional[str] = None


class UserUpdate(UserCreate):
    """Full replacement of every mutable user field.

    Fields left out fall back to their defaults rather than keeping the
    stored value.
    """


# Record schemas
class UserPublic(BaseSchema):
    """User as exposed over HTTP; never carries the password."""
    id: int
    uuid: UUID
    username: str
    email: str
    role: UserRole
    full_name: str
    profile_picture: Optional[str] = None
    bio: Optional[str] = None
    experience: Optional[str] = None
    university_id: Optional[int] = None
    faculty: Optional[Faculty] = None
    academic_year: Optional[AcademicYear] = None
    student_id: Optional[str] = None
    created_at: datetime


class UserRecord(UserPublic):
    password: str
