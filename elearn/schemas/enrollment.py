from pydantic import BaseModel
from datetime import datetime
from elearn.schemas.base import BaseSchema


class EnrollmentCreate(BaseModel):
    student_id: int
    course_id: int
    is_completed: bool = False


class EnrollmentRecord(BaseSchema):
    id: int
    student_id: int
    course_id: int
    is_completed: bool = False
    enrolled_at: datetime
