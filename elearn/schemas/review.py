from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from elearn.schemas.base import BaseSchema


class ReviewCreate(BaseModel):
    course_id: int
    student_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None


class ReviewRecord(BaseSchema):
    id: int
    course_id: int
    student_id: int
    rating: int
    comment: Optional[str] = None
    created_at: datetime
