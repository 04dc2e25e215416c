from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from elearn.schemas.base import BaseSchema


class UniversityCreate(BaseModel):
    name: str
    location: str
    logo: Optional[str] = None
    website: Optional[str] = None


class UniversityRecord(BaseSchema):
    id: int
    name: str
    location: str
    logo: Optional[str] = None
    website: Optional[str] = None
    created_at: datetime
