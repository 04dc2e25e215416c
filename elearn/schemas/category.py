from pydantic import BaseModel
from typing import Optional
from elearn.schemas.base import BaseSchema


class CategoryCreate(BaseModel):
    name: str
    description: Optional[str] = None
    icon: str
    color: str


class CategoryRecord(BaseSchema):
    id: int
    name: str
    description: Optional[str] = None
    icon: str
    color: str
