from pydantic import BaseModel
from datetime import datetime
from elearn.schemas.base import BaseSchema


class MessageCreate(BaseModel):
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool = False


class MessageRecord(BaseSchema):
    id: int
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool = False
    sent_at: datetime
