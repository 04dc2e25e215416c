from fastapi import APIRouter, Depends, status
from elearn.api.deps import get_storage
from elearn.schemas.message import MessageCreate, MessageRecord
from elearn.storage.base import Storage

router = APIRouter()


@router.post("/", response_model=MessageRecord, status_code=status.HTTP_201_CREATED)
def send_message(message: MessageCreate, storage: Storage = Depends(get_storage)):
    return storage.create_message(message)


@router.patch("/{message_id}/read")
def mark_read(message_id: int, storage: Storage = Depends(get_storage)):
    """Mark a message as read. Unknown ids are accepted silently."""
    storage.mark_message_as_read(message_id)
    return {"success": True}
