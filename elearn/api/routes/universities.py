from fastapi import APIRouter, Depends, status
from typing import List
from elearn.api.deps import get_storage, not_found
from elearn.schemas.university import UniversityCreate, UniversityRecord
from elearn.storage.base import Storage

router = APIRouter()


@router.get("/", response_model=List[UniversityRecord])
def list_universities(storage: Storage = Depends(get_storage)):
    """List all universities."""
    return storage.get_universities()


@router.get("/{university_id}", response_model=UniversityRecord)
def get_university(university_id: int, storage: Storage = Depends(get_storage)):
    university = storage.get_university(university_id)
    if not university:
        raise not_found("University")
    return university


@router.post("/", response_model=UniversityRecord, status_code=status.HTTP_201_CREATED)
def create_university(university: UniversityCreate, storage: Storage = Depends(get_storage)):
    return storage.create_university(university)
