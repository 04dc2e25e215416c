"""Process-local storage backend."""

from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, TypeVar

from pydantic import BaseModel

from elearn.models.user import UserRole
from elearn.schemas.category import CategoryCreate, CategoryRecord
from elearn.schemas.course import CourseCreate, CourseRecord, MaterialCreate, MaterialRecord
from elearn.schemas.enrollment import EnrollmentCreate, EnrollmentRecord
from elearn.schemas.message import MessageCreate, MessageRecord
from elearn.schemas.review import ReviewCreate, ReviewRecord
from elearn.schemas.university import UniversityCreate, UniversityRecord
from elearn.schemas.user import UserCreate, UserRecord, UserUpdate
from elearn.storage.base import Storage, StorageBackend
from elearn.storage.errors import UniqueViolationError
from elearn.storage.seed import seed_defaults

RecordT = TypeVar("RecordT", bound=BaseModel)

ENTITIES = (
    "universities",
    "users",
    "categories",
    "courses",
    "materials",
    "enrollments",
    "reviews",
    "messages",
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class MemoryStorage(Storage):
    """Keeps every entity in an insertion-ordered dict keyed by id.

    Each entity type has its own id counter starting at 1. Foreign keys are
    stored as given and never checked. Duplicate usernames, emails and
    enrollments are accepted unless ``enforce_uniqueness`` is set.

    Sync FastAPI handlers run on a thread pool, so every read and every
    counter-then-insert pair happens under one lock.
    """

    backend = StorageBackend.memory

    def __init__(self, enforce_uniqueness: bool = False, seed: bool = True):
        self.enforces_uniqueness = enforce_uniqueness
        self._lock = threading.Lock()
        self._tables: dict[str, dict[int, BaseModel]] = {name: {} for name in ENTITIES}
        self._next_ids: dict[str, int] = {name: 1 for name in ENTITIES}
        if seed:
            seed_defaults(self)

    def _insert(
        self,
        entity: str,
        build: Callable[[int], RecordT],
        check: Callable[[], None] | None = None,
    ) -> RecordT:
        with self._lock:
            if check is not None and self.enforces_uniqueness:
                check()
            record_id = self._next_ids[entity]
            self._next_ids[entity] += 1
            record = build(record_id)
            self._tables[entity][record_id] = record
        return record.model_copy()

    def _get(self, entity: str, record_id: int):
        with self._lock:
            record = self._tables[entity].get(record_id)
        return record.model_copy() if record is not None else None

    def _select(self, entity: str, predicate: Callable[[BaseModel], bool] | None = None) -> list:
        with self._lock:
            rows = list(self._tables[entity].values())
        return [row.model_copy() for row in rows if predicate is None or predicate(row)]

    def _find_first(self, entity: str, predicate: Callable[[BaseModel], bool]):
        matches = self._select(entity, predicate)
        return matches[0] if matches else None

    # Universities
    def get_university(self, university_id: int) -> UniversityRecord | None:
        return self._get("universities", university_id)

    def get_universities(self) -> list[UniversityRecord]:
        return self._select("universities")

    def create_university(self, data: UniversityCreate) -> UniversityRecord:
        return self._insert(
            "universities",
            lambda record_id: UniversityRecord(
                id=record_id,
                name=data.name,
                location=data.location,
                logo=data.logo,
                website=data.website,
                created_at=_now(),
            ),
        )

    # Users
    def get_user(self, user_id: int) -> UserRecord | None:
        return self._get("users", user_id)

    def get_user_by_username(self, username: str) -> UserRecord | None:
        return self._find_first("users", lambda user: user.username == username)

    def get_user_by_email(self, email: str) -> UserRecord | None:
        return self._find_first("users", lambda user: user.email == email)

    def get_teachers(self) -> list[UserRecord]:
        return self._select("users", lambda user: user.role == UserRole.teacher)

    def _check_user_unique(self, data: UserCreate, exclude_id: int | None = None) -> None:
        # Caller holds the lock
        for user in self._tables["users"].values():
            if user.id == exclude_id:
                continue
            if user.username == data.username:
                raise UniqueViolationError("User", ("username",), data.username)
            if user.email == data.email:
                raise UniqueViolationError("User", ("email",), data.email)

    @staticmethod
    def _build_user(record_id: int, data: UserCreate, user_uuid: uuid.UUID, created_at: datetime) -> UserRecord:
        return UserRecord(
            id=record_id,
            uuid=user_uuid,
            username=data.username,
            email=data.email,
            password=data.password,
            role=data.role,
            full_name=data.full_name,
            profile_picture=data.profile_picture,
            bio=data.bio,
            experience=data.experience,
            university_id=data.university_id,
            faculty=data.faculty,
            academic_year=data.academic_year,
            student_id=data.student_id,
            created_at=created_at,
        )

    def create_user(self, data: UserCreate) -> UserRecord:
        return self._insert(
            "users",
            lambda record_id: self._build_user(record_id, data, uuid.uuid4(), _now()),
            check=lambda: self._check_user_unique(data),
        )

    def update_user(self, user_id: int, data: UserUpdate) -> UserRecord | None:
        with self._lock:
            current = self._tables["users"].get(user_id)
            if current is None:
                return None
            if self.enforces_uniqueness:
                self._check_user_unique(data, exclude_id=user_id)
            updated = self._build_user(user_id, data, current.uuid, current.created_at)
            self._tables["users"][user_id] = updated
        return updated.model_copy()

    # Categories
    def get_categories(self) -> list[CategoryRecord]:
        return self._select("categories")

    def get_category_by_id(self, category_id: int) -> CategoryRecord | None:
        return self._get("categories", category_id)

    def create_category(self, data: CategoryCreate) -> CategoryRecord:
        return self._insert(
            "categories",
            lambda record_id: CategoryRecord(
                id=record_id,
                name=data.name,
                description=data.description,
                icon=data.icon,
                color=data.color,
            ),
        )

    # Courses
    def get_courses(self) -> list[CourseRecord]:
        return self._select("courses")

    def get_course_by_id(self, course_id: int) -> CourseRecord | None:
        return self._get("courses", course_id)

    def get_courses_by_category(self, category_id: int) -> list[CourseRecord]:
        return self._select("courses", lambda course: course.category_id == category_id)

    def get_courses_by_teacher(self, teacher_id: int) -> list[CourseRecord]:
        return self._select("courses", lambda course: course.teacher_id == teacher_id)

    def create_course(self, data: CourseCreate) -> CourseRecord:
        return self._insert(
            "courses",
            lambda record_id: CourseRecord(
                id=record_id,
                title=data.title,
                description=data.description,
                price=data.price,
                level=data.level,
                thumbnail=data.thumbnail,
                category_id=data.category_id,
                teacher_id=data.teacher_id,
                university_id=data.university_id,
                faculty=data.faculty,
                academic_year=data.academic_year,
                course_code=data.course_code,
                is_official=data.is_official,
                created_at=_now(),
            ),
        )

    # Materials
    def get_materials_by_course(self, course_id: int) -> list[MaterialRecord]:
        return self._select("materials", lambda material: material.course_id == course_id)

    def create_material(self, data: MaterialCreate) -> MaterialRecord:
        return self._insert(
            "materials",
            lambda record_id: MaterialRecord(
                id=record_id,
                course_id=data.course_id,
                title=data.title,
                type=data.type,
                url=data.url,
                created_at=_now(),
            ),
        )

    # Enrollments
    def get_enrollments_by_student(self, student_id: int) -> list[EnrollmentRecord]:
        return self._select("enrollments", lambda enrollment: enrollment.student_id == student_id)

    def get_enrollments_by_course(self, course_id: int) -> list[EnrollmentRecord]:
        return self._select("enrollments", lambda enrollment: enrollment.course_id == course_id)

    def _check_enrollment_unique(self, data: EnrollmentCreate) -> None:
        for enrollment in self._tables["enrollments"].values():
            if enrollment.student_id == data.student_id and enrollment.course_id == data.course_id:
                raise UniqueViolationError(
                    "Enrollment", ("student_id", "course_id"), (data.student_id, data.course_id)
                )

    def create_enrollment(self, data: EnrollmentCreate) -> EnrollmentRecord:
        return self._insert(
            "enrollments",
            lambda record_id: EnrollmentRecord(
                id=record_id,
                student_id=data.student_id,
                course_id=data.course_id,
                is_completed=data.is_completed,
                enrolled_at=_now(),
            ),
            check=lambda: self._check_enrollment_unique(data),
        )

    # Reviews
    def get_reviews_by_course(self, course_id: int) -> list[ReviewRecord]:
        return self._select("reviews", lambda review: review.course_id == course_id)

    def create_review(self, data: ReviewCreate) -> ReviewRecord:
        return self._insert(
            "reviews",
            lambda record_id: ReviewRecord(
                id=record_id,
                course_id=data.course_id,
                student_id=data.student_id,
                rating=data.rating,
                comment=data.comment,
                created_at=_now(),
            ),
        )

    # Messages
    def get_messages_by_user(self, user_id: int) -> list[MessageRecord]:
        sent = self._select("messages", lambda message: message.sender_id == user_id)
        received = self._select(
            "messages",
            lambda message: message.receiver_id == user_id and message.sender_id != user_id,
        )
        return sent + received

    def create_message(self, data: MessageCreate) -> MessageRecord:
        return self._insert(
            "messages",
            lambda record_id: MessageRecord(
                id=record_id,
                sender_id=data.sender_id,
                receiver_id=data.receiver_id,
                content=data.content,
                is_read=data.is_read,
                sent_at=_now(),
            ),
        )

    def mark_message_as_read(self, message_id: int) -> None:
        with self._lock:
            message = self._tables["messages"].get(message_id)
            if message is not None:
                message.is_read = True
