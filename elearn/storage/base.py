"""Storage contract shared by every backend."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod

from elearn.schemas.category import CategoryCreate, CategoryRecord
from elearn.schemas.course import CourseCreate, CourseRecord, MaterialCreate, MaterialRecord
from elearn.schemas.enrollment import EnrollmentCreate, EnrollmentRecord
from elearn.schemas.message import MessageCreate, MessageRecord
from elearn.schemas.review import ReviewCreate, ReviewRecord
from elearn.schemas.university import UniversityCreate, UniversityRecord
from elearn.schemas.user import UserCreate, UserRecord, UserUpdate


class StorageBackend(str, enum.Enum):
    memory = "memory"
    database = "database"


class Storage(ABC):
    """Create/read contract over the marketplace entities.

    Lookups return ``None`` (or an empty list) when nothing matches; that is
    never an error. List operations return records in insertion order.
    Failures of the underlying medium propagate to the caller unchanged.
    """

    backend: StorageBackend
    # Whether duplicate usernames, emails and (student, course) enrollments
    # are rejected on create.
    enforces_uniqueness: bool

    # Universities
    @abstractmethod
    def get_university(self, university_id: int) -> UniversityRecord | None:
        """Return one university by id."""

    @abstractmethod
    def get_universities(self) -> list[UniversityRecord]:
        """Return every university."""

    @abstractmethod
    def create_university(self, data: UniversityCreate) -> UniversityRecord:
        """Persist a university and return it with its id and created_at."""

    # Users
    @abstractmethod
    def get_user(self, user_id: int) -> UserRecord | None:
        """Return one user by id."""

    @abstractmethod
    def get_user_by_username(self, username: str) -> UserRecord | None:
        """Case-sensitive exact match on username."""

    @abstractmethod
    def get_user_by_email(self, email: str) -> UserRecord | None:
        """Case-sensitive exact match on email."""

    @abstractmethod
    def get_teachers(self) -> list[UserRecord]:
        """Return users whose role is teacher, in creation order."""

    @abstractmethod
    def create_user(self, data: UserCreate) -> UserRecord:
        """Persist a user; assigns id, uuid and created_at."""

    @abstractmethod
    def update_user(self, user_id: int, data: UserUpdate) -> UserRecord | None:
        """Replace every mutable field of a user. ``None`` if the user is unknown."""

    # Categories
    @abstractmethod
    def get_categories(self) -> list[CategoryRecord]:
        """Return every category."""

    @abstractmethod
    def get_category_by_id(self, category_id: int) -> CategoryRecord | None:
        """Return one category by id."""

    @abstractmethod
    def create_category(self, data: CategoryCreate) -> CategoryRecord:
        """Persist a category."""

    # Courses
    @abstractmethod
    def get_courses(self) -> list[CourseRecord]:
        """Return every course."""

    @abstractmethod
    def get_course_by_id(self, course_id: int) -> CourseRecord | None:
        """Return one course by id."""

    @abstractmethod
    def get_courses_by_category(self, category_id: int) -> list[CourseRecord]:
        """Return the courses of one category."""

    @abstractmethod
    def get_courses_by_teacher(self, teacher_id: int) -> list[CourseRecord]:
        """Return the courses taught by one user."""

    @abstractmethod
    def create_course(self, data: CourseCreate) -> CourseRecord:
        """Persist a course."""

    # Materials
    @abstractmethod
    def get_materials_by_course(self, course_id: int) -> list[MaterialRecord]:
        """Return the materials of one course."""

    @abstractmethod
    def create_material(self, data: MaterialCreate) -> MaterialRecord:
        """Persist a material. The course is not checked for existence."""

    # Enrollments
    @abstractmethod
    def get_enrollments_by_student(self, student_id: int) -> list[EnrollmentRecord]:
        """Return the enrollments of one student."""

    @abstractmethod
    def get_enrollments_by_course(self, course_id: int) -> list[EnrollmentRecord]:
        """Return the enrollments of one course."""

    @abstractmethod
    def create_enrollment(self, data: EnrollmentCreate) -> EnrollmentRecord:
        """Persist an enrollment; enrolled_at is set now and never changes."""

    # Reviews
    @abstractmethod
    def get_reviews_by_course(self, course_id: int) -> list[ReviewRecord]:
        """Return the reviews of one course."""

    @abstractmethod
    def create_review(self, data: ReviewCreate) -> ReviewRecord:
        """Persist a review."""

    # Messages
    @abstractmethod
    def get_messages_by_user(self, user_id: int) -> list[MessageRecord]:
        """Return messages sent by the user, then messages received, without duplicates."""

    @abstractmethod
    def create_message(self, data: MessageCreate) -> MessageRecord:
        """Persist a message."""

    @abstractmethod
    def mark_message_as_read(self, message_id: int) -> None:
        """Flip is_read to true. Unknown ids are ignored."""
