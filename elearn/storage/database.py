"""SQLAlchemy-backed storage.

Every call opens its own session and issues a single statement (two for
``get_messages_by_user``). Nothing is joined: foreign keys come back as raw
integers and the caller resolves them. Constraint and connectivity errors
from SQLAlchemy are not caught here.
"""

from __future__ import annotations

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from elearn.core.database import Base, make_engine, make_session_factory
from elearn.models import (
    Category,
    Course,
    Enrollment,
    Material,
    Message,
    Review,
    University,
    User,
    UserRole,
)
from elearn.schemas.category import CategoryCreate, CategoryRecord
from elearn.schemas.course import CourseCreate, CourseRecord, MaterialCreate, MaterialRecord
from elearn.schemas.enrollment import EnrollmentCreate, EnrollmentRecord
from elearn.schemas.message import MessageCreate, MessageRecord
from elearn.schemas.review import ReviewCreate, ReviewRecord
from elearn.schemas.university import UniversityCreate, UniversityRecord
from elearn.schemas.user import UserCreate, UserRecord, UserUpdate
from elearn.storage.base import Storage, StorageBackend


class DatabaseStorage(Storage):
    backend = StorageBackend.database
    enforces_uniqueness = True

    def __init__(self, session_factory: sessionmaker, engine: Engine | None = None):
        self._session_factory = session_factory
        self.engine = engine

    @classmethod
    def from_url(cls, database_url: str) -> "DatabaseStorage":
        engine = make_engine(database_url)
        return cls(make_session_factory(engine), engine=engine)

    def create_tables(self) -> None:
        """Create all tables on the bound engine (tests and local runs)."""
        Base.metadata.create_all(bind=self.engine)

    def _add(self, row, schema):
        with self._session_factory() as db:
            db.add(row)
            db.commit()
            db.refresh(row)
            return schema.model_validate(row)

    def _first(self, model, schema, *criteria):
        with self._session_factory() as db:
            row = db.query(model).filter(*criteria).first()
            return schema.model_validate(row) if row is not None else None

    def _all(self, model, schema, *criteria) -> list:
        with self._session_factory() as db:
            rows = db.query(model).filter(*criteria).order_by(model.id).all()
            return [schema.model_validate(row) for row in rows]

    # Universities
    def get_university(self, university_id: int) -> UniversityRecord | None:
        return self._first(University, UniversityRecord, University.id == university_id)

    def get_universities(self) -> list[UniversityRecord]:
        return self._all(University, UniversityRecord)

    def create_university(self, data: UniversityCreate) -> UniversityRecord:
        return self._add(University(**data.model_dump()), UniversityRecord)

    # Users
    def get_user(self, user_id: int) -> UserRecord | None:
        return self._first(User, UserRecord, User.id == user_id)

    def get_user_by_username(self, username: str) -> UserRecord | None:
        return self._first(User, UserRecord, User.username == username)

    def get_user_by_email(self, email: str) -> UserRecord | None:
        return self._first(User, UserRecord, User.email == email)

    def get_teachers(self) -> list[UserRecord]:
        return self._all(User, UserRecord, User.role == UserRole.teacher)

    def create_user(self, data: UserCreate) -> UserRecord:
        return self._add(User(**data.model_dump()), UserRecord)

    def update_user(self, user_id: int, data: UserUpdate) -> UserRecord | None:
        with self._session_factory() as db:
            user = db.query(User).filter(User.id == user_id).first()
            if user is None:
                return None
            for key, value in data.model_dump().items():
                setattr(user, key, value)
            db.commit()
            db.refresh(user)
            return UserRecord.model_validate(user)

    # Categories
    def get_categories(self) -> list[CategoryRecord]:
        return self._all(Category, CategoryRecord)

    def get_category_by_id(self, category_id: int) -> CategoryRecord | None:
        return self._first(Category, CategoryRecord, Category.id == category_id)

    def create_category(self, data: CategoryCreate) -> CategoryRecord:
        return self._add(Category(**data.model_dump()), CategoryRecord)

    # Courses
    def get_courses(self) -> list[CourseRecord]:
        return self._all(Course, CourseRecord)

    def get_course_by_id(self, course_id: int) -> CourseRecord | None:
        return self._first(Course, CourseRecord, Course.id == course_id)

    def get_courses_by_category(self, category_id: int) -> list[CourseRecord]:
        return self._all(Course, CourseRecord, Course.category_id == category_id)

    def get_courses_by_teacher(self, teacher_id: int) -> list[CourseRecord]:
        return self._all(Course, CourseRecord, Course.teacher_id == teacher_id)

    def create_course(self, data: CourseCreate) -> CourseRecord:
        return self._add(Course(**data.model_dump()), CourseRecord)

    # Materials
    def get_materials_by_course(self, course_id: int) -> list[MaterialRecord]:
        return self._all(Material, MaterialRecord, Material.course_id == course_id)

    def create_material(self, data: MaterialCreate) -> MaterialRecord:
        return self._add(Material(**data.model_dump()), MaterialRecord)

    # Enrollments
    def get_enrollments_by_student(self, student_id: int) -> list[EnrollmentRecord]:
        return self._all(Enrollment, EnrollmentRecord, Enrollment.student_id == student_id)

    def get_enrollments_by_course(self, course_id: int) -> list[EnrollmentRecord]:
        return self._all(Enrollment, EnrollmentRecord, Enrollment.course_id == course_id)

    def create_enrollment(self, data: EnrollmentCreate) -> EnrollmentRecord:
        return self._add(Enrollment(**data.model_dump()), EnrollmentRecord)

    # Reviews
    def get_reviews_by_course(self, course_id: int) -> list[ReviewRecord]:
        return self._all(Review, ReviewRecord, Review.course_id == course_id)

    def create_review(self, data: ReviewCreate) -> ReviewRecord:
        return self._add(Review(**data.model_dump()), ReviewRecord)

    # Messages
    def get_messages_by_user(self, user_id: int) -> list[MessageRecord]:
        sent = self._all(Message, MessageRecord, Message.sender_id == user_id)
        received = self._all(
            Message,
            MessageRecord,
            Message.receiver_id == user_id,
            Message.sender_id != user_id,
        )
        return sent + received

    def create_message(self, data: MessageCreate) -> MessageRecord:
        return self._add(Message(**data.model_dump()), MessageRecord)

    def mark_message_as_read(self, message_id: int) -> None:
        with self._session_factory() as db:
            db.query(Message).filter(Message.id == message_id).update({Message.is_read: True})
            db.commit()
