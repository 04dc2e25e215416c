"""Bootstrap and sample data for the in-memory backend."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from elearn.models.university import AcademicYear, Faculty
from elearn.models.user import UserRole
from elearn.schemas.category import CategoryCreate
from elearn.schemas.course import CourseCreate, MaterialCreate
from elearn.schemas.enrollment import EnrollmentCreate
from elearn.schemas.message import MessageCreate
from elearn.schemas.review import ReviewCreate
from elearn.schemas.university import UniversityCreate
from elearn.schemas.user import UserCreate

if TYPE_CHECKING:
    from elearn.storage.base import Storage

logger = logging.getLogger(__name__)

DEFAULT_ADMIN = UserCreate(
    username="admin",
    email="admin@qasyounextra.com",
    password="adminpassword",
    role=UserRole.admin,
    full_name="System Administrator",
    profile_picture="",
    bio="Administrator of the Qasyoun Extra platform",
    experience="",
)

DEFAULT_CATEGORIES = [
    CategoryCreate(name="Mathematics", description="Lessons in mathematics", icon="calculator", color="#5E17EB"),
    CategoryCreate(name="Science", description="Lessons in science", icon="flask", color="#FF8A00"),
    CategoryCreate(name="Arabic Language", description="Lessons in Arabic", icon="language", color="#8C52FF"),
    CategoryCreate(name="English Language", description="Lessons in English", icon="globe", color="#4CAF50"),
    CategoryCreate(name="History", description="Lessons in history", icon="landmark", color="#FFC107"),
    CategoryCreate(name="Physics", description="Lessons in physics", icon="atom", color="#F44336"),
]


def seed_defaults(storage: Storage) -> None:
    """Create the admin account and the default categories."""
    storage.create_user(DEFAULT_ADMIN)
    for category in DEFAULT_CATEGORIES:
        storage.create_category(category)


def seed_sample_data(storage: Storage) -> dict[str, int]:
    """Populate a fresh store with a small, linked demo data set.

    Intended to run once per process, right after the in-memory backend is
    selected. Running it twice creates a second copy of everything.
    Returns the number of records created per entity.
    """
    university = storage.create_university(
        UniversityCreate(
            name="Damascus University",
            location="Damascus, Syria",
            website="http://damascusuniversity.edu.sy/",
        )
    )
    teacher = storage.create_user(
        UserCreate(
            username="teacher",
            email="teacher@qasyounextra.com",
            password="teacherpassword",
            role=UserRole.teacher,
            full_name="Sample Teacher",
            bio="Lecturer at the Faculty of Information Engineering",
            experience="10 years teaching software engineering",
            university_id=university.id,
            faculty=Faculty.engineering,
        )
    )
    student = storage.create_user(
        UserCreate(
            username="student",
            email="student@qasyounextra.com",
            password="studentpassword",
            role=UserRole.student,
            full_name="Sample Student",
            university_id=university.id,
            faculty=Faculty.engineering,
            academic_year=AcademicYear.third,
            student_id="12345",
        )
    )
    programming = storage.create_category(
        CategoryCreate(name="Programming", description="Software development courses", icon="code", color="#2196F3")
    )
    engineering = storage.create_category(
        CategoryCreate(name="Engineering", description="University engineering courses", icon="cog", color="#607D8B")
    )
    python_course = storage.create_course(
        CourseCreate(
            title="Introduction to Python",
            description="Variables, control flow and functions from scratch.",
            price=50000,
            level="beginner",
            category_id=programming.id,
            teacher_id=teacher.id,
        )
    )
    algorithms_course = storage.create_course(
        CourseCreate(
            title="Algorithms and Data Structures",
            description="Official third-year course of the engineering faculty.",
            price=75000,
            level="intermediate",
            category_id=engineering.id,
            teacher_id=teacher.id,
            university_id=university.id,
            faculty=Faculty.engineering,
            academic_year=AcademicYear.third,
            course_code="CE301",
            is_official=True,
        )
    )
    storage.create_material(
        MaterialCreate(
            course_id=python_course.id,
            title="Lesson 1: Getting started",
            type="video",
            url="https://example.com/materials/python-lesson-1.mp4",
        )
    )
    storage.create_material(
        MaterialCreate(
            course_id=algorithms_course.id,
            title="Sorting algorithms handout",
            type="pdf",
            url="https://example.com/materials/sorting.pdf",
        )
    )
    storage.create_enrollment(EnrollmentCreate(student_id=student.id, course_id=python_course.id))
    storage.create_review(
        ReviewCreate(
            course_id=python_course.id,
            student_id=student.id,
            rating=5,
            comment="Clear explanations and good exercises.",
        )
    )
    storage.create_message(
        MessageCreate(
            sender_id=student.id,
            receiver_id=teacher.id,
            content="Hello, when is the next live session?",
        )
    )
    storage.create_message(
        MessageCreate(
            sender_id=teacher.id,
            receiver_id=student.id,
            content="Thursday at 6 PM.",
        )
    )

    counts = {
        "universities": 1,
        "users": 2,
        "categories": 2,
        "courses": 2,
        "materials": 2,
        "enrollments": 1,
        "reviews": 1,
        "messages": 2,
    }
    logger.info(f"Seeded sample data: {counts}")
    return counts
