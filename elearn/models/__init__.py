# Import all models here so Base.metadata is complete for Alembic
from elearn.models.university import University, Faculty, AcademicYear
from elearn.models.user import User, UserRole
from elearn.models.category import Category
from elearn.models.course import Course, Material
from elearn.models.enrollment import Enrollment
from elearn.models.review import Review
from elearn.models.message import Message

__all__ = [
    "University",
    "Faculty",
    "AcademicYear",
    "User",
    "UserRole",
    "Category",
    "Course",
    "Material",
    "Enrollment",
    "Review",
    "Message",
]
