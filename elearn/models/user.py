from uuid import uuid4

from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, Uuid
from sqlalchemy import Enum as SAEnum
from sqlalchemy.sql import func
import enum
from elearn.core.database import Base
from elearn.models.university import AcademicYear, Faculty


class UserRole(str, enum.Enum):
    student = "student"
    teacher = "teacher"
    admin = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    uuid = Column(Uuid, unique=True, nullable=False, default=uuid4)
    username = Column(Text, unique=True, nullable=False, index=True)
    email = Column(Text, unique=True, nullable=False, index=True)
    password = Column(Text, nullable=False)
    role = Column(SAEnum(UserRole, name="user_role"), nullable=False, default=UserRole.student)
    full_name = Column(Text, nullable=False)
    profile_picture = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)
    experience = Column(Text, nullable=True)
    university_id = Column(Integer, ForeignKey("universities.id"), nullable=True)
    faculty = Column(SAEnum(Faculty, name="university_faculty"), nullable=True)
    academic_year = Column(SAEnum(AcademicYear, name="academic_year"), nullable=True)
    student_id = Column(Text, nullable=True)  # University-issued student number
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
