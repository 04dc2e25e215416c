from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, Boolean
from sqlalchemy import Enum as SAEnum
from sqlalchemy.sql import func
from elearn.core.database import Base
from elearn.models.university import AcademicYear, Faculty


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    thumbnail = Column(Text, nullable=True)
    price = Column(Integer, nullable=False)  # Smallest currency unit
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True, index=True)
    teacher_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    university_id = Column(Integer, ForeignKey("universities.id"), nullable=True)
    faculty = Column(SAEnum(Faculty, name="university_faculty"), nullable=True)
    academic_year = Column(SAEnum(AcademicYear, name="academic_year"), nullable=True)
    is_official = Column(Boolean, default=False)  # Official university course
    course_code = Column(Text, nullable=True)
    level = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class Material(Base):
    __tablename__ = "materials"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    title = Column(Text, nullable=False)
    type = Column(Text, nullable=False)  # e.g., "video", "pdf", "quiz"
    url = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
