from sqlalchemy import Column, Integer, Text, DateTime
from sqlalchemy.sql import func
import enum
from elearn.core.database import Base


class Faculty(str, enum.Enum):
    engineering = "engineering"
    medicine = "medicine"
    science = "science"
    arts = "arts"
    business = "business"
    law = "law"
    education = "education"
    other = "other"


class AcademicYear(str, enum.Enum):
    first = "first"
    second = "second"
    third = "third"
    fourth = "fourth"
    fifth = "fifth"
    sixth = "sixth"
    graduate = "graduate"


class University(Base):
    __tablename__ = "universities"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    logo = Column(Text, nullable=True)
    website = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
