from sqlalchemy import Column, Integer, Text
from elearn.core.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    icon = Column(Text, nullable=False)
    color = Column(Text, nullable=False)
