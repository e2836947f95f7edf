from sqlalchemy import Column, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from autograder.database import Base


class ClassInfo(Base):
    __tablename__ = "classes"

    class_number: Mapped[str] = mapped_column(String, primary_key=True)
    class_description = Column(String, nullable=True)

    enrollments = relationship("UserClass", back_populates="class_info")
