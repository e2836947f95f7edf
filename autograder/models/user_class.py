import sqlalchemy
from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from autograder.database import Base


class UserClass(Base):
    __tablename__ = "user_class"
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"))
    class_number: Mapped[str] = mapped_column(
        String, ForeignKey("classes.class_number")
    )
    is_instructor: Mapped[bool] = mapped_column(Boolean, nullable=False)

    ### One row per (user, class) ###
    __table_args__ = (
        sqlalchemy.PrimaryKeyConstraint(
            "user_id", "class_number", name="student_class_pkey"
        ),
    )

    user = relationship("User", back_populates="enrollments")
    class_info = relationship("ClassInfo", back_populates="enrollments")
