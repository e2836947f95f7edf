from sqlalchemy import Boolean, Column, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from autograder.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        index=True,
        autoincrement=True,
    )
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    user_name = Column(String, unique=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    # server_default covers rows inserted outside the ORM
    is_admin = Column(Boolean, nullable=False, default=False, server_default=false())

    # Enrollments are never removed on the user's behalf; the foreign key
    # rejects deleting a user that still has any.
    enrollments = relationship(
        "UserClass",
        back_populates="user",
        passive_deletes="all",
    )
