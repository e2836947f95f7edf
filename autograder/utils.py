import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from autograder.database import Base
from autograder.models import ClassInfo
from autograder.triggers.enrollment import DEFAULT_CLASS_NUMBER, activate_enrollment_hook

logger = logging.getLogger("autograder")


def create_default_class(db: Session) -> Optional[ClassInfo]:
    """
    Create the class new users are enrolled in if it doesn't exist yet

    Returns:
        The default class (if created or found)
    """
    default_class = (
        db.query(ClassInfo)
        .filter(ClassInfo.class_number == DEFAULT_CLASS_NUMBER)
        .first()
    )

    if default_class:
        logger.info("Class %s already exists.", DEFAULT_CLASS_NUMBER)
        return default_class

    new_class = ClassInfo(
        class_number=DEFAULT_CLASS_NUMBER,
        class_description="Default class for newly registered users",
    )

    try:
        db.add(new_class)
        db.commit()
        db.refresh(new_class)
        logger.info("Created class %s", DEFAULT_CLASS_NUMBER)
        return new_class
    except Exception:
        db.rollback()
        logger.exception("Error creating class %s", DEFAULT_CLASS_NUMBER)
        raise


def init_database(engine: Engine, hook_mode: str) -> None:
    """Create the tables, then attach the enrollment hook in the requested mode."""
    Base.metadata.create_all(bind=engine)
    activate_enrollment_hook(engine, hook_mode)
