from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from autograder.models import ClassInfo
from autograder.schemas.classes import ClassCreate


def create_class(db: Session, class_in: ClassCreate) -> ClassInfo:
    existing = (
        db.query(ClassInfo)
        .filter(ClassInfo.class_number == class_in.class_number)
        .first()
    )
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Class already exists.",
        )

    class_info = ClassInfo(**class_in.model_dump())
    db.add(class_info)
    db.commit()
    db.refresh(class_info)
    return class_info
