from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from starlette import status

from autograder.dependencies.getdb import get_db
from autograder.models import ClassInfo
from autograder.schemas.classes import ClassCreate, ClassResponse
from autograder.services.class_service import create_class

router = APIRouter(prefix="/classes", tags=["classes"])


@router.post("", response_model=ClassResponse, status_code=status.HTTP_201_CREATED)
async def create_new_class(class_in: ClassCreate, db: Session = Depends(get_db)):
    return create_class(db, class_in)


@router.get("", response_model=List[ClassResponse], status_code=status.HTTP_200_OK)
async def get_all_classes(db: Session = Depends(get_db)):
    return db.query(ClassInfo).order_by(ClassInfo.class_number).all()
