from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from starlette import status

from autograder.dependencies.getdb import get_db
from autograder.models import User
from autograder.schemas.enrollment import EnrollmentResponse
from autograder.schemas.user import CreateUserRequest, UserResponse
from autograder.services.user_service import (
    create_user,
    get_user,
    get_user_enrollments,
)

router = APIRouter(prefix="/users", tags=["users"])


### ROUTE FOR REGISTRATION ###
@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    create_user_request: CreateUserRequest, db: Session = Depends(get_db)
):
    return create_user(db, create_user_request)


@router.get("", response_model=List[UserResponse], status_code=status.HTTP_200_OK)
async def get_all_users(db: Session = Depends(get_db)):
    return db.query(User).order_by(User.id).all()


@router.get("/{user_id}", response_model=UserResponse, status_code=status.HTTP_200_OK)
async def get_user_by_id(user_id: int, db: Session = Depends(get_db)):
    return get_user(db, user_id)


@router.get(
    "/{user_id}/classes",
    response_model=List[EnrollmentResponse],
    status_code=status.HTTP_200_OK,
)
async def get_user_classes(user_id: int, db: Session = Depends(get_db)):
    """Get every class the user is enrolled in, including the default one"""
    return get_user_enrollments(db, user_id)
