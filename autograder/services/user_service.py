import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from autograder.models import User, UserClass
from autograder.schemas.user import CreateUserRequest

logger = logging.getLogger("autograder.users")


def check_if_user_exists(db: Session, user_name: str, email: str):
    if email:
        existing_email = db.query(User).filter(User.email == email).first()
        if existing_email:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Email already in use."
            )

    if user_name:
        existing_user_name = db.query(User).filter(User.user_name == user_name).first()
        if existing_user_name:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username already exists.",
            )


def create_user(db: Session, create_user_request: CreateUserRequest) -> User:
    """
    Insert a user. The enrollment hook writes the default class enrollment in
    the same transaction; if that write fails nothing is persisted.
    """
    check_if_user_exists(db, create_user_request.user_name, create_user_request.email)

    user = User(
        first_name=create_user_request.first_name,
        last_name=create_user_request.last_name,
        user_name=create_user_request.user_name,
        email=create_user_request.email,
        is_admin=False,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Rejected user %s: %s", create_user_request.user_name, e.orig)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Could not create user: {e.orig}",
        )
    db.refresh(user)
    logger.info("User %s created with id %s", user.user_name, user.id)
    return user


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user


def get_user_enrollments(db: Session, user_id: int) -> List[UserClass]:
    get_user(db, user_id)
    return (
        db.query(UserClass)
        .filter(UserClass.user_id == user_id)
        .order_by(UserClass.class_number)
        .all()
    )
