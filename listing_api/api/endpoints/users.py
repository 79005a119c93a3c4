"""
User endpoints.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from listing_api.core.database import get_db
from listing_api.schemas.error import ErrorResponse
from listing_api.schemas.user import UserCreate, UserResponse
from listing_api.services.users import DuplicateUserError, UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=201,
             responses={409: {"model": ErrorResponse}})
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Register a user. The password is stored hashed and never returned."""
    try:
        return UserService(db).create(user)
    except DuplicateUserError:
        logger.info("Rejected duplicate user registration")
        return JSONResponse(status_code=409, content={"error": "User already exists"})


@router.get("", response_model=List[UserResponse])
def list_users(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=100),
    db: Session = Depends(get_db),
):
    return UserService(db).list(skip=skip, limit=limit)


@router.get("/{user_id}", response_model=UserResponse,
            responses={404: {"model": ErrorResponse}})
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = UserService(db).get(user_id)
    if user is None:
        return JSONResponse(status_code=404, content={"error": "User not found"})
    return user
