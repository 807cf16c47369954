"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tasktrack.api.dependencies import get_current_user
from tasktrack.database import get_db
from tasktrack.models.user import User
from tasktrack.schemas.auth import Token, UserLogin, UserRegister, UserResponse
from tasktrack.services.auth import login as login_user
from tasktrack.services.auth import register_user

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def signup(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    return register_user(db, user_data.name, user_data.email, user_data.password)


@router.post("/login", response_model=Token)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    token = login_user(db, credentials.email, credentials.password)
    return Token(token=token)


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user
