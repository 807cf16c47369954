"""FastAPI dependencies for authentication and database."""

import logging
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from tasktrack.database import get_db
from tasktrack.exceptions import InvalidToken, TaskTrackError
from tasktrack.models.user import User
from tasktrack.services.auth import get_user_by_id, verify_token
from tasktrack.services.task_service import TaskService

logger = logging.getLogger(__name__)


def extract_token(authorization: str | None) -> str | None:
    """Pull the token out of an Authorization header.

    Accepts ``Bearer <token>`` as well as the bare token.
    """
    if authorization is None:
        return None
    scheme, _, credentials = authorization.strip().partition(" ")
    if credentials and scheme.lower() == "bearer":
        return credentials
    return authorization


def get_current_user(
    db: Annotated[Session, Depends(get_db)],
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Get the current authenticated user from the JWT in the Authorization header."""
    try:
        user_id = verify_token(extract_token(authorization))
    except TaskTrackError as e:
        logger.warning(f"Rejected request: {e.detail}")
        raise

    user = get_user_by_id(db, user_id)
    if user is None:
        logger.warning(f"Rejected token for unknown user {user_id}")
        raise InvalidToken()

    return user


def get_task_service(
    db: Annotated[Session, Depends(get_db)],
) -> TaskService:
    """Get task service with dependencies."""
    return TaskService(db)
