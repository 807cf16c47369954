"""Pydantic schemas for API requests and responses."""

from tasktrack.schemas.auth import Token, UserLogin, UserRegister, UserResponse
from tasktrack.schemas.task import TaskCreate, TaskResponse, TaskUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "Token",
    "UserResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
]
