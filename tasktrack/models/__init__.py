"""SQLAlchemy models."""

from tasktrack.models.enums import TaskStatus
from tasktrack.models.task import Task
from tasktrack.models.user import User

__all__ = [
    "User",
    "Task",
    "TaskStatus",
]
