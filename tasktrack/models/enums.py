"""Enums for model fields."""

from enum import Enum


class TaskStatus(str, Enum):
    """Lifecycle status of a task. Any status may change to any other."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    COMPLETED = "completed"

    @classmethod
    def _missing_(cls, value):
        # Older clients send "in progress" with a space
        if isinstance(value, str) and value.strip().lower() == "in progress":
            return cls.IN_PROGRESS
        return None
