"""Task model."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from tasktrack.database import Base
from tasktrack.models.enums import TaskStatus
from tasktrack.models.mixins import CreatedAtMixin
from tasktrack.models.user import new_id

_STATUS_VALUES = ", ".join(f"'{s.value}'" for s in TaskStatus)


class Task(Base, CreatedAtMixin):
    """A personal task, visible to and mutable by its owner only."""

    __tablename__ = "tasks"
    __table_args__ = (CheckConstraint(f"status IN ({_STATUS_VALUES})", name="ck_tasks_status"),)

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=TaskStatus.PENDING.value)

    # Relationships
    owner = relationship("User", back_populates="tasks")
