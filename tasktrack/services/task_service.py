"""Task service: owner-scoped task persistence."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from tasktrack.exceptions import InvalidStatus, TaskNotFound
from tasktrack.models.enums import TaskStatus
from tasktrack.models.task import Task

logger = logging.getLogger(__name__)

# Distinguishes "leave as is" from an explicit None
UNSET: Any = object()


def parse_status(value: str | TaskStatus) -> TaskStatus:
    """Coerce a client-supplied status, raising InvalidStatus if unknown."""
    try:
        return TaskStatus(value)
    except ValueError as e:
        raise InvalidStatus(value) from e


class TaskService:
    """Service for task operations.

    Every query is filtered by the owner, so a task belonging to someone else
    behaves exactly like a task that does not exist.
    """

    def __init__(self, db: Session):
        self.db = db

    def _owned_query(self, owner_id: str):
        return self.db.query(Task).filter(Task.user_id == owner_id)

    def create(
        self,
        owner_id: str,
        title: str,
        description: str | None = None,
        status: str | TaskStatus = TaskStatus.PENDING,
    ) -> Task:
        """Create a task owned by ``owner_id``."""
        task_status = parse_status(status)

        task = Task(
            user_id=owner_id,
            title=title,
            description=description,
            status=task_status.value,
        )
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)

        logger.info(f"Created task {task.id} for user {owner_id}")
        return task

    def list_by_owner(self, owner_id: str) -> list[Task]:
        """All tasks owned by ``owner_id``, oldest first."""
        return self._owned_query(owner_id).order_by(Task.created_at).all()

    def get(self, owner_id: str, task_id: str) -> Task:
        """Get one of the owner's tasks."""
        task = self._owned_query(owner_id).filter(Task.id == task_id).first()
        if task is None:
            raise TaskNotFound()
        return task

    def update(
        self,
        owner_id: str,
        task_id: str,
        title: str | None = None,
        description: str | None = UNSET,
        status: str | TaskStatus | None = None,
    ) -> Task:
        """Overwrite the mutable fields of one of the owner's tasks.

        A title or status of None keeps the stored value. The description is
        kept only when not passed at all; passing None clears it. The status
        is validated before the lookup, so a bad status is reported even for
        unknown ids.
        """
        task_status = parse_status(status) if status is not None else None

        task = self.get(owner_id, task_id)
        if title is not None:
            task.title = title
        if description is not UNSET:
            task.description = description
        if task_status is not None:
            task.status = task_status.value

        self.db.commit()
        self.db.refresh(task)

        logger.info(f"Updated task {task.id} for user {owner_id}")
        return task

    def delete(self, owner_id: str, task_id: str) -> None:
        """Delete one of the owner's tasks.

        Raises TaskNotFound when nothing owned by the caller matched, same as
        update.
        """
        deleted = (
            self._owned_query(owner_id)
            .filter(Task.id == task_id)
            .delete(synchronize_session=False)
        )
        if not deleted:
            self.db.rollback()
            raise TaskNotFound()

        self.db.commit()
        logger.info(f"Deleted task {task_id} for user {owner_id}")
