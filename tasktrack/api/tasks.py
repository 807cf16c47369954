"""Task API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from tasktrack.api.dependencies import get_current_user, get_task_service
from tasktrack.models.user import User
from tasktrack.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from tasktrack.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
def get_tasks(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Get all tasks owned by the current user."""
    return service.list_by_owner(current_user.id)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Create a new task."""
    return service.create(
        current_user.id,
        title=task_data.title,
        description=task_data.description,
        status=task_data.status,
    )


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Get a specific task."""
    return service.get(current_user.id, task_id)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: str,
    task_data: TaskUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Update a task."""
    # Omitted fields keep their value; an explicit null description clears it
    return service.update(current_user.id, task_id, **task_data.model_dump(exclude_unset=True))


@router.delete("/{task_id}")
def delete_task(
    task_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TaskService, Depends(get_task_service)],
):
    """Delete a task."""
    service.delete(current_user.id, task_id)
    return {"message": "Task deleted successfully"}
