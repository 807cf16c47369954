"""Domain errors raised by the services and rendered by the API layer."""

from fastapi import status

from tasktrack.models.enums import TaskStatus


class TaskTrackError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    detail: str = "Bad request"
    headers: dict[str, str] | None = None

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class DuplicateEmail(TaskTrackError):
    status_code = status.HTTP_409_CONFLICT
    detail = "Email already registered"


class UserNotFound(TaskTrackError):
    detail = "Email not found"


class InvalidCredentials(TaskTrackError):
    detail = "Invalid credentials"


class MissingToken(TaskTrackError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Access denied"
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidToken(TaskTrackError):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "Invalid token"


class InvalidStatus(TaskTrackError):
    """Raised for a status outside the TaskStatus enum."""

    def __init__(self, value: object = None):
        allowed = ", ".join(f"'{s.value}'" for s in TaskStatus)
        super().__init__(f"Invalid status value {value!r}. Allowed values are: {allowed}.")
        self.value = value


class TaskNotFound(TaskTrackError):
    """The task does not exist or belongs to someone else.

    Both cases share one error so that callers cannot probe for other users' ids.
    """

    status_code = status.HTTP_404_NOT_FOUND
    detail = "Task not found"
