"""Task schemas."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskCreate(BaseModel):
    """Create a new task."""

    title: str = Field(..., min_length=1, max_length=500)
    description: str | None = Field(None, max_length=5000)
    # Checked against TaskStatus by the task service
    status: str = Field("pending", max_length=50)


class TaskUpdate(BaseModel):
    """Update a task. Omitted fields keep their current value."""

    title: str | None = Field(None, min_length=1, max_length=500)
    description: str | None = Field(None, max_length=5000)
    status: str | None = Field(None, max_length=50)


class TaskResponse(BaseModel):
    """Task response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    description: str | None
    status: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """SQLite returns timestamps without an offset; they are stored as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
