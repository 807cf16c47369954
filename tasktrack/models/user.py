"""User model."""

import uuid

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from tasktrack.database import Base


def new_id() -> str:
    """Generate an opaque primary key."""
    return str(uuid.uuid4())


class User(Base):
    """User model for authentication and task ownership."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # Relationships
    tasks = relationship("Task", back_populates="owner", cascade="all, delete-orphan")
