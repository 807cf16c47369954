#!/usr/bin/env python3
"""Seed demo data for local development.

Creates a dedicated demo user with a handful of tasks in every status.

Usage:
    # From project root:
    python scripts/seed_demo_data.py

    # Or against another database:
    DATABASE_URL=sqlite:///./demo.db python scripts/seed_demo_data.py
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import sessionmaker

from tasktrack.database import Base, build_engine
from tasktrack.models import Task, TaskStatus, User
from tasktrack.services.auth import get_password_hash
from tasktrack.services.task_service import TaskService

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./tasktrack.db")

# Demo user credentials
DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demopass123"

DEMO_TASKS = [
    ("Buy milk", "2 litres, semi-skimmed", TaskStatus.PENDING),
    ("Renew passport", "Photos are in the desk drawer", TaskStatus.IN_PROGRESS),
    ("Book dentist appointment", None, TaskStatus.PENDING),
    ("File expense report", "October travel", TaskStatus.DONE),
    ("Clean out the garage", None, TaskStatus.COMPLETED),
]


def seed_demo_data():
    """Seed the database with a demo user and tasks."""
    engine = build_engine(DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine)
    session = Session()

    try:
        # Check if demo user already exists
        existing_user = session.query(User).filter_by(email=DEMO_EMAIL).first()
        if existing_user:
            print("Demo data already exists. Clearing and re-seeding...")
            session.query(Task).filter_by(user_id=existing_user.id).delete()
            session.delete(existing_user)
            session.commit()

        print("Creating demo user...")
        user = User(
            name="Demo User",
            email=DEMO_EMAIL,
            password_hash=get_password_hash(DEMO_PASSWORD),
        )
        session.add(user)
        session.commit()

        print("Creating tasks...")
        service = TaskService(session)
        for title, description, status in DEMO_TASKS:
            service.create(user.id, title=title, description=description, status=status)

        print("Demo data seeded successfully!")

    except Exception as e:
        session.rollback()
        print(f"Error seeding demo data: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    seed_demo_data()
