"""Task model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String

from src.database import Base
from src.models.mixins import TimestampMixin


class Task(Base, TimestampMixin):
    """A daily task owned by a single user."""

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    # No ON DELETE CASCADE: tasks outlive their owner if a user row is removed
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    task = Column(String, nullable=False)
    completed = Column(Boolean, default=False, nullable=False, index=True)
    image = Column(String(1024), nullable=True)  # set only on completion
    date = Column(String(10), nullable=False, index=True)  # "YYYY-MM-DD", UTC creation day
