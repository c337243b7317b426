"""User model."""

from sqlalchemy import JSON, Column, Integer, String
from sqlalchemy.ext.mutable import MutableList

from src.database import Base
from src.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication, profile and task ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    # Ordered, append-only through the API
    hobbies = Column(MutableList.as_mutable(JSON), nullable=False, default=list)
    profile_picture = Column(String(1024), nullable=True)
    # Bumped on every UPDATE; a stale write fails instead of clobbering hobbies
    version_id = Column(Integer, nullable=False, default=1)

    __mapper_args__ = {"version_id_col": version_id}
