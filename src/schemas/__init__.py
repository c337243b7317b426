"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import MessageResponse, TokenResponse, UserLogin, UserRegister
from src.schemas.task import TaskCompleteResponse, TaskCreate, TaskResponse
from src.schemas.user import (
    HobbyCreate,
    NameUpdate,
    PasswordUpdate,
    ProfilePictureResponse,
    UserResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "TokenResponse",
    "MessageResponse",
    "UserResponse",
    "NameUpdate",
    "PasswordUpdate",
    "HobbyCreate",
    "ProfilePictureResponse",
    "TaskCreate",
    "TaskResponse",
    "TaskCompleteResponse",
]
