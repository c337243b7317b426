"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_account_service, get_current_user_id
from src.schemas.auth import MessageResponse, TokenResponse, UserLogin, UserRegister
from src.schemas.user import UserResponse
from src.services.account_service import AccountService

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=MessageResponse)
def signup(
    user_data: UserRegister,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Register a new user."""
    accounts.signup(user_data.name, user_data.email, user_data.password)
    return MessageResponse(message="Signup successful")


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: UserLogin,
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Login with email and password."""
    return TokenResponse(token=accounts.login(credentials.email, credentials.password))


@router.get("/me", response_model=UserResponse)
def get_me(
    user_id: Annotated[int, Depends(get_current_user_id)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Get current user information."""
    return accounts.get_user(user_id)
