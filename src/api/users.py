"""Profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from src.api.dependencies import get_account_service, get_current_user_id, read_image_upload
from src.schemas.auth import MessageResponse
from src.schemas.user import HobbyCreate, NameUpdate, PasswordUpdate, ProfilePictureResponse
from src.services.account_service import AccountService

router = APIRouter(tags=["users"])


@router.put("/ChangeName", response_model=MessageResponse)
def change_name(
    data: NameUpdate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    accounts.change_name(user_id, data.name)
    return MessageResponse(message="Name updated")


@router.put("/ChangePassword", response_model=MessageResponse)
def change_password(
    data: PasswordUpdate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Set a new password. The old password is not required."""
    accounts.change_password(user_id, data.new_password)
    return MessageResponse(message="Password updated")


@router.post("/SetProfilePicture", response_model=ProfilePictureResponse)
async def set_profile_picture(
    user_id: Annotated[int, Depends(get_current_user_id)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
    image: Annotated[UploadFile | None, File(description="Profile image")] = None,
):
    """Upload and set the profile picture.

    Note: This endpoint must remain async because UploadFile.read() is async.
    """
    image_data = await read_image_upload(image)
    url = await accounts.set_profile_picture(
        user_id, image_data, filename=image.filename or "upload", content_type=image.content_type
    )
    return ProfilePictureResponse(message="Profile picture updated", profile_picture=url)


@router.delete("/DeleteProfilePicture", response_model=MessageResponse)
def delete_profile_picture(
    user_id: Annotated[int, Depends(get_current_user_id)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Clear the profile picture."""
    accounts.delete_profile_picture(user_id)
    return MessageResponse(message="Profile picture deleted")


@router.post("/AddHobbies", response_model=MessageResponse)
def add_hobby(
    data: HobbyCreate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    accounts.add_hobby(user_id, data.hobby)
    return MessageResponse(message="Hobby added")
