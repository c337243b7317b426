"""User profile schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Profile response. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str | None
    email: str
    hobbies: list[str]
    profile_picture: str | None = Field(None, serialization_alias="profilePicture")


class NameUpdate(BaseModel):
    name: str = Field(..., max_length=255)


class PasswordUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    new_password: str = Field(..., alias="newPassword", min_length=1, max_length=72)


class HobbyCreate(BaseModel):
    hobby: str = Field(..., max_length=255)


class ProfilePictureResponse(BaseModel):
    message: str
    profile_picture: str = Field(..., serialization_alias="profilePicture")
