"""Task schemas."""

from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    """Create a new daily task."""

    task: str = Field(..., max_length=2000)


class TaskResponse(BaseModel):
    """Task response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int = Field(..., serialization_alias="userId")
    task: str
    completed: bool
    image: str | None
    date: str


class TaskCompleteResponse(BaseModel):
    message: str
    image_url: str = Field(..., serialization_alias="imageUrl")
