"""Task API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile

from src.api.dependencies import get_current_user_id, get_task_service, read_image_upload
from src.schemas.auth import MessageResponse
from src.schemas.task import TaskCompleteResponse, TaskCreate, TaskResponse
from src.services.task_service import TaskService

router = APIRouter(tags=["tasks"])


@router.post("/AddDailyTasks", response_model=TaskResponse)
def add_daily_task(
    task_data: TaskCreate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    tasks: Annotated[TaskService, Depends(get_task_service)],
):
    """Create a task dated today (UTC)."""
    return tasks.add_task(user_id, task_data.task)


@router.get("/GetDailyTasks", response_model=list[TaskResponse])
def get_daily_tasks(
    user_id: Annotated[int, Depends(get_current_user_id)],
    tasks: Annotated[TaskService, Depends(get_task_service)],
):
    """Get today's tasks."""
    return tasks.list_today(user_id)


@router.delete("/DeleteTask/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    tasks: Annotated[TaskService, Depends(get_task_service)],
):
    tasks.delete_task(task_id, user_id)
    return MessageResponse(message="Task deleted")


@router.post("/TaskDoneUploadPicture", response_model=TaskCompleteResponse)
async def task_done_upload_picture(
    task_id: Annotated[int, Form(alias="taskId")],
    user_id: Annotated[int, Depends(get_current_user_id)],
    tasks: Annotated[TaskService, Depends(get_task_service)],
    image: Annotated[UploadFile | None, File(description="Proof image")] = None,
):
    """Mark a task completed and attach an image.

    Note: This endpoint must remain async because UploadFile.read() is async.
    """
    image_data = await read_image_upload(image)
    url = await tasks.complete_with_image(
        task_id,
        user_id,
        image_data,
        filename=image.filename or "upload",
        content_type=image.content_type,
    )
    return TaskCompleteResponse(message="Task completed and image uploaded", image_url=url)


@router.get("/GetTaskHistory", response_model=list[TaskResponse])
def get_task_history(
    user_id: Annotated[int, Depends(get_current_user_id)],
    tasks: Annotated[TaskService, Depends(get_task_service)],
):
    """Get completed tasks, most recent day first."""
    return tasks.list_history(user_id)
