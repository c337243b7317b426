"""Task service: daily task CRUD, completion and history."""

import logging
from datetime import UTC, datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.exceptions import BadRequestError, NotFoundError, ServerError
from src.models.task import Task
from src.services.image_storage import TASKS_FOLDER, ImageStorageService

logger = logging.getLogger(__name__)


def today_utc() -> str:
    """Current UTC calendar day as ``YYYY-MM-DD``."""
    return datetime.now(UTC).date().isoformat()


class TaskService:
    """Service for task-related operations."""

    def __init__(
        self,
        db: Session,
        image_storage: ImageStorageService | None = None,
        enforce_ownership: bool | None = None,
    ):
        self.db = db
        self.image_storage = image_storage or ImageStorageService()
        if enforce_ownership is None:
            enforce_ownership = get_settings().enforce_task_ownership
        self.enforce_ownership = enforce_ownership

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error: {e}", exc_info=True)
            raise ServerError() from e

    def _find_task(self, task_id: int, user_id: int) -> Task | None:
        query = self.db.query(Task).filter(Task.id == task_id)
        if self.enforce_ownership:
            query = query.filter(Task.user_id == user_id)
        return query.first()

    def add_task(self, user_id: int, text: str) -> Task:
        task = Task(user_id=user_id, task=text, completed=False, date=today_utc())
        self.db.add(task)
        self._commit()
        self.db.refresh(task)
        return task

    def list_today(self, user_id: int) -> list[Task]:
        """Get the user's tasks created on the current UTC day."""
        return (
            self.db.query(Task)
            .filter(Task.user_id == user_id, Task.date == today_utc())
            .all()
        )

    def delete_task(self, task_id: int, user_id: int) -> None:
        """Delete a task by id.

        Without ownership enforcement any caller may delete any task. Unknown
        ids are acknowledged silently either way.
        """
        task = self._find_task(task_id, user_id)
        if task is None:
            return
        if task.user_id != user_id:
            logger.warning(f"User {user_id} deleted task {task_id} owned by user {task.user_id}")
        self.db.delete(task)
        self._commit()

    async def complete_with_image(
        self,
        task_id: int,
        user_id: int,
        image_data: bytes,
        filename: str = "upload",
        content_type: str = "application/octet-stream",
    ) -> str:
        """Upload the proof image, then mark the task completed with its URL.

        The upload and the update are separate steps; a failure between them
        leaves the stored image unlinked.
        """
        if not image_data:
            raise BadRequestError("No file uploaded")
        task = self._find_task(task_id, user_id)
        if task is None:
            raise NotFoundError("Task not found")

        url = await self.image_storage.upload(
            image_data, TASKS_FOLDER, filename=filename, content_type=content_type
        )
        task.completed = True
        task.image = url
        self._commit()
        logger.info(f"Task {task_id} completed by user {user_id}")
        return url

    def list_history(self, user_id: int) -> list[Task]:
        """Get the user's completed tasks, most recent day first."""
        return (
            self.db.query(Task)
            .filter(Task.user_id == user_id, Task.completed.is_(True))
            .order_by(Task.date.desc())
            .all()
        )
