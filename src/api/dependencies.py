"""FastAPI dependencies for authentication, services and uploads."""

import logging
from typing import Annotated

from fastapi import Depends, UploadFile
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from src.database import get_db
from src.exceptions import BadRequestError, UnauthorizedError
from src.services.account_service import AccountService
from src.services.auth import InvalidTokenError, decode_access_token
from src.services.image_storage import ImageStorageService, get_image_storage
from src.services.task_service import TaskService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/webp"}
MAX_IMAGE_SIZE = 10 * 1024 * 1024

authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="Session token as `Bearer <token>`",
)


def get_current_user_id(
    authorization: Annotated[str | None, Depends(authorization_header)],
) -> int:
    """Resolve the caller's user id from the ``Authorization`` header.

    Only the token is checked; the user row is not loaded here.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError("No token")
    token = authorization[len(BEARER_PREFIX) :]
    if not token:
        raise UnauthorizedError("No token")

    try:
        payload = decode_access_token(token)
    except InvalidTokenError as e:
        logger.info(f"Rejected session token: {e}")
        raise UnauthorizedError("Invalid token") from e

    return int(payload["id"])


def get_account_service(
    db: Annotated[Session, Depends(get_db)],
    image_storage: Annotated[ImageStorageService, Depends(get_image_storage)],
) -> AccountService:
    """Get account service with dependencies."""
    return AccountService(db, image_storage)


def get_task_service(
    db: Annotated[Session, Depends(get_db)],
    image_storage: Annotated[ImageStorageService, Depends(get_image_storage)],
) -> TaskService:
    """Get task service with dependencies."""
    return TaskService(db, image_storage)


async def read_image_upload(image: UploadFile | None) -> bytes:
    """Read an uploaded image, rejecting missing, non-image and oversized files."""
    if image is None:
        raise BadRequestError("No file uploaded")
    if image.content_type not in ALLOWED_IMAGE_TYPES:
        raise BadRequestError(
            f"Invalid file type. Allowed types: {', '.join(sorted(ALLOWED_IMAGE_TYPES))}"
        )

    image_data = await image.read()
    if not image_data:
        raise BadRequestError("No file uploaded")
    if len(image_data) > MAX_IMAGE_SIZE:
        raise BadRequestError("File too large. Maximum size is 10MB.")
    return image_data
