"""Application errors rendered as ``{"message": ...}`` JSON bodies."""

from fastapi import status


class AppError(Exception):
    """Base error carrying a client-facing message and an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class UnauthorizedError(AppError):
    """Missing, malformed, expired or forged session token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token"


class BadRequestError(AppError):
    """A required field or file is missing or unusable."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class DuplicateEmailError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email already registered"


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Wrong password"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UploadFailedError(AppError):
    """The image storage backend rejected or dropped an upload."""

    default_message = "Image upload failed"


class ServerError(AppError):
    """A store operation failed."""
