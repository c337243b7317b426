"""Account service: signup, login and profile management."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from src.exceptions import (
    BadRequestError,
    DuplicateEmailError,
    InvalidCredentialsError,
    NotFoundError,
    ServerError,
)
from src.models.user import User
from src.services.auth import create_access_token, get_password_hash, verify_password
from src.services.image_storage import PROFILE_PICTURES_FOLDER, ImageStorageService

logger = logging.getLogger(__name__)

HOBBY_APPEND_ATTEMPTS = 3


class AccountService:
    """Service for user accounts and profiles."""

    def __init__(self, db: Session, image_storage: ImageStorageService | None = None):
        self.db = db
        self.image_storage = image_storage or ImageStorageService()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error: {e}", exc_info=True)
            raise ServerError() from e

    def get_user(self, user_id: int) -> User:
        """Get a user by id or raise ``NotFoundError``."""
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise NotFoundError("User not found")
        return user

    def signup(self, name: str, email: str, password: str) -> User:
        """Create a user with a hashed password, no hobbies and no picture.

        The unique index on ``email`` is the only duplicate check, so two racing
        signups cannot both succeed.
        """
        user = User(
            name=name,
            email=email,
            password_hash=get_password_hash(password),
            hobbies=[],
            profile_picture=None,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Signup failed: email {email} already registered")
            raise DuplicateEmailError() from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error during signup for {email}: {e}", exc_info=True)
            raise ServerError() from e
        self.db.refresh(user)
        logger.info(f"User {user.id} signed up")
        return user

    def login(self, email: str, password: str) -> str:
        """Check credentials and issue a session token."""
        user = self.db.query(User).filter(User.email == email).first()
        if user is None:
            logger.warning(f"Login failed: no user for {email}")
            raise NotFoundError("User not found")
        if not verify_password(password, user.password_hash):
            logger.warning(f"Login failed: wrong password for user {user.id}")
            raise InvalidCredentialsError()
        logger.info(f"User {user.id} logged in")
        return create_access_token(user.id)

    def change_name(self, user_id: int, name: str) -> None:
        user = self.get_user(user_id)
        user.name = name
        self._commit()

    def change_password(self, user_id: int, new_password: str) -> None:
        """Replace the password hash.

        The current password is not asked for; a valid session is enough.
        """
        user = self.get_user(user_id)
        user.password_hash = get_password_hash(new_password)
        self._commit()
        logger.info(f"User {user_id} changed password")

    def add_hobby(self, user_id: int, hobby: str) -> None:
        """Append a hobby; duplicates are kept.

        The list is rewritten as a whole, so a write against a stale
        ``version_id`` is retried on a fresh copy of the row.
        """
        for attempt in range(1, HOBBY_APPEND_ATTEMPTS + 1):
            user = self.get_user(user_id)
            user.hobbies.append(hobby)
            try:
                self.db.commit()
                return
            except StaleDataError:
                self.db.rollback()
                logger.info(f"Concurrent update of user {user_id}, retrying ({attempt})")
            except SQLAlchemyError as e:
                self.db.rollback()
                logger.error(f"Database error: {e}", exc_info=True)
                raise ServerError() from e
        logger.error(f"Gave up appending hobby for user {user_id}")
        raise ServerError()

    async def set_profile_picture(
        self,
        user_id: int,
        image_data: bytes,
        filename: str = "upload",
        content_type: str = "application/octet-stream",
    ) -> str:
        """Upload a profile picture and store its URL on the user."""
        if not image_data:
            raise BadRequestError("No file uploaded")
        user = self.get_user(user_id)
        url = await self.image_storage.upload(
            image_data, PROFILE_PICTURES_FOLDER, filename=filename, content_type=content_type
        )
        user.profile_picture = url
        self._commit()
        return url

    def delete_profile_picture(self, user_id: int) -> None:
        """Clear the profile picture URL. The stored image itself is kept."""
        user = self.get_user(user_id)
        user.profile_picture = None
        self._commit()
