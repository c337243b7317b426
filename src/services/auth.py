"""Authentication service for JWT and password handling."""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from src.config import get_settings

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


class InvalidTokenError(Exception):
    """Raised when a token is malformed, expired or signed with another secret."""


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(
    user_id: int,
    secret: str | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed JWT carrying the user id as its identity claim."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "id": str(user_id),
        "exp": datetime.now(UTC) + expires_delta,
    }
    return jwt.encode(to_encode, secret or settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, secret: str | None = None) -> dict[str, Any]:
    """Decode and validate a JWT token.

    Raises:
        InvalidTokenError: the signature does not match, the token cannot be
            parsed, it has expired, or it carries no usable ``id`` claim.
    """
    try:
        payload = jwt.decode(
            token, secret or settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e

    user_id = payload.get("id")
    if user_id is None or not str(user_id).isdigit():
        raise InvalidTokenError("Token has no identity claim")
    return payload
