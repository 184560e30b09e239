"""Authentication service for session tokens and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from src.config import Settings, get_settings
from src.exceptions import InvalidToken
from src.schemas.auth import SessionIdentity

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def issue_token(user_id: int, settings: Settings | None = None) -> str:
    """Create a signed session token carrying `{"user": {"id": user_id}}`."""
    settings = settings or get_settings()
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "user": {"id": user_id},
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: Settings | None = None) -> SessionIdentity:
    """Decode a session token and return the identity it carries.

    Raises InvalidToken when the signature does not match, the token is
    malformed or expired, or the identity claim is missing.
    """
    settings = settings or get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise InvalidToken(str(e)) from e

    user = payload.get("user")
    if not isinstance(user, dict) or user.get("id") is None:
        raise InvalidToken("Token carries no user claim")

    try:
        return SessionIdentity(id=user["id"])
    except ValueError as e:
        raise InvalidToken("Token user claim is malformed") from e
