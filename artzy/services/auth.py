"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta
from enum import Enum

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from artzy.config import get_settings
from artzy.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


class TokenPurpose(str, Enum):
    """What a token may be used for. Carried in the ``type`` claim."""

    SESSION = "session"
    RESET = "reset"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    A malformed or unrecognised hash counts as a mismatch.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        logger.warning("Stored password hash could not be verified")
        return False


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_token(user_id: int, purpose: TokenPurpose, expires_delta: timedelta) -> str:
    """Create a signed JWT for ``user_id`` valid for ``expires_delta``."""
    now = datetime.now(UTC)
    to_encode = {
        "sub": str(user_id),
        "type": purpose.value,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def create_session_token(user_id: int) -> str:
    """Create a long-lived session token."""
    return create_token(
        user_id,
        TokenPurpose.SESSION,
        timedelta(minutes=settings.session_token_expiration_minutes),
    )


def create_reset_token(user_id: int) -> str:
    """Create a short-lived password reset token."""
    return create_token(
        user_id,
        TokenPurpose.RESET,
        timedelta(minutes=settings.reset_token_expiration_minutes),
    )


def decode_token(token: str, purpose: TokenPurpose = TokenPurpose.SESSION) -> int | None:
    """Decode a JWT and return its user id.

    Expired, tampered, malformed and wrong-purpose tokens all return None.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None

    if payload.get("type") != purpose.value:
        return None
    try:
        return int(payload.get("sub"))
    except (TypeError, ValueError):
        return None


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_username(db: Session, username: str) -> User | None:
    """Get a user by username."""
    return db.query(User).filter(User.username == username).first()


def get_user(db: Session, user_id: int) -> User | None:
    """Get a user by id."""
    return db.query(User).filter(User.id == user_id).first()


def create_user(db: Session, username: str, email: str, password: str) -> User:
    """Create a new user."""
    hashed_password = get_password_hash(password)
    user = User(username=username, email=email, password_hash=hashed_password)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def set_password(db: Session, user: User, password: str) -> None:
    """Replace a user's password."""
    user.password_hash = get_password_hash(password)
    db.commit()
