"""FastAPI dependencies for identity resolution and services."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from artzy.database import get_db
from artzy.services.artwork_service import ArtworkService
from artzy.services.auth import TokenPurpose, decode_token
from artzy.services.like_service import LikeService

# auto_error is off so a missing header and a bad token can be told apart
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, as resolved from a session token."""

    user_id: int


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Identity:
    """Resolve the caller from the bearer token or reject the request.

    No token is 401, a token that does not verify is 403.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token required!",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = decode_token(credentials.credentials, TokenPurpose.SESSION)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Token invalid or expired",
        )

    return Identity(user_id=user_id)


def get_optional_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> Identity | None:
    """Resolve the caller if a valid token is present, otherwise treat as anonymous."""
    if credentials is None:
        return None
    user_id = decode_token(credentials.credentials, TokenPurpose.SESSION)
    return Identity(user_id=user_id) if user_id is not None else None


def get_artwork_service(
    db: Annotated[Session, Depends(get_db)],
) -> ArtworkService:
    """Get artwork service with dependencies."""
    return ArtworkService(db)


def get_like_service(
    db: Annotated[Session, Depends(get_db)],
) -> LikeService:
    """Get like service with dependencies."""
    return LikeService(db)
