"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from artzy.api.dependencies import Identity, get_current_identity
from artzy.api.errors import datastore_errors
from artzy.config import get_settings
from artzy.database import get_db
from artzy.schemas.auth import (
    ForgotPasswordRequest,
    LoginResponse,
    MessageResponse,
    ProfileResponse,
    RegisterResponse,
    ResetPasswordRequest,
    UserLogin,
    UserRegister,
    UserResponse,
)
from artzy.services.auth import (
    TokenPurpose,
    create_reset_token,
    create_session_token,
    create_user,
    decode_token,
    get_user,
    get_user_by_email,
    get_user_by_username,
    set_password,
    verify_password,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    with datastore_errors(db, "Server error"):
        if get_user_by_email(db, user_data.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already in use!",
            )
        if get_user_by_username(db, user_data.username):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username already in use!",
            )

        try:
            user = create_user(db, user_data.username, user_data.email, user_data.password)
        except IntegrityError:
            # Lost a race with another registration for the same email or username
            db.rollback()
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email or username already in use!",
            ) from None

    logger.info(f"Registered user {user.id}")
    return RegisterResponse(message="Register Success!", user=UserResponse.model_validate(user))


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    with datastore_errors(db, "Server error"):
        user = get_user_by_email(db, credentials.email)

    if not user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email not found!")
    if not verify_password(credentials.password, user.password_hash):
        logger.info(f"Failed login for user {user.id}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Wrong password!")

    return LoginResponse(
        message="Login success!",
        token=create_session_token(user.id),
        user=ProfileResponse.model_validate(user),
    )


@router.get("/me", response_model=ProfileResponse)
def get_me(
    identity: Annotated[Identity, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get current user profile."""
    with datastore_errors(db, "Failed to get profile!"):
        user = get_user(db, identity.user_id)

    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(
    request: ForgotPasswordRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Issue a password reset link.

    The link is only written to the server log; nothing is delivered to the user.
    """
    with datastore_errors(db, "Server error"):
        user = get_user_by_email(db, request.email)

    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Email not registered!")

    reset_token = create_reset_token(user.id)
    reset_link = f"{get_settings().frontend_url.rstrip('/')}/reset-password/{reset_token}"
    logger.info(f"Reset link for user {user.id}: {reset_link}")

    return MessageResponse(message="Reset link has been generated (see server log)")


@router.post("/reset-password", response_model=MessageResponse)
def reset_password(
    request: ResetPasswordRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Set a new password using a reset token."""
    user_id = decode_token(request.token, TokenPurpose.RESET)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Reset token invalid or expired",
        )

    with datastore_errors(db, "Failed to reset password!"):
        user = get_user(db, user_id)
        if user is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        set_password(db, user, request.password)

    logger.info(f"Password reset for user {user_id}")
    return MessageResponse(message="Password has been reset!")
