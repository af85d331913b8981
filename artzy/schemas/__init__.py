"""Pydantic schemas for API requests and responses."""

from artzy.schemas.artwork import (
    ArtworkCreate,
    ArtworkResponse,
    ArtworkUpdate,
    ArtworkUpdateResponse,
    CategoryResponse,
    LikeToggleResponse,
    PublicArtworkResponse,
)
from artzy.schemas.auth import (
    ForgotPasswordRequest,
    LoginResponse,
    MessageResponse,
    ProfileResponse,
    ProfileUpdate,
    ProfileUpdateResponse,
    RegisterResponse,
    ResetPasswordRequest,
    UserLogin,
    UserRegister,
    UserResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "ProfileUpdate",
    "UserResponse",
    "ProfileResponse",
    "RegisterResponse",
    "LoginResponse",
    "ProfileUpdateResponse",
    "MessageResponse",
    "ArtworkCreate",
    "ArtworkUpdate",
    "ArtworkResponse",
    "ArtworkUpdateResponse",
    "PublicArtworkResponse",
    "LikeToggleResponse",
    "CategoryResponse",
]
