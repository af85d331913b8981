"""Authentication and profile schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegister(BaseModel):
    """User registration request."""

    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=128)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class ForgotPasswordRequest(BaseModel):
    """Request a password reset link."""

    email: EmailStr = Field(..., max_length=255)


class ResetPasswordRequest(BaseModel):
    """Set a new password using a reset token."""

    token: str = Field(..., min_length=1)
    password: str = Field(..., min_length=8, max_length=128)


class ProfileUpdate(BaseModel):
    """Full replacement of the caller's mutable profile fields."""

    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr = Field(..., max_length=255)
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    profile_pic: str | None = None


class UserResponse(BaseModel):
    """Public user projection."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str


class ProfileResponse(UserResponse):
    """Profile projection, never includes the password hash."""

    first_name: str | None
    last_name: str | None
    profile_pic: str | None
    join_date: datetime | None = None


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class RegisterResponse(MessageResponse):
    """Registration response."""

    user: UserResponse


class LoginResponse(MessageResponse):
    """Login response with session token and profile."""

    token: str
    user: ProfileResponse


class ProfileUpdateResponse(MessageResponse):
    """Profile update response."""

    user: ProfileResponse
