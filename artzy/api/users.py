"""User profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from artzy.api.dependencies import Identity, get_current_identity
from artzy.api.errors import datastore_errors
from artzy.database import get_db
from artzy.schemas.auth import ProfileResponse, ProfileUpdate, ProfileUpdateResponse
from artzy.services.auth import get_user

router = APIRouter(prefix="/api/users", tags=["users"])


@router.put("/profile", response_model=ProfileUpdateResponse)
def update_profile(
    profile_data: ProfileUpdate,
    identity: Annotated[Identity, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
):
    """Replace the caller's profile fields."""
    with datastore_errors(db, "Failed to update profile!"):
        user = get_user(db, identity.user_id)
        if user is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        user.first_name = profile_data.first_name
        user.last_name = profile_data.last_name
        user.username = profile_data.username
        user.email = profile_data.email
        user.profile_pic = profile_data.profile_pic

        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Username or email already in use!",
            ) from None
        db.refresh(user)

    return ProfileUpdateResponse(
        message="Profile updated!",
        user=ProfileResponse.model_validate(user),
    )
