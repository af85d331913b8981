"""Artwork API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError

from artzy.api.dependencies import (
    Identity,
    get_artwork_service,
    get_current_identity,
    get_like_service,
    get_optional_identity,
)
from artzy.api.errors import datastore_errors
from artzy.schemas.artwork import (
    ArtworkCreate,
    ArtworkResponse,
    ArtworkUpdate,
    ArtworkUpdateResponse,
    LikeToggleResponse,
)
from artzy.schemas.auth import MessageResponse
from artzy.services.artwork_service import ArtworkService, InvalidCategoryError
from artzy.services.like_service import LikeService

router = APIRouter(prefix="/api/artworks", tags=["artworks"])


@router.post("", response_model=ArtworkResponse, status_code=status.HTTP_201_CREATED)
def create_artwork(
    artwork_data: ArtworkCreate,
    identity: Annotated[Identity, Depends(get_current_identity)],
    service: Annotated[ArtworkService, Depends(get_artwork_service)],
):
    """Add an artwork to the caller's collection."""
    with datastore_errors(service.db, "Failed to save artwork!"):
        try:
            return service.create_artwork(identity.user_id, artwork_data)
        except InvalidCategoryError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Category invalid!",
            ) from None


@router.get("", response_model=list[ArtworkResponse])
def list_artworks(
    identity: Annotated[Identity, Depends(get_current_identity)],
    service: Annotated[ArtworkService, Depends(get_artwork_service)],
):
    """Get the caller's own artworks, newest first."""
    with datastore_errors(service.db, "Failed to get gallery!"):
        return service.list_own_artworks(identity.user_id)


@router.get("/user/{username}", response_model=list[ArtworkResponse])
def list_user_artworks(
    username: str,
    identity: Annotated[Identity | None, Depends(get_optional_identity)],
    service: Annotated[ArtworkService, Depends(get_artwork_service)],
):
    """Get another user's public gallery.

    ``is_liked`` is computed for the caller when a valid token is sent.
    """
    viewer_id = identity.user_id if identity else None
    with datastore_errors(service.db, "Server error"):
        artworks = service.list_public_artworks(username, viewer_id)

    if artworks is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return artworks


@router.get("/{artwork_id}", response_model=ArtworkResponse)
def get_artwork(
    artwork_id: int,
    identity: Annotated[Identity, Depends(get_current_identity)],
    service: Annotated[ArtworkService, Depends(get_artwork_service)],
):
    """Get one of the caller's artworks."""
    with datastore_errors(service.db, "Server error"):
        artwork = service.get_own_artwork(identity.user_id, artwork_id)

    if artwork is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artwork not found!")
    return artwork


@router.put("/{artwork_id}", response_model=ArtworkUpdateResponse)
def update_artwork(
    artwork_id: int,
    artwork_data: ArtworkUpdate,
    identity: Annotated[Identity, Depends(get_current_identity)],
    service: Annotated[ArtworkService, Depends(get_artwork_service)],
):
    """Replace one of the caller's artworks."""
    with datastore_errors(service.db, "Failed to update artwork!"):
        artwork = service.update_artwork(identity.user_id, artwork_id, artwork_data)

    if artwork is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Artwork not found or unauthorized",
        )
    return ArtworkUpdateResponse(message="Artwork updated successfully!", artwork=artwork)


@router.delete("/{artwork_id}", response_model=MessageResponse)
def delete_artwork(
    artwork_id: int,
    identity: Annotated[Identity, Depends(get_current_identity)],
    service: Annotated[ArtworkService, Depends(get_artwork_service)],
):
    """Delete one of the caller's artworks along with its likes."""
    with datastore_errors(service.db, "Failed to delete!"):
        deleted = service.delete_artwork(identity.user_id, artwork_id)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Artwork not found or unauthorized",
        )
    return MessageResponse(message="Artwork deleted!")


@router.post("/{artwork_id}/like", response_model=LikeToggleResponse)
def toggle_like(
    artwork_id: int,
    identity: Annotated[Identity, Depends(get_current_identity)],
    service: Annotated[LikeService, Depends(get_like_service)],
):
    """Like an artwork, or unlike it if already liked."""
    with datastore_errors(service.db, "Failed to toggle like"):
        if not service.artwork_exists(artwork_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artwork not found!")
        try:
            liked = service.toggle_like(identity.user_id, artwork_id)
        except IntegrityError:
            # Artwork deleted between the existence check and the insert
            if not service.artwork_exists(artwork_id):
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND, detail="Artwork not found!"
                ) from None
            raise

    return LikeToggleResponse(message="Liked" if liked else "Unliked", liked=liked)
