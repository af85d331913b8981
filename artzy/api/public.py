"""Unauthenticated read endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from artzy.api.dependencies import get_artwork_service
from artzy.api.errors import datastore_errors
from artzy.schemas.artwork import PublicArtworkResponse
from artzy.services.artwork_service import ArtworkService

router = APIRouter(prefix="/api/public", tags=["public"])


@router.get("/artworks/{artwork_id}", response_model=PublicArtworkResponse)
def get_public_artwork(
    artwork_id: int,
    service: Annotated[ArtworkService, Depends(get_artwork_service)],
):
    """Get any artwork by id with its artist's username and profile picture."""
    with datastore_errors(service.db, "Server error"):
        artwork = service.get_public_artwork(artwork_id)

    if artwork is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artwork not found!")
    return artwork
