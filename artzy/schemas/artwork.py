"""Artwork, like and category schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ArtworkCreate(BaseModel):
    """Create a new artwork."""

    image: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=255)
    artist: str = Field(..., min_length=1, max_length=255)
    year: int | None = None
    category: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=5000)


class ArtworkUpdate(BaseModel):
    """Replace an artwork's fields. An unknown category leaves it uncategorized."""

    image: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=255)
    artist: str = Field(..., min_length=1, max_length=255)
    year: int | None = None
    category: str | None = Field(None, max_length=100)
    description: str | None = Field(None, max_length=5000)


class ArtworkRecord(BaseModel):
    """Stored artwork columns plus derived category name and like count."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    image: str
    title: str
    artist: str
    year: int | None
    category_id: int | None
    category: str | None = None
    description: str | None
    created_at: datetime
    like_count: int = 0


class ArtworkResponse(ArtworkRecord):
    """Artwork as seen by a (possibly anonymous) viewer."""

    is_liked: bool = False


class PublicArtworkResponse(ArtworkRecord):
    """Single public artwork with its owner's public identity."""

    artist_username: str | None = None
    artist_profile_pic: str | None = None


class ArtworkUpdateResponse(BaseModel):
    """Update acknowledgement carrying the stored artwork."""

    message: str
    artwork: ArtworkResponse


class LikeToggleResponse(BaseModel):
    """Result of flipping a like."""

    message: str
    liked: bool


class CategoryResponse(BaseModel):
    """Category lookup entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
