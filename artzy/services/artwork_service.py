"""Artwork service: ownership-scoped CRUD and public gallery reads."""

import logging
from typing import Any

from sqlalchemy import and_, exists, false, func, select
from sqlalchemy.orm import Session

from artzy.models.artwork import Artwork
from artzy.models.category import Category
from artzy.models.like import Like
from artzy.models.user import User
from artzy.schemas.artwork import (
    ArtworkCreate,
    ArtworkResponse,
    ArtworkUpdate,
    PublicArtworkResponse,
)

logger = logging.getLogger(__name__)


class InvalidCategoryError(ValueError):
    """Raised when an artwork is created with a category name that does not exist."""

    def __init__(self, name: str):
        super().__init__(f"Unknown category: {name}")
        self.name = name


def _like_count():
    return (
        select(func.count())
        .select_from(Like)
        .where(Like.artwork_id == Artwork.id)
        .correlate(Artwork)
        .scalar_subquery()
    )


def _is_liked(viewer_id: int | None):
    if viewer_id is None:
        return false()
    return (
        exists()
        .where(and_(Like.artwork_id == Artwork.id, Like.user_id == viewer_id))
        .correlate(Artwork)
    )


class ArtworkService:
    """Service for artwork operations.

    Every owner operation filters on ``user_id`` as well as the artwork id, so
    another user's artwork is indistinguishable from a missing one.
    """

    def __init__(self, db: Session):
        self.db = db

    def resolve_category(self, name: str | None) -> int | None:
        """Look up a category id by name."""
        if not name:
            return None
        return self.db.query(Category.id).filter(Category.name == name).scalar()

    def _annotated_query(self, viewer_id: int | None):
        return (
            self.db.query(
                Artwork,
                Category.name.label("category"),
                _like_count().label("like_count"),
                _is_liked(viewer_id).label("is_liked"),
            )
            .outerjoin(Category, Artwork.category_id == Category.id)
        )

    @staticmethod
    def _build_response(row: Any) -> ArtworkResponse:
        artwork, category, like_count, is_liked = row
        response = ArtworkResponse.model_validate(artwork)
        response.category = category
        response.like_count = like_count or 0
        response.is_liked = bool(is_liked)
        return response

    def _list_for_owner(self, owner_id: int, viewer_id: int | None) -> list[ArtworkResponse]:
        rows = (
            self._annotated_query(viewer_id)
            .filter(Artwork.user_id == owner_id)
            .order_by(Artwork.created_at.desc(), Artwork.id.desc())
            .all()
        )
        return [self._build_response(row) for row in rows]

    def _get_annotated(self, artwork_id: int, user_id: int) -> ArtworkResponse | None:
        row = (
            self._annotated_query(user_id)
            .filter(Artwork.id == artwork_id, Artwork.user_id == user_id)
            .first()
        )
        return self._build_response(row) if row else None

    def create_artwork(self, user_id: int, data: ArtworkCreate) -> ArtworkResponse:
        """Create an artwork owned by ``user_id``.

        Raises:
            InvalidCategoryError: if ``data.category`` is not in the catalogue.
        """
        category_id = self.resolve_category(data.category)
        if category_id is None:
            raise InvalidCategoryError(data.category)

        artwork = Artwork(
            user_id=user_id,
            image=data.image,
            title=data.title,
            artist=data.artist,
            year=data.year,
            category_id=category_id,
            description=data.description,
        )
        self.db.add(artwork)
        self.db.commit()
        self.db.refresh(artwork)
        logger.info(f"User {user_id} created artwork {artwork.id}")

        response = ArtworkResponse.model_validate(artwork)
        response.category = data.category
        return response

    def list_own_artworks(self, user_id: int) -> list[ArtworkResponse]:
        """All artworks owned by ``user_id``, newest first."""
        return self._list_for_owner(user_id, viewer_id=user_id)

    def get_own_artwork(self, user_id: int, artwork_id: int) -> ArtworkResponse | None:
        """Get an artwork only if ``user_id`` owns it."""
        return self._get_annotated(artwork_id, user_id)

    def update_artwork(
        self, user_id: int, artwork_id: int, data: ArtworkUpdate
    ) -> ArtworkResponse | None:
        """Replace an owned artwork's fields. Returns None if nothing matched."""
        category_id = self.resolve_category(data.category)
        if data.category and category_id is None:
            logger.info(f"Unknown category '{data.category}' on update, storing uncategorized")

        updated = (
            self.db.query(Artwork)
            .filter(Artwork.id == artwork_id, Artwork.user_id == user_id)
            .update(
                {
                    Artwork.image: data.image,
                    Artwork.title: data.title,
                    Artwork.artist: data.artist,
                    Artwork.year: data.year,
                    Artwork.category_id: category_id,
                    Artwork.description: data.description,
                },
                synchronize_session=False,
            )
        )
        self.db.commit()
        if not updated:
            return None
        return self._get_annotated(artwork_id, user_id)

    def delete_artwork(self, user_id: int, artwork_id: int) -> bool:
        """Delete an owned artwork and its likes. Returns False if nothing matched."""
        owned = (
            self.db.query(Artwork.id)
            .filter(Artwork.id == artwork_id, Artwork.user_id == user_id)
            .scalar()
        )
        if owned is None:
            return False

        self.db.query(Like).filter(Like.artwork_id == artwork_id).delete(
            synchronize_session=False
        )
        self.db.query(Artwork).filter(
            Artwork.id == artwork_id, Artwork.user_id == user_id
        ).delete(synchronize_session=False)
        self.db.commit()
        logger.info(f"User {user_id} deleted artwork {artwork_id}")
        return True

    def list_public_artworks(
        self, username: str, viewer_id: int | None = None
    ) -> list[ArtworkResponse] | None:
        """A user's gallery as seen by ``viewer_id`` (None for anonymous).

        Returns None if no user has that username.
        """
        owner_id = self.db.query(User.id).filter(User.username == username).scalar()
        if owner_id is None:
            return None
        return self._list_for_owner(owner_id, viewer_id=viewer_id)

    def get_public_artwork(self, artwork_id: int) -> PublicArtworkResponse | None:
        """Get any artwork by id together with its owner's public fields."""
        row = (
            self.db.query(
                Artwork,
                Category.name,
                User.username,
                User.profile_pic,
                _like_count(),
            )
            .outerjoin(Category, Artwork.category_id == Category.id)
            .outerjoin(User, Artwork.user_id == User.id)
            .filter(Artwork.id == artwork_id)
            .first()
        )
        if row is None:
            return None

        artwork, category, username, profile_pic, like_count = row
        response = PublicArtworkResponse.model_validate(artwork)
        response.category = category
        response.like_count = like_count or 0
        response.artist_username = username
        response.artist_profile_pic = profile_pic
        return response
