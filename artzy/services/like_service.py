"""Like toggle service."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from artzy.models.artwork import Artwork
from artzy.models.like import Like

logger = logging.getLogger(__name__)


class LikeService:
    """Service for flipping a user's like on an artwork.

    The (user_id, artwork_id) primary key on ``likes`` is what keeps the
    relationship unique when two toggles race.
    """

    def __init__(self, db: Session):
        self.db = db

    def artwork_exists(self, artwork_id: int) -> bool:
        """Check whether an artwork with this id exists."""
        return self.db.query(Artwork.id).filter(Artwork.id == artwork_id).scalar() is not None

    def like_exists(self, user_id: int, artwork_id: int) -> bool:
        """Check whether the user currently likes the artwork."""
        return (
            self.db.query(Like.user_id)
            .filter(Like.user_id == user_id, Like.artwork_id == artwork_id)
            .first()
            is not None
        )

    def toggle_like(self, user_id: int, artwork_id: int) -> bool:
        """Flip the like and return the new state (True when now liked)."""
        removed = (
            self.db.query(Like)
            .filter(Like.user_id == user_id, Like.artwork_id == artwork_id)
            .delete(synchronize_session=False)
        )
        if removed:
            self.db.commit()
            return False

        self.db.add(Like(user_id=user_id, artwork_id=artwork_id))
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # Foreign key failures land here too; liked only if the pair is stored
            if not self.like_exists(user_id, artwork_id):
                raise
            logger.info(f"Like ({user_id}, {artwork_id}) already present, keeping it")
        return True
