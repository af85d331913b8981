"""Like model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, PrimaryKeyConstraint, func
from sqlalchemy.orm import relationship

from artzy.database import Base


class Like(Base):
    """A user liking an artwork. The row's existence is the whole fact."""

    __tablename__ = "likes"
    __table_args__ = (PrimaryKeyConstraint("user_id", "artwork_id", name="pk_likes_user_artwork"),)

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    artwork_id = Column(
        Integer, ForeignKey("artworks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    artwork = relationship("Artwork", back_populates="likes")
