"""Artwork model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from artzy.database import Base
from artzy.models.mixins import TimestampMixin


class Artwork(Base, TimestampMixin):
    """Artwork owned by exactly one user."""

    __tablename__ = "artworks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    image = Column(Text, nullable=False)  # URL or data URI
    title = Column(String(255), nullable=False)
    artist = Column(String(255), nullable=False)
    year = Column(Integer, nullable=True)
    category_id = Column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True
    )
    description = Column(Text, nullable=True)

    # Relationships
    owner = relationship("User", back_populates="artworks")
    likes = relationship("Like", back_populates="artwork", passive_deletes=True)
