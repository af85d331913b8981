"""User model."""

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from artzy.database import Base


class User(Base):
    """User model for authentication and artwork ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    profile_pic = Column(String, nullable=True)  # URL or data URI
    join_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    artworks = relationship("Artwork", back_populates="owner", passive_deletes=True)
