"""Category model."""

from sqlalchemy import Column, Integer, String

from artzy.database import Base

# Fixed catalogue; artworks reference categories by name on write
DEFAULT_CATEGORIES = [
    "Painting",
    "Drawing",
    "Photography",
    "Digital Art",
    "Sculpture",
    "Illustration",
    "Mixed Media",
    "Other",
]


class Category(Base):
    """Lookup table of artwork categories."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
