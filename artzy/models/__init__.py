"""SQLAlchemy models."""

from artzy.models.artwork import Artwork
from artzy.models.category import Category
from artzy.models.like import Like
from artzy.models.user import User

__all__ = [
    "User",
    "Category",
    "Artwork",
    "Like",
]
