"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from artzy.api.errors import datastore_errors
from artzy.database import get_db
from artzy.models.category import Category
from artzy.schemas.artwork import CategoryResponse

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
def get_categories(db: Annotated[Session, Depends(get_db)]):
    """Get the category catalogue."""
    with datastore_errors(db, "Server error"):
        return db.query(Category).order_by(Category.name).all()
