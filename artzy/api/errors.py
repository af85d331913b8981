"""Datastore failure handling shared by the route modules."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


@contextmanager
def datastore_errors(db: Session, message: str) -> Iterator[None]:
    """Turn a datastore failure into a generic 500 carrying ``message``.

    The underlying error is logged, never returned to the client.
    """
    try:
        yield
    except SQLAlchemyError:
        db.rollback()
        logger.exception(message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
        ) from None
