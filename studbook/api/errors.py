"""Translate service errors into HTTP errors."""

import logging

from fastapi import HTTPException, status

from studbook.exceptions import NotFoundError, ValidationFailedError

logger = logging.getLogger(__name__)


def not_found(e: NotFoundError, message: str) -> HTTPException:
    """404 for a missing entity."""
    logger.warning("%d %s: %s", status.HTTP_404_NOT_FOUND, message, e)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)


def unprocessable(e: ValidationFailedError) -> HTTPException:
    """422 carrying every validation error."""
    logger.warning("%d %s: %s", status.HTTP_422_UNPROCESSABLE_ENTITY, e.message, e.errors)
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"message": e.message, "errors": e.errors},
    )
