"""Owner API routes."""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from studbook.api.errors import unprocessable
from studbook.database import get_db
from studbook.exceptions import ValidationFailedError
from studbook.schemas import OwnerCreate, OwnerResponse
from studbook.services import OwnerService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/owners", tags=["owners"])


@router.get("", response_model=list[OwnerResponse])
async def search_owners(
    name: str | None = Query(None),
    max_amount: int | None = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """Search owners by name."""
    logger.info("GET /owners name=%r max_amount=%s", name, max_amount)
    return await OwnerService(db).search_owners(name, max_amount)


@router.post("", response_model=OwnerResponse, status_code=201)
async def create_owner(
    data: OwnerCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new owner."""
    logger.info("POST /owners")
    logger.debug("Request body: %s", data)
    try:
        return await OwnerService(db).create_owner(data)
    except ValidationFailedError as e:
        raise unprocessable(e) from e
