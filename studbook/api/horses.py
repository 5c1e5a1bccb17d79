"""Horse API routes."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from studbook.api.errors import not_found, unprocessable
from studbook.database import get_db
from studbook.exceptions import NotFoundError, ValidationFailedError
from studbook.schemas import (
    AncestorNode,
    HorseCreate,
    HorseDetail,
    HorseListItem,
    HorseSearch,
    HorseUpdate,
    Sex,
)
from studbook.services import HorseService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/horses", tags=["horses"])


@router.get("", response_model=list[HorseListItem])
async def search_horses(
    name: str | None = Query(None),
    description: str | None = Query(None),
    born_before: date | None = Query(None),
    sex: Sex | None = Query(None),
    owner_name: str | None = Query(None),
    limit: int | None = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """Search horses; all given filters must match."""
    criteria = HorseSearch(
        name=name,
        description=description,
        born_before=born_before,
        sex=sex,
        owner_name=owner_name,
        limit=limit,
    )
    logger.info("GET /horses")
    logger.debug("request parameters: %s", criteria)
    return await HorseService(db).search_horses(criteria)


@router.get("/parents", response_model=list[HorseListItem])
async def search_parents(
    name: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Find parent candidates by name."""
    logger.info("GET /horses/parents")
    return await HorseService(db).search_parents(name)


@router.get("/{horse_id}", response_model=HorseDetail)
async def get_horse(
    horse_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a horse by ID."""
    logger.info("GET /horses/%s", horse_id)
    horse = await HorseService(db).get_horse(horse_id)
    if not horse:
        raise HTTPException(status_code=404, detail="Horse not found")
    return horse


@router.get("/{horse_id}/family-tree", response_model=AncestorNode)
async def get_family_tree(
    horse_id: int,
    max_generations: int = Query(5),
    db: AsyncSession = Depends(get_db),
):
    """Get the ancestor tree of a horse."""
    logger.info("GET /horses/%s/family-tree?max_generations=%s", horse_id, max_generations)
    try:
        return await HorseService(db).get_family_tree(horse_id, max_generations)
    except NotFoundError as e:
        raise not_found(e, "Horse not found") from e
    except ValidationFailedError as e:
        raise unprocessable(e) from e


@router.post("", response_model=HorseDetail, status_code=201)
async def create_horse(
    data: HorseCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new horse."""
    logger.info("POST /horses")
    logger.debug("Request body: %s", data)
    try:
        return await HorseService(db).create_horse(data)
    except ValidationFailedError as e:
        raise unprocessable(e) from e


@router.put("/{horse_id}", response_model=HorseDetail)
async def update_horse(
    horse_id: int,
    data: HorseUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a horse; supplied parent ids replace the stored ones."""
    logger.info("PUT /horses/%s", horse_id)
    logger.debug("Request body: %s", data)
    try:
        return await HorseService(db).update_horse(horse_id, data)
    except NotFoundError as e:
        raise not_found(e, "Horse not found") from e
    except ValidationFailedError as e:
        raise unprocessable(e) from e


@router.delete("/{horse_id}", status_code=204)
async def delete_horse(
    horse_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a horse and its parent links."""
    logger.info("DELETE /horses/%s", horse_id)
    try:
        await HorseService(db).delete_horse(horse_id)
    except NotFoundError as e:
        raise not_found(e, "Horse not found") from e
    return Response(status_code=204)
