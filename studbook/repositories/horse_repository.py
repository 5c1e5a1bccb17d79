"""Horse repository."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studbook.models import Horse, Owner
from studbook.repositories.base import BaseRepository
from studbook.schemas import HorseSearch

logger = logging.getLogger(__name__)


class HorseRepository(BaseRepository[Horse]):
    """Repository for Horse model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Horse, session)

    async def search(self, criteria: HorseSearch) -> list[Horse]:
        """Search horses; every given criterion must match."""
        logger.debug("search(%s)", criteria)
        query = select(Horse)

        if criteria.name:
            query = query.where(Horse.name.icontains(criteria.name))
        if criteria.description:
            query = query.where(Horse.description.icontains(criteria.description))
        if criteria.born_before is not None:
            query = query.where(Horse.date_of_birth < criteria.born_before)
        if criteria.sex is not None:
            query = query.where(Horse.sex == criteria.sex)
        if criteria.owner_name:
            full_name = Owner.first_name + " " + Owner.last_name
            query = query.join(Owner, Horse.owner_id == Owner.id).where(
                full_name.icontains(criteria.owner_name)
            )

        query = query.order_by(Horse.id)
        if criteria.limit:
            query = query.limit(criteria.limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def search_by_name(self, name: str, limit: int = 5) -> list[Horse]:
        """Search horses by partial, case-insensitive name."""
        if not name or not name.strip():
            return []
        query = (
            select(Horse)
            .where(Horse.name.icontains(name))
            .order_by(Horse.id)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
