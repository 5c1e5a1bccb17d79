"""Owner repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studbook.models import Owner
from studbook.repositories.base import BaseRepository


class OwnerRepository(BaseRepository[Owner]):
    """Repository for Owner model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Owner, session)

    async def search(self, name: str | None = None, limit: int | None = None) -> list[Owner]:
        """Search owners by partial, case-insensitive full name."""
        query = select(Owner)
        if name:
            full_name = Owner.first_name + " " + Owner.last_name
            query = query.where(full_name.icontains(name))
        query = query.order_by(Owner.id)
        if limit:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_all_by_id(self, ids: set[int]) -> list[Owner]:
        """Get all owners whose id is in ``ids``."""
        if not ids:
            return []
        result = await self.session.execute(
            select(Owner).where(Owner.id.in_(ids)).order_by(Owner.id)
        )
        return list(result.scalars().all())
