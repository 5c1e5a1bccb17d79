"""Parent link repository."""

import logging

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from studbook.exceptions import FatalError
from studbook.models import ParentLink

logger = logging.getLogger(__name__)


class ParentRepository:
    """Repository for parent edges between horses."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_parent_edges(self, horse_id: int) -> list[ParentLink]:
        """Get the parent edges of a horse, ordered by parent id."""
        logger.debug("get_parent_edges(%s)", horse_id)
        result = await self.session.execute(
            select(ParentLink)
            .where(ParentLink.horse_id == horse_id)
            .order_by(ParentLink.parent_id)
        )
        return list(result.scalars().all())

    async def get_child_edges(self, parent_id: int) -> list[ParentLink]:
        """Get the edges where the horse is a parent, ordered by child id."""
        logger.debug("get_child_edges(%s)", parent_id)
        result = await self.session.execute(
            select(ParentLink)
            .where(ParentLink.parent_id == parent_id)
            .order_by(ParentLink.horse_id)
        )
        return list(result.scalars().all())

    async def replace_parents(self, horse_id: int, parent_ids: list[int]) -> None:
        """Replace the whole parent set of a horse."""
        logger.debug("replace_parents(%s, %s)", horse_id, parent_ids)
        await self.delete_parent_edges(horse_id)

        for parent_id in parent_ids:
            result = await self.session.execute(
                insert(ParentLink).values(horse_id=horse_id, parent_id=parent_id)
            )
            if result.rowcount != 1:
                raise FatalError(
                    f"{result.rowcount} parent relationships inserted, expected exactly 1"
                )

    async def delete_parent_edges(self, horse_id: int) -> int:
        """Delete all edges where the horse is the child."""
        logger.debug("delete_parent_edges(%s)", horse_id)
        result = await self.session.execute(
            delete(ParentLink).where(ParentLink.horse_id == horse_id)
        )
        return result.rowcount

    async def delete_child_edges(self, parent_id: int) -> int:
        """Delete all edges where the horse is the parent."""
        logger.debug("delete_child_edges(%s)", parent_id)
        result = await self.session.execute(
            delete(ParentLink).where(ParentLink.parent_id == parent_id)
        )
        return result.rowcount
