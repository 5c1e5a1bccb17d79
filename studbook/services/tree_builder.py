"""Family tree assembly from flat parent links."""

import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from studbook.exceptions import NotFoundError
from studbook.models import Horse, ParentLink, Sex
from studbook.repositories import HorseRepository, ParentRepository
from studbook.schemas import AncestorNode

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Builds a bounded-depth ancestor tree for one horse.

    The root is generation 0. Parents of a node are resolved only while the
    next generation is still below ``max_generations``; a bound of 1 yields
    the root alone. Mother and father slots are filled by the parent's sex.
    Horse rows and parent edges are looked up at most once per build, so a
    horse appearing several times in the pedigree costs one query.
    """

    def __init__(self, session: AsyncSession):
        self.horse_repo = HorseRepository(session)
        self.parent_repo = ParentRepository(session)

    async def build_tree(self, root_id: int, max_generations: int) -> AncestorNode:
        """Build the tree rooted at ``root_id``.

        Raises:
            NotFoundError: if the root horse does not exist.
        """
        logger.debug("build_tree(%s, %s)", root_id, max_generations)
        memo = _Lookups()

        root = await self._get_horse(root_id, memo)
        if root is None:
            raise NotFoundError(f"Horse with ID {root_id} not found")

        return await self._build_node(root, 0, max_generations, memo)

    async def _build_node(
        self, horse: Horse, generation: int, max_generations: int, memo: "_Lookups"
    ) -> AncestorNode:
        node = AncestorNode(
            id=horse.id,
            name=horse.name,
            date_of_birth=horse.date_of_birth,
            sex=horse.sex,
        )
        if generation + 1 >= max_generations:
            return node

        for edge in await self._get_parent_edges(horse.id, memo):
            parent = await self._get_horse(edge.parent_id, memo)
            if parent is None:
                # Stale link: drop this lineage instead of failing the tree
                logger.warning(
                    "Parent horse %s not found for horse %s", edge.parent_id, horse.id
                )
                continue

            parent_node = await self._build_node(
                parent, generation + 1, max_generations, memo
            )
            if parent.sex == Sex.FEMALE:
                if node.mother is not None:
                    logger.warning("Horse %s has more than one female parent", horse.id)
                node.mother = parent_node
            elif parent.sex == Sex.MALE:
                if node.father is not None:
                    logger.warning("Horse %s has more than one male parent", horse.id)
                node.father = parent_node
            else:
                logger.warning(
                    "Parent horse %s of horse %s has no assignable sex: %r",
                    parent.id,
                    horse.id,
                    parent.sex,
                )

        return node

    async def _get_horse(self, horse_id: int, memo: "_Lookups") -> Horse | None:
        if horse_id not in memo.horses:
            memo.horses[horse_id] = await self.horse_repo.get(horse_id)
        return memo.horses[horse_id]

    async def _get_parent_edges(self, horse_id: int, memo: "_Lookups") -> list[ParentLink]:
        if horse_id not in memo.edges:
            memo.edges[horse_id] = await self.parent_repo.get_parent_edges(horse_id)
        return memo.edges[horse_id]


@dataclass
class _Lookups:
    """Rows fetched during one build, keyed by horse id."""

    horses: dict[int, Horse | None] = field(default_factory=dict)
    edges: dict[int, list[ParentLink]] = field(default_factory=dict)
