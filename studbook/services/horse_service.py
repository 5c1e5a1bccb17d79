"""Horse service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from studbook.config import get_settings
from studbook.exceptions import FatalError, NotFoundError, ValidationFailedError
from studbook.models import Horse, Owner, Sex
from studbook.repositories import HorseRepository, ParentRepository
from studbook.schemas import (
    AncestorNode,
    HorseCreate,
    HorseDetail,
    HorseListItem,
    HorseSearch,
    HorseUpdate,
    OwnerResponse,
    ParentResponse,
)
from studbook.services.horse_validator import HorseValidator
from studbook.services.owner_service import OwnerService
from studbook.services.tree_builder import TreeBuilder

logger = logging.getLogger(__name__)

HORSE_FIELDS = ("name", "description", "date_of_birth", "sex", "owner_id")


class HorseService:
    """Service for horse operations.

    Create and update pass through the validator before anything is
    written; parent links are then replaced as a whole.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.settings = get_settings()
        self.horse_repo = HorseRepository(session)
        self.parent_repo = ParentRepository(session)
        self.owner_service = OwnerService(session)
        self.validator = HorseValidator(session)

    async def search_horses(self, criteria: HorseSearch) -> list[HorseListItem]:
        """Search horses matching all given criteria."""
        logger.debug("search_horses(%s)", criteria)
        horses = await self.horse_repo.search(criteria)
        owners = await self._owners_for(horses)
        return [self._to_list_item(h, owners) for h in horses]

    async def search_parents(self, name: str | None) -> list[HorseListItem]:
        """Find parent candidates by name."""
        logger.debug("search_parents(%r)", name)
        horses = await self.horse_repo.search_by_name(
            name or "", self.settings.parent_search_limit
        )
        owners = await self._owners_for(horses)
        return [self._to_list_item(h, owners) for h in horses]

    async def get_horse(self, horse_id: int) -> HorseDetail | None:
        """Get a horse with owner and parents."""
        horse = await self.horse_repo.get(horse_id)
        if horse is None:
            return None
        return await self._to_detail(horse)

    async def create_horse(self, data: HorseCreate) -> HorseDetail:
        """Validate and create a new horse."""
        logger.debug("create_horse(%s)", data)
        result = await self.validator.validate(data)
        if not result.is_valid:
            raise ValidationFailedError("Validation of horse for create failed", result.errors)

        horse = await self.horse_repo.create(data.model_dump(include=set(HORSE_FIELDS)))
        if data.parent_ids:
            await self.parent_repo.replace_parents(horse.id, data.parent_ids)

        logger.info("Created horse %s", horse.id)
        return await self._to_detail(horse)

    async def update_horse(self, horse_id: int, data: HorseUpdate) -> HorseDetail:
        """Validate and update a horse.

        Raises:
            NotFoundError: if the horse does not exist.
            ValidationFailedError: if the draft is rejected.
        """
        logger.debug("update_horse(%s, %s)", horse_id, data)
        if data.id is not None and data.id != horse_id:
            raise ValidationFailedError(
                "Validation of horse for update failed", ["ID mismatch between path and body"]
            )
        result = await self.validator.validate(data, existing_id=horse_id)
        if not result.is_valid:
            raise ValidationFailedError("Validation of horse for update failed", result.errors)
        if await self.horse_repo.get(horse_id) is None:
            raise NotFoundError(f"Horse with ID {horse_id} not found")

        horse = await self.horse_repo.update(
            horse_id, data.model_dump(include=set(HORSE_FIELDS))
        )
        if data.parent_ids is not None:
            await self.parent_repo.replace_parents(horse_id, data.parent_ids)

        logger.info("Updated horse %s", horse_id)
        return await self._to_detail(horse)

    async def delete_horse(self, horse_id: int) -> None:
        """Delete a horse and every parent link it takes part in.

        Raises:
            NotFoundError: if the horse does not exist.
        """
        logger.debug("delete_horse(%s)", horse_id)
        if await self.horse_repo.get(horse_id) is None:
            raise NotFoundError(f"Horse with ID {horse_id} not found")

        await self.parent_repo.delete_parent_edges(horse_id)
        await self.parent_repo.delete_child_edges(horse_id)
        await self.horse_repo.delete(horse_id)
        logger.info("Deleted horse %s", horse_id)

    async def get_family_tree(self, horse_id: int, max_generations: int) -> AncestorNode:
        """Get the ancestor tree of a horse.

        Raises:
            ValidationFailedError: if ``max_generations`` is out of range.
            NotFoundError: if the horse does not exist.
        """
        low = self.settings.min_tree_generations
        high = self.settings.max_tree_generations
        if not low <= max_generations <= high:
            raise ValidationFailedError(
                f"Maximum generations must be between {low} and {high}"
            )
        return await TreeBuilder(self.session).build_tree(horse_id, max_generations)

    async def _owners_for(self, horses: list[Horse]) -> dict[int, Owner]:
        owner_ids = {h.owner_id for h in horses if h.owner_id is not None}
        try:
            return await self.owner_service.get_all_by_id(owner_ids)
        except NotFoundError as e:
            raise FatalError("Horse, that is already persisted, refers to non-existing owner") from e

    async def _to_detail(self, horse: Horse) -> HorseDetail:
        parents = []
        for edge in await self.parent_repo.get_parent_edges(horse.id):
            parent = await self.horse_repo.get(edge.parent_id)
            if parent is None:
                raise FatalError(f"Parent horse {edge.parent_id} not found")
            parents.append(parent)

        owners = await self._owners_for([horse, *parents])
        return HorseDetail(
            **self._to_list_item(horse, owners).model_dump(),
            created_at=horse.created_at,
            updated_at=horse.updated_at,
            parents=[
                ParentResponse(
                    horse=self._to_list_item(p, owners),
                    relationship="mother" if p.sex == Sex.FEMALE else "father",
                )
                for p in parents
            ],
        )

    @staticmethod
    def _to_list_item(horse: Horse, owners: dict[int, Owner]) -> HorseListItem:
        owner = owners.get(horse.owner_id) if horse.owner_id is not None else None
        return HorseListItem(
            id=horse.id,
            name=horse.name,
            description=horse.description,
            date_of_birth=horse.date_of_birth,
            sex=horse.sex,
            owner=OwnerResponse.model_validate(owner) if owner else None,
        )
