"""Pedigree consistency rules for horse records."""

import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from studbook.models import Horse
from studbook.repositories import HorseRepository, OwnerRepository, ParentRepository
from studbook.schemas import HorseDraft

logger = logging.getLogger(__name__)

MAX_DESCRIPTION_LENGTH = 4095
MAX_PARENTS = 2


@dataclass
class ValidationResult:
    """Ordered violations found for one draft; empty means accepted."""

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, message: str) -> None:
        self.errors.append(message)


class HorseValidator:
    """Checks a horse draft and its proposed parents.

    Every rule runs and all violations are collected, so a rejected
    submission reports each problem at once. The validator only reads.
    """

    def __init__(self, session: AsyncSession):
        self.horse_repo = HorseRepository(session)
        self.owner_repo = OwnerRepository(session)
        self.parent_repo = ParentRepository(session)

    async def validate(
        self, draft: HorseDraft, existing_id: int | None = None
    ) -> ValidationResult:
        """Validate a draft; ``existing_id`` is given for updates only."""
        logger.debug("validate(%s, existing_id=%s)", draft, existing_id)
        result = ValidationResult()

        if existing_id is not None and existing_id <= 0:
            result.add("Horse ID must be a positive number")

        self._check_fields(draft, result)

        if draft.owner_id is not None and await self.owner_repo.get(draft.owner_id) is None:
            result.add(f"Owner with ID {draft.owner_id} does not exist")

        await self._check_parents(draft, existing_id, result)

        if existing_id is not None and existing_id > 0:
            await self._check_children(draft, existing_id, result)

        logger.debug("validate found %d violation(s)", len(result.errors))
        return result

    def _check_fields(self, draft: HorseDraft, result: ValidationResult) -> None:
        if draft.name is None or not draft.name.strip():
            result.add("Horse name is mandatory")

        if draft.date_of_birth is None:
            result.add("Horse birthdate is mandatory")

        if draft.sex is None:
            result.add("Horse gender is mandatory")

        if draft.description is not None:
            if not draft.description.strip():
                result.add("Horse description is given but blank")
            if len(draft.description) > MAX_DESCRIPTION_LENGTH:
                result.add(
                    f"Horse description too long: longer than {MAX_DESCRIPTION_LENGTH} characters"
                )

    async def _check_parents(
        self, draft: HorseDraft, existing_id: int | None, result: ValidationResult
    ) -> None:
        parent_ids = draft.parent_ids
        if parent_ids is None and existing_id is not None and existing_id > 0:
            # Kept parents must still fit the new birth date
            edges = await self.parent_repo.get_parent_edges(existing_id)
            parent_ids = [edge.parent_id for edge in edges]
        parent_ids = parent_ids or []
        if len(parent_ids) > MAX_PARENTS:
            result.add(f"A horse cannot have more than {MAX_PARENTS} parents")
            return

        parents: list[Horse] = []
        for parent_id in parent_ids:
            if existing_id is not None and parent_id == existing_id:
                result.add("A horse cannot be its own parent")

            parent = await self.horse_repo.get(parent_id)
            if parent is None:
                result.add(f"The parent horse with ID {parent_id} does not exist")
                continue
            parents.append(parent)

            if draft.date_of_birth is not None and parent.date_of_birth >= draft.date_of_birth:
                result.add(f"Parent horse with ID {parent_id} must be born before the child")

        if len(parents) == MAX_PARENTS:
            first, second = parents
            if first.sex == second.sex:
                result.add("Both parents must have different genders")
            if first.id == second.id:
                result.add("A horse cannot have the same horse as both parents")

    async def _check_children(
        self, draft: HorseDraft, existing_id: int, result: ValidationResult
    ) -> None:
        # An update must not break the pedigree of horses that already
        # list this one as a parent.
        for edge in await self.parent_repo.get_child_edges(existing_id):
            child = await self.horse_repo.get(edge.horse_id)
            if child is None:
                continue

            if draft.date_of_birth is not None and child.date_of_birth <= draft.date_of_birth:
                result.add(f"Horse must be born before its child with ID {child.id}")

            if draft.sex is None:
                continue
            for co_edge in await self.parent_repo.get_parent_edges(child.id):
                if co_edge.parent_id == existing_id:
                    continue
                co_parent = await self.horse_repo.get(co_edge.parent_id)
                if co_parent is not None and co_parent.sex == draft.sex:
                    result.add(
                        f"Horse shares its gender with the other parent of child with ID {child.id}"
                    )
