"""Owner service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from studbook.exceptions import NotFoundError, ValidationFailedError
from studbook.models import Owner
from studbook.repositories import OwnerRepository
from studbook.schemas import OwnerCreate, OwnerResponse

logger = logging.getLogger(__name__)


class OwnerService:
    """Service for owner operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.owner_repo = OwnerRepository(session)

    async def search_owners(
        self, name: str | None = None, max_amount: int | None = None
    ) -> list[OwnerResponse]:
        """Search owners by name."""
        logger.debug("search_owners(%r, %s)", name, max_amount)
        owners = await self.owner_repo.search(name, max_amount)
        return [OwnerResponse.model_validate(o) for o in owners]

    async def get_all_by_id(self, ids: set[int]) -> dict[int, Owner]:
        """Get owners by id.

        Raises:
            NotFoundError: if any of the ids is unknown.
        """
        owners = await self.owner_repo.get_all_by_id(ids)
        found = {owner.id: owner for owner in owners}
        missing = set(ids) - found.keys()
        if missing:
            raise NotFoundError(f"Owners with ids {sorted(missing)} not found")
        return found

    async def create_owner(self, data: OwnerCreate) -> OwnerResponse:
        """Create a new owner."""
        logger.debug("create_owner(%s)", data)
        errors = self._validate(data)
        if errors:
            raise ValidationFailedError("Validation of owner for create failed", errors)

        owner = await self.owner_repo.create(data.model_dump())
        return OwnerResponse.model_validate(owner)

    @staticmethod
    def _validate(data: OwnerCreate) -> list[str]:
        errors = []
        if data.first_name is None or not data.first_name.strip():
            errors.append("Owner first name is mandatory")
        if data.last_name is None or not data.last_name.strip():
            errors.append("Owner last name is mandatory")
        if data.email is not None and not data.email.strip():
            errors.append("Owner email is given but blank")
        return errors
