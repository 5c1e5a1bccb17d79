"""Horse schemas."""

from datetime import date
from typing import Literal

from pydantic import Field

from studbook.schemas.common import BaseSchema, Sex, TimestampSchema
from studbook.schemas.owner import OwnerResponse


class HorseDraft(BaseSchema):
    """Candidate horse record as submitted for create or update.

    Every field is optional at the schema level; the horse validator decides
    what is mandatory so that all violations are reported together.
    """

    name: str | None = None
    description: str | None = None
    date_of_birth: date | None = None
    sex: Sex | None = None
    owner_id: int | None = None
    parent_ids: list[int] | None = Field(default_factory=list)


class HorseCreate(HorseDraft):
    """Schema for creating a horse."""

    pass


class HorseUpdate(HorseDraft):
    """Schema for updating a horse.

    ``parent_ids`` left out (or null) keeps the stored parents.
    """

    id: int | None = None
    parent_ids: list[int] | None = None


class HorseSearch(BaseSchema):
    """Search criteria, combined with AND."""

    name: str | None = None
    description: str | None = None
    born_before: date | None = None
    sex: Sex | None = None
    owner_name: str | None = None
    limit: int | None = Field(None, ge=1)


class HorseListItem(BaseSchema):
    """Horse as shown in lists and as a parent."""

    id: int
    name: str
    description: str | None = None
    date_of_birth: date
    sex: Sex
    owner: OwnerResponse | None = None


class ParentResponse(BaseSchema):
    """A parent of a horse with its derived role."""

    horse: HorseListItem
    relationship: Literal["mother", "father"]


class HorseDetail(HorseListItem, TimestampSchema):
    """Horse detail response schema."""

    parents: list[ParentResponse] = Field(default_factory=list)


class AncestorNode(BaseSchema):
    """One horse in a family tree with its (possibly absent) parents."""

    id: int
    name: str
    date_of_birth: date
    sex: Sex
    mother: "AncestorNode | None" = None
    father: "AncestorNode | None" = None


AncestorNode.model_rebuild()
