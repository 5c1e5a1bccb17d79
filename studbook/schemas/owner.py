"""Owner schemas."""

from pydantic import Field

from studbook.schemas.common import BaseSchema


class OwnerCreate(BaseSchema):
    """Schema for creating an owner.

    Fields are optional here so that the service can report every missing
    field at once instead of failing on the first one.
    """

    first_name: str | None = Field(None, max_length=255)
    last_name: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=255)


class OwnerResponse(BaseSchema):
    """Owner response schema."""

    id: int
    first_name: str
    last_name: str
    email: str | None = None
