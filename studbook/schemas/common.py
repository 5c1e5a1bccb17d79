"""Common schema types."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from studbook.models.horse import Sex


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(from_attributes=True)


class TimestampSchema(BaseSchema):
    """Schema with timestamp fields."""

    created_at: datetime
    updated_at: datetime


__all__ = ["BaseSchema", "Sex", "TimestampSchema"]
