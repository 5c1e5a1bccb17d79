"""Pydantic schemas."""

from studbook.schemas.common import BaseSchema, Sex, TimestampSchema
from studbook.schemas.horse import (
    AncestorNode,
    HorseCreate,
    HorseDetail,
    HorseDraft,
    HorseListItem,
    HorseSearch,
    HorseUpdate,
    ParentResponse,
)
from studbook.schemas.owner import OwnerCreate, OwnerResponse

__all__ = [
    # Common
    "BaseSchema",
    "TimestampSchema",
    "Sex",
    # Horse
    "HorseDraft",
    "HorseCreate",
    "HorseUpdate",
    "HorseSearch",
    "HorseListItem",
    "HorseDetail",
    "ParentResponse",
    "AncestorNode",
    # Owner
    "OwnerCreate",
    "OwnerResponse",
]
