"""Business logic services."""

from studbook.services.horse_service import HorseService
from studbook.services.horse_validator import HorseValidator, ValidationResult
from studbook.services.owner_service import OwnerService
from studbook.services.tree_builder import TreeBuilder

__all__ = [
    "HorseService",
    "HorseValidator",
    "OwnerService",
    "TreeBuilder",
    "ValidationResult",
]
