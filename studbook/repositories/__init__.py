"""Data access repositories."""

from studbook.repositories.base import BaseRepository
from studbook.repositories.horse_repository import HorseRepository
from studbook.repositories.owner_repository import OwnerRepository
from studbook.repositories.parent_repository import ParentRepository

__all__ = [
    "BaseRepository",
    "HorseRepository",
    "OwnerRepository",
    "ParentRepository",
]
