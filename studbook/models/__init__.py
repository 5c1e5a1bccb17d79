"""SQLAlchemy models."""

from studbook.models.horse import Horse, Sex
from studbook.models.owner import Owner
from studbook.models.parent import ParentLink

__all__ = [
    "Horse",
    "Owner",
    "ParentLink",
    "Sex",
]
