"""Parent link model."""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from studbook.database import Base


class ParentLink(Base):
    """Edge stating that ``parent_id`` is a parent of ``horse_id``.

    Mother/father roles are not stored; they follow from the parent's sex.
    """

    __tablename__ = "horse_parent"

    horse_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("horses.id"), primary_key=True
    )
    parent_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("horses.id"), primary_key=True, index=True
    )

    def __repr__(self) -> str:
        return f"<ParentLink(horse_id={self.horse_id}, parent_id={self.parent_id})>"
