"""Owner model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studbook.database import Base
from studbook.models.base import TimestampMixin


class Owner(Base, TimestampMixin):
    """Owner table model."""

    __tablename__ = "owners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships
    horses = relationship("Horse", back_populates="owner")

    def __repr__(self) -> str:
        return f"<Owner(id={self.id}, name='{self.first_name} {self.last_name}')>"
