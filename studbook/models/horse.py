"""Horse model."""

import enum
from datetime import date

from sqlalchemy import Date, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studbook.database import Base
from studbook.models.base import TimestampMixin


class Sex(str, enum.Enum):
    """Sex of a horse."""

    FEMALE = "FEMALE"
    MALE = "MALE"


class Horse(Base, TimestampMixin):
    """Horse table model."""

    __tablename__ = "horses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(4095), nullable=True)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    sex: Mapped[Sex] = mapped_column(Enum(Sex, native_enum=False, length=6), nullable=False)
    owner_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("owners.id"), nullable=True
    )

    # Relationships
    owner = relationship("Owner", back_populates="horses")

    def __repr__(self) -> str:
        return f"<Horse(id={self.id}, name='{self.name}', sex={self.sex})>"
