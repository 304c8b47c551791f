"""
Model for recurring birthdays.
"""

from typing import Optional

from sqlalchemy import CheckConstraint, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from . import Base


class Birthday(Base):
    """
    SQLAlchemy model for an annual birthday. No occurrence is stored; dates
    are projected onto calendar years on demand.

    Attributes:
        id (str): Primary key (uuid4 string).
        name (str): Person's name.
        day (int): Day of month, 1-31.
        month (int): Month, 1-12.
        birth_year (Optional[int]): Year of birth, enables age computation.
        church_id (Optional[str]): Owning church, None when unscoped.
        notes (Optional[str]): Free text notes.
        department_id (Optional[str]): Optional department tag.
        organization_unit_id (Optional[str]): Optional organization unit tag.
    """

    __tablename__ = "birthday"
    __table_args__ = (
        CheckConstraint("day >= 1 AND day <= 31", name="ck_birthday_day"),
        CheckConstraint("month >= 1 AND month <= 12", name="ck_birthday_month"),
    )

    id: Mapped[str] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(nullable=False)
    day: Mapped[int] = mapped_column(nullable=False)
    month: Mapped[int] = mapped_column(index=True, nullable=False)
    birth_year: Mapped[Optional[int]]
    church_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("church.id", ondelete="SET NULL"), index=True, nullable=True
    )
    notes: Mapped[Optional[str]]
    department_id: Mapped[Optional[str]]
    organization_unit_id: Mapped[Optional[str]]

    def __repr__(self) -> str:
        return f"<Birthday(id={self.id}, name='{self.name}', day={self.day}, month={self.month})>"
