"""
Model for churches, the organizations that own events and birthdays.
"""

from typing import Optional

from sqlalchemy.orm import Mapped, mapped_column

from . import Base


class Church(Base):
    """
    SQLAlchemy model for a church.

    Attributes:
        id (str): Primary key (uuid4 string).
        name (str): Display name, unique regardless of case.
        address (Optional[str]): Street address.
        color_code (Optional[str]): Hex colour used by the calendar (e.g. #8b5e3b).
    """

    __tablename__ = "church"

    id: Mapped[str] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(nullable=False, unique=True)
    address: Mapped[Optional[str]]
    color_code: Mapped[Optional[str]]

    def __repr__(self) -> str:
        return f"<Church(id={self.id}, name='{self.name}')>"
