"""
Models for bookable resources (rooms and equipment).

Classes:
    ResourceKind (Enum): Whether the resource is a space or a piece of equipment.
    Resource (Base): SQLAlchemy model for a bookable resource.
"""

from enum import Enum
from typing import Optional

from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from . import Base


class ResourceKind(Enum):
    """
    Enum representing the kind of resource.

    Attributes:
        SPACE: A room or hall.
        EQUIPMENT: Movable equipment such as a projector.
    """

    SPACE = "space"
    EQUIPMENT = "equipment"


class Resource(Base):
    """
    SQLAlchemy model for a bookable resource.

    Attributes:
        id (str): Primary key (uuid4 string).
        name (str): Display name, unique regardless of case.
        kind (Optional[ResourceKind]): Space or equipment.
        is_available (bool): Whether the resource can currently be booked.
    """

    __tablename__ = "resource"

    id: Mapped[str] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(nullable=False, unique=True)
    kind: Mapped[Optional[ResourceKind]] = mapped_column(
        SQLEnum(ResourceKind), nullable=True
    )
    is_available: Mapped[bool] = mapped_column(default=True, nullable=False)
