"""
Pydantic schemas for resource models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..models.resource import ResourceKind
from .common import NonEmptyStr


class ResourceCreate(BaseModel):
    name: NonEmptyStr
    kind: Optional[ResourceKind] = None
    is_available: bool = True


class ResourceUpdate(BaseModel):
    name: Optional[NonEmptyStr] = None
    kind: Optional[ResourceKind] = None
    is_available: Optional[bool] = None


class Resource(BaseModel):
    """
    Pydantic schema for resource data.

    Attributes:
        id (str): Resource ID.
        name (str): Display name.
        kind (Optional[ResourceKind]): Space or equipment.
        is_available (bool): Whether it can be booked.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    kind: Optional[ResourceKind]
    is_available: bool
