"""
Pydantic schemas for church models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .common import HexColor, NonEmptyStr, OptionalText


class ChurchCreate(BaseModel):
    name: NonEmptyStr
    address: OptionalText = None
    color_code: Optional[HexColor] = None


class ChurchUpdate(BaseModel):
    name: Optional[NonEmptyStr] = None
    address: OptionalText = None
    color_code: Optional[HexColor] = None


class Church(BaseModel):
    """
    Pydantic schema for church data.

    Attributes:
        id (str): Church ID.
        name (str): Display name.
        address (Optional[str]): Street address.
        color_code (Optional[str]): Calendar colour in hex.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    address: Optional[str]
    color_code: Optional[str]
