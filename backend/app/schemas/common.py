"""
Reusable annotated field types for request and response schemas.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, StringConstraints

from services.intervals import to_utc


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


UTCInstant = Annotated[datetime, AfterValidator(to_utc)]
NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
OptionalText = Annotated[Optional[str], AfterValidator(_blank_to_none)]
HexColor = Annotated[str, StringConstraints(pattern=r"^#[0-9a-fA-F]{6}$")]
