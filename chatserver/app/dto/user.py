# chatserver/app/dto/user.py
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, field_validator


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite hands back naive datetimes; they are stored as UTC."""
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class UserDTO(BaseModel):
    """
    A chat user as seen outside the integration layer
    """
    id: int
    username: str
    logged_in_until: Optional[datetime] = None  # None: never logged in

    @field_validator("logged_in_until", mode="after")
    @classmethod
    def ensure_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)

    class Config:
        from_attributes = True
