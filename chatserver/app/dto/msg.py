# chatserver/app/dto/msg.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from chatserver.app.dto.user import UserDTO, as_utc


class MsgDTO(BaseModel):
    """
    A chat message together with its author
    """
    id: int
    msg: str
    author: UserDTO
    created_at: Optional[datetime] = None

    @field_validator("created_at", mode="after")
    @classmethod
    def ensure_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)

    class Config:
        from_attributes = True
