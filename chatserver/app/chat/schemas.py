# chatserver/app/chat/schemas.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class MsgAuthorOut(BaseModel):
    id: int
    username: str

    class Config:
        from_attributes = True


class MsgOut(BaseModel):
    id: int
    msg: str
    author: MsgAuthorOut
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class MsgCreate(BaseModel):
    """
    A new message, written by the logged in user
    """
    msg: str
