# chatserver/app/auth/schemas.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class UserLogin(BaseModel):
    username: str


class UserOut(BaseModel):
    id: int
    username: str
    logged_in_until: Optional[datetime] = None

    class Config:
        from_attributes = True
