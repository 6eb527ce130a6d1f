# chatserver/app/config/settings.py
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Chat Backend"
    SQLALCHEMY_DATABASE_URL: str = "sqlite:///./chat.db"
    SQL_ECHO: bool = False
    LOGIN_PERIOD_HOURS: int = 24  # how long a login stays valid
    AUTH_COOKIE_NAME: str = "chatAuth"
    SEED_USERS: List[str] = []  # usernames created at startup, e.g. '["alice", "bob"]'
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"  # values can be overridden from .env


settings = Settings()
