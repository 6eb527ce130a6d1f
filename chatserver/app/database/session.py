# chatserver/app/database/session.py
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from chatserver.app.config.settings import settings

Base = declarative_base()


def make_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    database_url = database_url or settings.SQLALCHEMY_DATABASE_URL
    connect_args = {}
    if database_url.startswith("sqlite"):
        # sessions are used from worker threads
        connect_args = {"check_same_thread": False}

    return create_engine(
        database_url,
        connect_args=connect_args,
        echo=settings.SQL_ECHO if echo is None else echo,
    )


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=bind)


engine = make_engine()

