"""Pytest configuration for the test suite."""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from chatserver.app.controller import Controller
from chatserver.app.integration.chat_dao import ChatDAO
from chatserver.app.main import create_app

SEED_USERS = ["alice", "bob"]


def run(coro):
    """Drive a coroutine to completion on a fresh event loop."""
    return asyncio.run(coro)


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, now=None):
        self.now = now or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


class SpyDAO:
    """Records every DAO call; used to prove validation happens before I/O."""

    def __init__(self):
        self.calls = []

    async def create_tables(self):
        self.calls.append("create_tables")

    async def find_user_by_username(self, username):
        self.calls.append("find_user_by_username")
        return []

    async def update_user(self, user):
        self.calls.append("update_user")

    async def create_msg(self, text, author):
        self.calls.append("create_msg")

    async def find_msg_by_id(self, msg_id):
        self.calls.append("find_msg_by_id")

    async def find_all_msgs(self):
        self.calls.append("find_all_msgs")
        return []

    async def delete_msg(self, msg_id):
        self.calls.append("delete_msg")

    async def dispose(self):
        self.calls.append("dispose")


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'chat.db'}"


@pytest.fixture
def dao(database_url):
    chat_dao = ChatDAO(database_url=database_url)
    yield chat_dao
    chat_dao.engine.dispose()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(dao, clock):
    return run(Controller.create_controller(chat_dao=dao, clock=clock, seed_usernames=SEED_USERS))


@pytest.fixture
def spy_dao():
    return SpyDAO()


@pytest.fixture
def client(dao):
    app = create_app(chat_dao=dao, seed_usernames=SEED_USERS)
    with TestClient(app) as test_client:
        yield test_client
