# chatserver/app/integration/chat_dao.py
"""
Data access object for the chat database.

All SQLAlchemy work happens here. Every public method is a coroutine that runs
one unit of work in its own session on a worker thread, so the event loop is
never blocked and no session is shared between concurrent calls.
"""
import asyncio
import logging
from datetime import timezone
from typing import Callable, List, Optional, TypeVar

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from chatserver.app.database.session import Base, engine as default_engine, make_engine, make_session_factory
from chatserver.app.dto import MsgDTO, UserDTO
from chatserver.app.errors import PersistenceError
from chatserver.app.models import Msg, User

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Largest value a SQL INTEGER primary key can hold
MAX_ID = 2 ** 63 - 1


class ChatDAO:
    """
    Encapsulates all access to the users and msgs tables.

    Rows never leave this class; callers get UserDTO and MsgDTO instances.
    """

    def __init__(self, engine: Optional[Engine] = None, database_url: Optional[str] = None):
        if engine is None:
            engine = make_engine(database_url) if database_url else default_engine
        self.engine = engine
        self._session_factory = make_session_factory(engine)

    # =========================================================================
    # Schema
    # =========================================================================

    async def create_tables(self) -> None:
        """Create the users and msgs tables unless they already exist."""
        def _create():
            Base.metadata.create_all(bind=self.engine)

        try:
            await asyncio.to_thread(_create)
        except SQLAlchemyError as e:
            logger.error(f"[ChatDAO] Could not create tables: {e}", exc_info=True)
            raise PersistenceError("Could not create database tables") from e
        logger.info(f"[ChatDAO] Tables ready on {self.engine.url.render_as_string(hide_password=True)}")

    async def dispose(self) -> None:
        """Release all pooled connections."""
        await asyncio.to_thread(self.engine.dispose)

    # =========================================================================
    # Users
    # =========================================================================

    async def find_user_by_username(self, username: str) -> List[UserDTO]:
        """
        Search for users with the specified username.

        Returns:
            A list with the matching user, empty if there is none
        """
        def _find(db: Session) -> List[UserDTO]:
            rows = db.query(User).filter(User.username == username).all()
            return [UserDTO.model_validate(row) for row in rows]

        return await self._run(f"find user '{username}'", _find)

    async def update_user(self, user: UserDTO) -> None:
        """Store the login expiry of the specified user."""
        def _update(db: Session) -> None:
            row = db.query(User).filter(User.id == user.id).first()
            if row is None:
                raise PersistenceError(f"No user with id {user.id}")
            logged_in_until = user.logged_in_until
            if logged_in_until is not None and logged_in_until.tzinfo is not None:
                logged_in_until = logged_in_until.astimezone(timezone.utc)
            row.logged_in_until = logged_in_until
            db.commit()

        await self._run(f"update user {user.id}", _update)

    async def create_user(self, username: str) -> UserDTO:
        def _create(db: Session) -> UserDTO:
            row = User(username=username)
            db.add(row)
            db.commit()
            db.refresh(row)
            return UserDTO.model_validate(row)

        user = await self._run(f"create user '{username}'", _create)
        logger.info(f"[ChatDAO] Created user {user.id} '{username}'")
        return user

    async def ensure_users(self, usernames: List[str]) -> List[UserDTO]:
        """
        Create every listed user that does not exist yet.

        Returns:
            All listed users, in the order given
        """
        def _ensure(db: Session) -> List[UserDTO]:
            existing = {
                row.username: row
                for row in db.query(User).filter(User.username.in_(usernames)).all()
            }
            for username in usernames:
                if username not in existing:
                    existing[username] = User(username=username)
                    db.add(existing[username])
            db.commit()
            return [UserDTO.model_validate(existing[username]) for username in usernames]

        return await self._run("ensure seed users", _ensure)

    # =========================================================================
    # Messages
    # =========================================================================

    async def create_msg(self, text: str, author: UserDTO) -> MsgDTO:
        """
        Create a new message.

        Raises:
            PersistenceError: If the author is not stored or the insert fails
        """
        def _create(db: Session) -> MsgDTO:
            author_row = db.query(User).filter(User.id == author.id).first()
            if author_row is None:
                raise PersistenceError(f"No user with id {author.id}")
            row = Msg(msg=text, author=author_row)
            db.add(row)
            db.commit()
            db.refresh(row)
            return MsgDTO.model_validate(row)

        msg = await self._run(f"create message by user {author.id}", _create)
        logger.debug(f"[ChatDAO] Created message {msg.id}")
        return msg

    async def find_msg_by_id(self, msg_id: int) -> Optional[MsgDTO]:
        def _find(db: Session) -> Optional[MsgDTO]:
            if msg_id > MAX_ID:
                return None
            row = db.query(Msg).filter(Msg.id == msg_id).first()
            return MsgDTO.model_validate(row) if row is not None else None

        return await self._run(f"find message {msg_id}", _find)

    async def find_all_msgs(self) -> List[MsgDTO]:
        """Return all messages, oldest first."""
        def _find_all(db: Session) -> List[MsgDTO]:
            rows = db.query(Msg).order_by(Msg.id.asc()).all()
            return [MsgDTO.model_validate(row) for row in rows]

        return await self._run("find all messages", _find_all)

    async def delete_msg(self, msg_id: int) -> None:
        """Delete the specified message. Deleting a missing message is a no-op."""
        def _delete(db: Session) -> None:
            if msg_id > MAX_ID:
                return
            deleted = db.query(Msg).filter(Msg.id == msg_id).delete()
            db.commit()
            logger.debug(f"[ChatDAO] delete message {msg_id}: {deleted} row(s)")

        await self._run(f"delete message {msg_id}", _delete)

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _run(self, description: str, work: Callable[[Session], T]) -> T:
        try:
            return await asyncio.to_thread(self._in_session, work)
        except (SQLAlchemyError, OverflowError) as e:
            # the driver raises OverflowError for integers it cannot bind
            logger.error(f"[ChatDAO] Could not {description}: {e}", exc_info=True)
            raise PersistenceError(f"Could not {description}") from e

    def _in_session(self, work: Callable[[Session], T]) -> T:
        with self._session_factory() as db:
            return work(db)
