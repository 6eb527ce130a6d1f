# chatserver/app/controller/controller.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, List, Optional

from chatserver.app.config.settings import settings
from chatserver.app.dto import MsgDTO, UserDTO
from chatserver.app.integration.chat_dao import ChatDAO
from chatserver.app.util import validators

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Controller:
    """
    The application's controller. No other class shall call the model or
    integration layer.
    """

    def __init__(
        self,
        chat_dao: Optional[ChatDAO] = None,
        clock: Optional[Clock] = None,
        login_period: Optional[timedelta] = None,
    ):
        self.chat_dao = chat_dao or ChatDAO()
        self.clock = clock or utc_now
        self.login_period = (
            login_period if login_period is not None else timedelta(hours=settings.LOGIN_PERIOD_HOURS)
        )

    @classmethod
    async def create_controller(
        cls,
        chat_dao: Optional[ChatDAO] = None,
        clock: Optional[Clock] = None,
        login_period: Optional[timedelta] = None,
        seed_usernames: Optional[Iterable[str]] = None,
    ) -> "Controller":
        """
        Create a controller whose database tables are ready for use.

        Args:
            chat_dao: DAO to use, a ChatDAO on the configured database by default
            clock: Returns the current time, used for login expiry
            login_period: How long a login stays valid
            seed_usernames: Users that must exist once the controller is ready

        Raises:
            ValidationError: If a seed username is not alphanumeric
            PersistenceError: If the tables could not be created
        """
        seed_usernames = list(seed_usernames or [])
        for username in seed_usernames:
            validators.is_non_zero_length_string(username, "username")
            validators.is_alnum_string(username, "username")

        contr = cls(chat_dao=chat_dao, clock=clock, login_period=login_period)
        await contr.chat_dao.create_tables()
        if seed_usernames:
            await contr.chat_dao.ensure_users(seed_usernames)
            logger.info(f"[Controller] Seed users ready: {', '.join(seed_usernames)}")
        return contr

    async def login(self, username: str) -> Optional[UserDTO]:
        """
        Login a user. This is not a real login since no password is required.
        The only check is that the username exists in the database.

        Returns:
            The logged in user, or None if there is no such user
        """
        validators.is_non_zero_length_string(username, "username")
        validators.is_alnum_string(username, "username")
        users = await self.chat_dao.find_user_by_username(username)
        if len(users) == 0:
            logger.info(f"[Controller] Login failed, no user '{username}'")
            return None
        logged_in_user = users[0]
        await self._set_users_status_to_logged_in(logged_in_user)
        logger.info(f"[Controller] '{username}' logged in until {logged_in_user.logged_in_until.isoformat()}")
        return logged_in_user

    async def is_logged_in(self, username: str) -> Optional[UserDTO]:
        """
        Returns the specified user if the login has not yet expired, and None
        if the user does not exist, never logged in, or the login expired.
        """
        validators.is_non_zero_length_string(username, "username")
        validators.is_alnum_string(username, "username")
        users = await self.chat_dao.find_user_by_username(username)
        if len(users) == 0:
            return None
        user = users[0]
        if user.logged_in_until is None:
            return None
        if user.logged_in_until <= self.clock():
            logger.debug(f"[Controller] Login of '{username}' expired at {user.logged_in_until.isoformat()}")
            return None
        return user

    async def add_msg(self, msg: str, author: UserDTO) -> MsgDTO:
        """Adds the specified message to the conversation and returns it."""
        validators.is_non_zero_length_string(msg, "msg")
        validators.is_instance_of(author, UserDTO, "author", "UserDTO")
        return await self.chat_dao.create_msg(msg, author)

    async def find_msg(self, msg_id: int) -> Optional[MsgDTO]:
        """Returns the message with the specified id, or None if there is no such message."""
        validators.is_positive_integer(msg_id, "msg_id")
        return await self.chat_dao.find_msg_by_id(msg_id)

    async def find_all_msgs(self) -> List[MsgDTO]:
        return await self.chat_dao.find_all_msgs()

    async def delete_msg(self, msg_id: int) -> None:
        validators.is_positive_integer(msg_id, "msg_id")
        await self.chat_dao.delete_msg(msg_id)
        logger.info(f"[Controller] Deleted message {msg_id}")

    async def close(self) -> None:
        """Release the database connections held by the DAO."""
        await self.chat_dao.dispose()

    async def _set_users_status_to_logged_in(self, user: UserDTO) -> None:
        user.logged_in_until = self.clock() + self.login_period
        await self.chat_dao.update_user(user)


async def create_controller(**kwargs) -> Controller:
    """Shorthand for Controller.create_controller."""
    return await Controller.create_controller(**kwargs)
