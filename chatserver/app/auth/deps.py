# chatserver/app/auth/deps.py
from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from chatserver.app.config.settings import settings
from chatserver.app.controller import Controller
from chatserver.app.dto import UserDTO
from chatserver.app.errors import ValidationError


def get_controller(request: Request) -> Controller:
    return request.app.state.controller


async def get_current_user(
    request: Request,
    controller: Controller = Depends(get_controller),
) -> UserDTO:
    username: Optional[str] = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if not username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in",
        )
    try:
        user = await controller.is_logged_in(username)
    except ValidationError:
        user = None
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login expired or unknown user",
        )
    return user
