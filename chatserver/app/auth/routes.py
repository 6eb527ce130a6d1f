# chatserver/app/auth/routes.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from chatserver.app.auth.deps import get_controller, get_current_user
from chatserver.app.auth.schemas import UserLogin, UserOut
from chatserver.app.config.settings import settings
from chatserver.app.controller import Controller
from chatserver.app.dto import UserDTO

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=UserOut)
async def login(
    user_in: UserLogin,
    response: Response,
    controller: Controller = Depends(get_controller),
):
    """
    Pseudo-login: succeeds for every existing username. The username is kept
    in a plain cookie for as long as the login is valid.
    """
    user = await controller.login(user_in.username)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No such user",
        )

    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=user.username,
        max_age=int(controller.login_period.total_seconds()),
        httponly=True,
        samesite="strict",
    )
    logger.debug(f"[Auth Routes] Cookie set for '{user.username}'")
    return user


@router.get("/me", response_model=UserOut)
async def read_me(
    current_user: UserDTO = Depends(get_current_user),
):
    return current_user
