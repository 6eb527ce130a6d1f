# chatserver/app/chat/routes.py
from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from chatserver.app.auth.deps import get_controller, get_current_user
from chatserver.app.chat import schemas as chat_schemas
from chatserver.app.controller import Controller
from chatserver.app.dto import UserDTO

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.get(
    "/msg",
    response_model=List[chat_schemas.MsgOut],
)
async def list_msgs(
    controller: Controller = Depends(get_controller),
    current_user: UserDTO = Depends(get_current_user),
):
    """
    All messages, oldest first
    """
    return await controller.find_all_msgs()


@router.post(
    "/msg",
    response_model=chat_schemas.MsgOut,
    status_code=status.HTTP_201_CREATED,
)
async def add_msg(
    payload: chat_schemas.MsgCreate,
    controller: Controller = Depends(get_controller),
    current_user: UserDTO = Depends(get_current_user),
):
    msg = await controller.add_msg(payload.msg, current_user)
    logger.debug(f"[Chat Routes] '{current_user.username}' wrote message {msg.id}")
    return msg


@router.get(
    "/msg/{msg_id}",
    response_model=chat_schemas.MsgOut,
)
async def get_msg(
    msg_id: int,
    controller: Controller = Depends(get_controller),
    current_user: UserDTO = Depends(get_current_user),
):
    msg = await controller.find_msg(msg_id)
    if not msg:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Message not found",
        )
    return msg


@router.delete(
    "/msg/{msg_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_msg(
    msg_id: int,
    controller: Controller = Depends(get_controller),
    current_user: UserDTO = Depends(get_current_user),
):
    await controller.delete_msg(msg_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
