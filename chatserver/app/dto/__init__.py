from chatserver.app.dto.user import UserDTO
from chatserver.app.dto.msg import MsgDTO

__all__ = ["UserDTO", "MsgDTO"]
