# Both entities must be imported before the mappers are configured.
from chatserver.app.models.user import User  # noqa: F401
from chatserver.app.models.msg import Msg  # noqa: F401
