# chatserver/app/main.py
import logging
from contextlib import asynccontextmanager
from typing import Iterable, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from chatserver.app.auth.routes import router as auth_router
from chatserver.app.chat.routes import router as chat_router
from chatserver.app.config.settings import settings
from chatserver.app.controller import Controller
from chatserver.app.errors import PersistenceError, ValidationError, error_body

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(chat_dao=None, seed_usernames: Optional[Iterable[str]] = None) -> FastAPI:
    """
    Build the application. The controller is created at startup, so a
    database that cannot be initialised stops the server from starting.
    """
    if seed_usernames is None:
        seed_usernames = settings.SEED_USERS

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        controller = await Controller.create_controller(
            chat_dao=chat_dao,
            seed_usernames=seed_usernames,
        )
        app.state.controller = controller
        logger.info(f"[Main] {settings.APP_NAME} ready")
        yield
        await controller.close()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(exc.code, exc.message, exc.field),
        )

    @app.exception_handler(PersistenceError)
    async def handle_persistence_error(request: Request, exc: PersistenceError):
        logger.error(f"[Main] {request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(exc.code, exc.message),
        )

    app.include_router(auth_router)
    app.include_router(chat_router)

    @app.get("/")
    def read_root():
        return {"message": f"{settings.APP_NAME} is running"}

    return app


app = create_app()
