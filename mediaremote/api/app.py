"""FastAPI app, bearer-token auth and route registration."""
import logging
import secrets
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(name)s: %(message)s",
)

from mediaremote.api.state import AppState, build_state, get_state
from mediaremote.api.routes import playback, status, volume

__all__ = ["create_app", "AppState", "get_state"]

logger = logging.getLogger(__name__)

UNAUTHORIZED_BODY = "Invalid or missing API token"


def _is_authorized(request: Request, token: str) -> bool:
    header = request.headers.get("authorization")
    if not header:
        return False
    return secrets.compare_digest(header.encode(), f"Bearer {token}".encode())


def create_app(state: Optional[AppState] = None) -> FastAPI:
    """Build the app. Without a state, wire the real D-Bus collaborators from the environment."""
    if state is None:
        state = build_state()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        state.start()
        logger.info("Serving media controls as '%s'", state.own_identity)
        yield
        state.stop()

    app = FastAPI(
        title="mediaremote",
        description="Authenticated HTTP control for the desktop media session",
        lifespan=lifespan,
    )
    app.state.remote = state

    @app.middleware("http")
    async def require_token(request: Request, call_next):
        # Runs before routing, so no handler ever sees an unauthenticated request
        if not _is_authorized(request, state.api_token):
            return PlainTextResponse(UNAUTHORIZED_BODY, status_code=401)
        return await call_next(request)

    @app.exception_handler(StarletteHTTPException)
    async def plain_text_error(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    app.include_router(playback.router, tags=["playback"])
    app.include_router(volume.router, tags=["volume"])
    app.include_router(status.router, tags=["status"])
    return app
