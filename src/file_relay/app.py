"""FastAPI application with lifespan and health endpoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from file_relay import __version__
from file_relay.clients import close_relay_clients
from file_relay.config import get_settings
from file_relay.errors import AuthenticationError
from file_relay.logging_config import configure_logging
from file_relay.slack.router import router as slack_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load config on startup, close clients on shutdown."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield
    await close_relay_clients()


app = FastAPI(
    title="File Relay",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.exception_handler(AuthenticationError)
async def authentication_error_handler(request: Request, exc: AuthenticationError) -> PlainTextResponse:
    """Reject unsigned or forged requests with a plain-text 401."""
    logger.warning("Rejected request to %s: %s", request.url.path, exc)
    return PlainTextResponse("Unauthorized", status_code=401)


@app.get("/health")
async def health():
    """Health check endpoint for the load balancer and local development."""
    return {
        "status": "ok",
        "service": "file-relay",
        "version": __version__,
    }
