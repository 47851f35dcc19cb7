"""FastAPI application with lifespan, health endpoint and Slack transports."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from swarm_linker import __version__
from swarm_linker.config import get_linker_config, get_settings
from swarm_linker.logging_config import configure_logging
from swarm_linker.models.linker import ShareMethod
from swarm_linker.slack.router import router as slack_router
from swarm_linker.slack.socket_mode import start_socket_mode

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging, load config, start Socket Mode."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings

    config = get_linker_config()
    if config.share_method == ShareMethod.EDIT_MESSAGE:
        logger.warning(
            "share_method=edit_message: Slack rejects edits of user messages, "
            "links will not be shared"
        )

    app.state.socket_listener = await start_socket_mode(settings)
    logger.info("App is running!")
    yield

    if app.state.socket_listener is not None:
        await app.state.socket_listener.stop()


app = FastAPI(
    title="Swarm Linker",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.get("/health")
async def health():
    """Health check endpoint for container probes and local development."""
    return {
        "status": "ok",
        "service": "swarm-linker",
        "version": __version__,
    }


def main() -> None:
    """Run the service with uvicorn on all interfaces."""
    settings = get_settings()
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
