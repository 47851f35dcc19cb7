"""Socket Mode transport: receive events over a websocket instead of HTTP."""

import logging

from slack_sdk.socket_mode.aiohttp import SocketModeClient
from slack_sdk.socket_mode.request import SocketModeRequest
from slack_sdk.socket_mode.response import SocketModeResponse

from swarm_linker.config import Settings
from swarm_linker.slack.client import get_slack_client
from swarm_linker.slack.handlers import dispatch_event
from swarm_linker.slack.tasks import EventTasks

logger = logging.getLogger(__name__)

# Upper bound on how long shutdown waits for in-flight event tasks
SHUTDOWN_GRACE_SECONDS = 10.0


class SocketModeListener:
    """Owns the Socket Mode connection and the tasks it spawns."""

    def __init__(self, app_token: str) -> None:
        self.app_token = app_token
        self.tasks = EventTasks()
        self.client: SocketModeClient | None = None

    async def handle_request(self, client: SocketModeClient, req: SocketModeRequest) -> None:
        """Acknowledge every envelope, then dispatch Events API payloads."""
        await client.send_socket_mode_response(SocketModeResponse(envelope_id=req.envelope_id))

        if req.type != "events_api":
            return
        event = req.payload.get("event", {})
        dispatch_event(event, self.tasks)

    async def start(self) -> bool:
        """Connect to Slack. Returns False (after logging) if the connection fails."""
        web_client = await get_slack_client()
        self.client = SocketModeClient(app_token=self.app_token, web_client=web_client)
        self.client.socket_mode_request_listeners.append(self.handle_request)
        try:
            await self.client.connect()
        except Exception as exc:
            logger.error("Error starting Socket Mode: %s", exc, exc_info=True)
            await self.client.close()
            self.client = None
            return False
        logger.info("Connected to Slack Socket Mode")
        return True

    async def stop(self, grace_seconds: float = SHUTDOWN_GRACE_SECONDS) -> None:
        """Let in-flight events finish within the grace period, then disconnect."""
        await self.tasks.wait(timeout=grace_seconds)
        if self.client is not None:
            await self.client.close()
            self.client = None


async def start_socket_mode(settings: Settings) -> SocketModeListener | None:
    """Start a Socket Mode listener when enabled and an app token is configured."""
    if not settings.use_socket_mode:
        return None
    if not settings.slack_app_token:
        logger.warning("Socket Mode enabled but SLACK_APP_TOKEN is not set; using HTTP events only")
        return None

    listener = SocketModeListener(settings.slack_app_token)
    if not await listener.start():
        return None
    return listener
