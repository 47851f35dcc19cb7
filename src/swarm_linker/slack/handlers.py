"""Slack event dispatch and message filtering logic."""

import logging

from fastapi.responses import JSONResponse

from swarm_linker.config import get_linker_config
from swarm_linker.linker import extract_review_urls
from swarm_linker.models.linker import LinkerConfig, LinkResult
from swarm_linker.models.slack import SlackMessage
from swarm_linker.slack.home import publish_home_view
from swarm_linker.slack.publisher import publish_links
from swarm_linker.slack.tasks import TaskScheduler

logger = logging.getLogger(__name__)


def handle_slack_event(payload: dict, background_tasks: TaskScheduler) -> JSONResponse:
    """Dispatch a Slack event based on its type.

    - url_verification: return the challenge token
    - event_callback: process the contained event
    - anything else: acknowledge with 200
    """
    if payload.get("type") == "url_verification":
        return JSONResponse({"challenge": payload["challenge"]})

    if payload.get("type") == "event_callback":
        dispatch_event(payload.get("event", {}), background_tasks)
        return JSONResponse({"ok": True})

    return JSONResponse({"ok": True})


def dispatch_event(event: dict, background_tasks: TaskScheduler) -> None:
    """Route an inner Slack event to its handler. Shared by HTTP and Socket Mode."""
    event_type = event.get("type")
    if event_type == "message":
        handle_message_event(event, background_tasks)
    elif event_type == "app_home_opened":
        handle_home_opened(event, background_tasks)


def handle_message_event(event: dict, background_tasks: TaskScheduler) -> None:
    """Apply message filters and dispatch change-list processing to background.

    Filters are applied in order:
    1. Not a message event -> skip
    2. Has subtype (edits, bot_message, joins, etc.) -> skip
    3. Has bot_id -> skip (our own link posts come back as events)
    4. No text -> skip
    """
    # Filter 1: Not a message
    if event.get("type") != "message":
        return

    # Filter 2: Has subtype (edits, bot_message, channel_join, etc.)
    if event.get("subtype") is not None:
        return

    # Filter 3: Bot messages
    if event.get("bot_id"):
        return

    # Filter 4: Empty text
    if not event.get("text"):
        return

    message = SlackMessage.from_event(event)
    logger.info("Processing text: %s", message.text)
    background_tasks.add_task(process_message, message=message)


def handle_home_opened(event: dict, background_tasks: TaskScheduler) -> None:
    """Publish the Home tab when a user opens it."""
    user_id = event.get("user")
    if not user_id:
        return
    background_tasks.add_task(publish_home_view, user_id)


async def process_message(
    message: SlackMessage,
    config: LinkerConfig | None = None,
    log: logging.Logger | None = None,
) -> LinkResult:
    """Find, validate and share the review links referenced by one message.

    Never raises: unexpected failures are logged and recorded on the result.
    """
    config = config or get_linker_config()
    log = log or logger
    result = LinkResult(channel_id=message.channel_id, timestamp=message.timestamp)

    try:
        result.urls = await extract_review_urls(message.text, config, log)
        if not result.urls:
            log.info("Did not find any swarm link URLs in message %s", message.timestamp)
            return result

        log.info("Found %d swarm link(s) in message %s", len(result.urls), message.timestamp)
        for i, url in enumerate(result.urls, start=1):
            log.info("%d: %s", i, url)

        result.published = await publish_links(message, result.urls, config, log)
    except Exception as exc:
        log.error("Processing failed for message %s: %s", message.timestamp, exc, exc_info=True)
        result.error = str(exc)

    return result
