"""Share validated review links back to Slack.

Publishing never raises: Slack API failures are logged and reported through
the boolean return value so one bad message cannot take down the listener.
"""

import logging

from slack_sdk.errors import SlackApiError

from swarm_linker.extraction import (
    build_review_url,
    extract_change_lists,
    linkify_change_lists,
)
from swarm_linker.models.linker import LinkerConfig, ShareMethod
from swarm_linker.models.slack import SlackMessage
from swarm_linker.slack.client import TRANSPORT_ERRORS, get_slack_client

logger = logging.getLogger(__name__)


def format_links(urls: list[str]) -> str:
    """One URL per line, each preceded by a newline."""
    return "".join(f"\n{url}" for url in urls)


async def publish_links(
    message: SlackMessage,
    urls: list[str],
    config: LinkerConfig,
    log: logging.Logger | None = None,
) -> bool:
    """Publish review links using the configured share method.

    Returns True when Slack accepted the post or edit.
    """
    log = log or logger
    if not urls:
        return False

    if config.share_method == ShareMethod.EDIT_MESSAGE:
        return await edit_message(message, urls, config, log)

    text = format_links(urls)
    thread_ts = message.timestamp if config.share_method == ShareMethod.POST_IN_THREAD else None
    log.info("Sharing %d link(s) in %s: %s", len(urls), message.channel_id, text)
    try:
        client = await get_slack_client()
        await client.chat_postMessage(
            channel=message.channel_id,
            text=text,
            thread_ts=thread_ts,
        )
    except (SlackApiError, *TRANSPORT_ERRORS):
        log.warning(
            "Failed to share links for message %s", message.timestamp, exc_info=True
        )
        return False
    return True


async def edit_message(
    message: SlackMessage,
    urls: list[str],
    config: LinkerConfig,
    log: logging.Logger | None = None,
) -> bool:
    """Rewrite the original message so its CL references become review links.

    Slack only lets an app edit messages the app posted itself, so for user
    messages this fails with ``cant_update_message``. The failure is logged
    and False is returned.
    """
    log = log or logger
    by_digits: dict[str, str] = {}
    for change_list in extract_change_lists(message.text):
        url = build_review_url(change_list, config.url_prefix)
        if url in urls:
            by_digits[change_list.digits] = url

    try:
        client = await get_slack_client()
        await client.chat_update(
            channel=message.channel_id,
            ts=message.timestamp,
            text=linkify_change_lists(message.text, by_digits),
        )
    except SlackApiError as exc:
        error_code = exc.response.get("error", "") if exc.response else ""
        if error_code == "cant_update_message":
            log.warning(
                "Slack refused to edit message %s (%s); edit_message is unsupported "
                "for messages posted by users",
                message.timestamp,
                error_code,
            )
        else:
            log.error(
                "Failed to edit message %s: %s",
                message.timestamp,
                error_code,
                exc_info=True,
            )
        return False
    except TRANSPORT_ERRORS:
        log.warning("Failed to edit message %s", message.timestamp, exc_info=True)
        return False
    return True
