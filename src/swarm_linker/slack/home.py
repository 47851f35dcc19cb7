"""App Home tab view."""

import logging

from slack_sdk.errors import SlackApiError

from swarm_linker.slack.client import TRANSPORT_ERRORS, get_slack_client

logger = logging.getLogger(__name__)


def build_home_view() -> dict:
    """Static Home tab explaining what the bot does."""
    return {
        "type": "home",
        "blocks": [
            {
                "type": "section",
                "text": {
                    "type": "mrkdwn",
                    "text": (
                        "Mention a change list as `CL#1234` in any channel I'm in "
                        "and I'll reply with a link to its *Swarm* review."
                    ),
                },
            }
        ],
    }


async def publish_home_view(user_id: str) -> None:
    """Publish the Home tab for a user. Errors are logged, never raised."""
    try:
        client = await get_slack_client()
        await client.views_publish(user_id=user_id, view=build_home_view())
    except (SlackApiError, *TRANSPORT_ERRORS):
        logger.warning("Failed to publish home view for %s", user_id, exc_info=True)
