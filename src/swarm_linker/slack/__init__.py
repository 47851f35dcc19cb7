"""Slack ingress: Events API and Socket Mode handling, link publishing, App Home."""

from swarm_linker.slack.client import get_slack_client, reset_client
from swarm_linker.slack.home import publish_home_view
from swarm_linker.slack.publisher import edit_message, format_links, publish_links
from swarm_linker.slack.router import router

__all__ = [
    "edit_message",
    "format_links",
    "get_slack_client",
    "publish_home_view",
    "publish_links",
    "reset_client",
    "router",
]
