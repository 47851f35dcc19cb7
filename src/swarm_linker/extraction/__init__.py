"""Change-list extraction from Slack message text."""

from swarm_linker.extraction.changelists import (
    CHANGE_LIST_PATTERN,
    build_review_url,
    extract_change_lists,
    linkify_change_lists,
)

__all__ = [
    "CHANGE_LIST_PATTERN",
    "build_review_url",
    "extract_change_lists",
    "linkify_change_lists",
]
