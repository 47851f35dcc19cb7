"""Data models and enums for the Swarm linker pipeline."""

from swarm_linker.models.linker import ChangeList, LinkerConfig, LinkResult, ShareMethod
from swarm_linker.models.slack import SlackMessage
from swarm_linker.models.swarm import Review, ReviewsData, ReviewsResponse

__all__ = [
    "ChangeList",
    "LinkerConfig",
    "LinkResult",
    "ShareMethod",
    "SlackMessage",
    "Review",
    "ReviewsData",
    "ReviewsResponse",
]
