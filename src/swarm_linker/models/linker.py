"""Change-list, configuration and result models for the linker pipeline."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ShareMethod(str, Enum):
    """How validated review links are shared back to Slack."""

    POST_IN_CHANNEL = "post_in_channel"
    POST_IN_THREAD = "post_in_thread"
    EDIT_MESSAGE = "edit_message"  # Slack refuses edits of other users' messages


class LinkerConfig(BaseModel):
    """Immutable configuration passed into extraction, validation and publishing."""

    model_config = ConfigDict(frozen=True)

    url_prefix: str = "https://swarm.p4.eve.games/changes/"
    reviews_api_url: str = "https://swarm.p4.eve.games/api/v11/reviews"
    check_url_reachable: bool = True
    check_review_exists: bool = False
    share_method: ShareMethod = ShareMethod.POST_IN_THREAD
    p4_user_name: str = ""
    p4_user_ticket: str = ""
    http_timeout_seconds: float | None = None  # None disables the timeout


class ChangeList(BaseModel):
    """A `CL#<digits>` reference found in a message."""

    model_config = ConfigDict(frozen=True)

    digits: str  # As written, e.g. "0042"

    @property
    def number(self) -> int:
        return int(self.digits)

    @property
    def token(self) -> str:
        return f"CL#{self.digits}"


class LinkResult(BaseModel):
    """Outcome of processing one Slack message."""

    channel_id: str
    timestamp: str
    urls: list[str] = []
    published: bool = False
    error: str | None = None
