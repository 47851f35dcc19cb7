"""Slack event model with extracted fields."""

from pydantic import BaseModel


class SlackMessage(BaseModel):
    """A Slack message event with extracted fields (no raw payload)."""

    channel_id: str
    timestamp: str  # Slack message ts, e.g., "1234567890.123456"
    user_id: str | None = None
    text: str

    @classmethod
    def from_event(cls, event: dict) -> "SlackMessage":
        """Build from a raw Slack ``message`` event dict."""
        return cls(
            channel_id=event["channel"],
            timestamp=event["ts"],
            user_id=event.get("user"),
            text=event.get("text", ""),
        )
