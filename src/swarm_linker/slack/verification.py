"""Slack request signature verification as a FastAPI dependency."""

from fastapi import HTTPException, Request
from slack_sdk.signature import SignatureVerifier

from swarm_linker.config import get_settings


def is_signed_by_slack(body: bytes, headers: dict[str, str], signing_secret: str) -> bool:
    """Check the v0 HMAC signature Slack puts on every Events API delivery.

    An unset signing secret rejects everything rather than accepting unsigned
    traffic.
    """
    if not signing_secret:
        return False
    return SignatureVerifier(signing_secret=signing_secret).is_valid_request(body, headers)


async def verify_slack_request(request: Request) -> dict:
    """FastAPI dependency: reject unsigned requests, return the parsed payload.

    Raises HTTPException(403) if the signature is missing, stale or wrong.
    """
    body = await request.body()
    if not is_signed_by_slack(body, dict(request.headers), get_settings().slack_signing_secret):
        raise HTTPException(status_code=403, detail="Invalid Slack signature")
    return await request.json()
