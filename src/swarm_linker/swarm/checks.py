"""Reachability and review-existence checks against the Swarm server.

Every check returns a bool and never raises: network failures, unexpected
status codes and malformed payloads are logged and count as "invalid".
"""

import asyncio
import logging

import httpx
from pydantic import ValidationError

from swarm_linker.models.linker import ChangeList, LinkerConfig
from swarm_linker.models.swarm import ReviewsResponse

logger = logging.getLogger(__name__)


def _timeout(config: LinkerConfig) -> httpx.Timeout:
    return httpx.Timeout(config.http_timeout_seconds)


async def check_url_reachable(
    url: str, config: LinkerConfig, log: logging.Logger | None = None
) -> bool:
    """Return True unless GET on the URL answers 404 or fails outright.

    Any other status, including 5xx, counts as reachable.
    """
    log = log or logger
    try:
        async with httpx.AsyncClient(
            follow_redirects=True,
            timeout=_timeout(config),
        ) as client:
            response = await client.get(url)
            return response.status_code != 404
    except httpx.HTTPError as exc:
        log.warning("Error checking URL %s: %s", url, exc)
        return False


def _ids_match(review_id: int | str, number: int) -> bool:
    """Loose id comparison: "1234" and 1234 are the same review."""
    try:
        return int(str(review_id).strip()) == number
    except ValueError:
        return False


async def check_review_exists(
    change_list: ChangeList, config: LinkerConfig, log: logging.Logger | None = None
) -> bool:
    """Ask the Swarm reviews API whether a review exists for the change list.

    Searches the ``changes`` keyword field for the number and requests only
    review ids. The first returned review must carry the same id.
    """
    log = log or logger
    params = {
        "keywords": str(change_list.number),
        "keywordFields[]": "changes",
        "fields[]": "id",
    }
    try:
        async with httpx.AsyncClient(timeout=_timeout(config)) as client:
            response = await client.get(
                config.reviews_api_url,
                params=params,
                auth=(config.p4_user_name, config.p4_user_ticket),
            )
            response.raise_for_status()
            payload = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        log.warning("Error checking to see if %s is valid: %s", change_list.token, exc)
        return False

    try:
        reviews = ReviewsResponse.model_validate(payload).data.reviews
    except ValidationError:
        log.warning("Unexpected reviews payload for %s", change_list.token)
        return False

    if not reviews:
        log.info("No Swarm review found for %s", change_list.token)
        return False
    return _ids_match(reviews[0].id, change_list.number)


async def validate_candidate(
    change_list: ChangeList,
    url: str,
    config: LinkerConfig,
    log: logging.Logger | None = None,
) -> bool:
    """Run every enabled check concurrently and require all of them to pass.

    With no checks enabled the candidate is valid.
    """
    checks = []
    if config.check_url_reachable:
        checks.append(check_url_reachable(url, config, log))
    if config.check_review_exists:
        checks.append(check_review_exists(change_list, config, log))

    results = await asyncio.gather(*checks)
    return all(results)
