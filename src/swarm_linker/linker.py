"""Message-to-links pipeline: extract change lists, then validate each review URL."""

import logging

from swarm_linker.extraction import build_review_url, extract_change_lists
from swarm_linker.models.linker import LinkerConfig
from swarm_linker.swarm import validate_candidate

logger = logging.getLogger(__name__)


async def extract_review_urls(
    text: str, config: LinkerConfig, log: logging.Logger | None = None
) -> list[str]:
    """Return the validated Swarm review URLs referenced in a message.

    Change lists are handled one at a time, in the order they appear. The
    enabled checks for a single candidate run concurrently.
    """
    log = log or logger
    urls: list[str] = []
    for change_list in extract_change_lists(text):
        url = build_review_url(change_list, config.url_prefix)
        if await validate_candidate(change_list, url, config, log):
            urls.append(url)
        else:
            log.info("Skipping %s: review link did not validate", change_list.token)
    return urls
