"""Change-list reference extraction and review URL derivation."""

import re

from swarm_linker.models.linker import ChangeList

# Matches CL#1234 anywhere, including inside words (xCL#5) and across lines.
# Digits are taken greedily: CL#12a -> 12.
CHANGE_LIST_PATTERN = re.compile(r"CL#([0-9]+)")


def extract_change_lists(text: str) -> list[ChangeList]:
    """Scan text left to right and return each distinct change list once.

    Order is first appearance. Repeats of the same reference are dropped, so
    every derived review URL is distinct.
    """
    seen: set[str] = set()
    found: list[ChangeList] = []
    for match in CHANGE_LIST_PATTERN.finditer(text):
        change_list = ChangeList(digits=match.group(1))
        if change_list.digits in seen:
            continue
        seen.add(change_list.digits)
        found.append(change_list)
    return found


def build_review_url(change_list: ChangeList, url_prefix: str) -> str:
    """Concatenate the Swarm changes prefix and the change-list digits."""
    return url_prefix + change_list.digits


def linkify_change_lists(text: str, urls: dict[str, str]) -> str:
    """Rewrite CL#<digits> references as Slack links when a URL is known.

    ``urls`` maps digit strings to review URLs. References without an entry
    are left untouched.
    """

    def _replace(match: re.Match) -> str:
        url = urls.get(match.group(1))
        if url is None:
            return match.group(0)
        return f"<{url}|{match.group(0)}>"

    return CHANGE_LIST_PATTERN.sub(_replace, text)
