"""Swarm review server checks."""

from swarm_linker.swarm.checks import (
    check_review_exists,
    check_url_reachable,
    validate_candidate,
)

__all__ = [
    "check_review_exists",
    "check_url_reachable",
    "validate_candidate",
]
