"""Response shapes for the Swarm reviews API.

Only the fields requested with ``fields[]=id`` are modelled. Swarm returns
review ids as integers, but older API versions and proxies have been seen to
stringify them, so both are accepted.
"""

from pydantic import BaseModel


class Review(BaseModel):
    id: int | str


class ReviewsData(BaseModel):
    reviews: list[Review] = []


class ReviewsResponse(BaseModel):
    """Top-level ``GET /api/v11/reviews`` payload."""

    data: ReviewsData
