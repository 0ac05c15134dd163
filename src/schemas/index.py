"""Collection index schemas.

The collection index is the document handed to templating collaborators.
It records which posts are published under a build mode and the views
derived from them.

Example document:
    {
      "mode": "production",
      "generated_at": "2026-01-15T14:00:00",
      "posts": ["first-post", "second-post"],
      "years": [{"year": 2026, "posts": ["first-post", "second-post"]}],
      "tags": ["astro", "python"],
      "tag_counts": [{"tag": "astro", "count": 2}, {"tag": "python", "count": 1}]
    }
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class YearBucket(BaseModel):
    """Published posts for one calendar year, in input order."""

    year: int
    posts: list[str] = []


class TagCount(BaseModel):
    """Number of tag occurrences across the published posts."""

    tag: str
    count: int


class CollectionIndex(BaseModel):
    """Published set and derived views for a single build.

    Attributes:
        mode: Build mode the index was produced for
        generated_at: When the index was built
        posts: Ids of the published posts, in loader order
        years: Year buckets, in order of first appearance
        tags: Distinct tags, in order of first appearance
        tag_counts: Tag ranking, most frequent first
    """

    mode: Literal["production", "development"]
    generated_at: datetime = Field(default_factory=datetime.now)
    posts: list[str] = []
    years: list[YearBucket] = []
    tags: list[str] = []
    tag_counts: list[TagCount] = []
