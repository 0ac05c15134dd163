"""Schema definitions for post-collection."""

from .article import Article
from .index import CollectionIndex, TagCount, YearBucket

__all__ = [
    "Article",
    "CollectionIndex",
    "TagCount",
    "YearBucket",
]
