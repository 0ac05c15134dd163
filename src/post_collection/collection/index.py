"""Assemble the collection index handed to templating collaborators."""

import logging
from collections.abc import Callable, Iterable

from post_collection.collection.grouping import group_by_year
from post_collection.collection.tags import tag_counts, unique_tags
from post_collection.collection.visibility import filter_visible
from post_collection.config import BuildMode
from schemas.article import Article
from schemas.index import CollectionIndex, TagCount, YearBucket

logger = logging.getLogger(__name__)


def build_index(
    articles: Iterable[Article],
    mode: BuildMode,
    is_demo: Callable[[str], bool],
) -> CollectionIndex:
    """Filter the posts once and derive every view from the published set.

    Args:
        articles: Every post supplied by the loader
        mode: Build mode of the current build
        is_demo: Predicate identifying preview-only posts by id

    Returns:
        The CollectionIndex for this build
    """
    mode = BuildMode(mode)
    published = filter_visible(articles, mode, is_demo)

    years = [
        YearBucket(year=year, posts=[a.id for a in posts])
        for year, posts in group_by_year(published).items()
    ]
    counts = [TagCount(tag=tag, count=count) for tag, count in tag_counts(published)]

    index = CollectionIndex(
        mode=mode.value,
        posts=[a.id for a in published],
        years=years,
        tags=unique_tags(published),
        tag_counts=counts,
    )

    logger.info(
        f"Built {mode.value} index: {len(index.posts)} posts, "
        f"{len(index.years)} years, {len(index.tags)} tags"
    )
    return index
