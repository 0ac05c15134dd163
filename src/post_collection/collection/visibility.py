"""Visibility rules for deciding which posts a build publishes."""

import logging
from collections.abc import Callable, Iterable

from post_collection.config import DEFAULT_DEMO_PREFIX, BuildMode
from schemas.article import Article

logger = logging.getLogger(__name__)


def demo_path_predicate(prefix: str = DEFAULT_DEMO_PREFIX) -> Callable[[str], bool]:
    """Build a predicate matching post ids under a reserved prefix.

    Examples:
        >>> is_demo = demo_path_predicate("demo/")
        >>> is_demo("demo/markdown-elements"), is_demo("notes/demo")
        (True, False)
    """

    def is_demo(post_id: str) -> bool:
        return post_id.startswith(prefix)

    return is_demo


def is_visible(article: Article, mode: BuildMode, is_demo: Callable[[str], bool]) -> bool:
    """Return True if the article is published under the given mode.

    Drafts are never published. Demo posts are published in development
    builds only.
    """
    if article.draft:
        return False
    if mode == BuildMode.PRODUCTION:
        return not is_demo(article.id)
    return True


def filter_visible(
    articles: Iterable[Article],
    mode: BuildMode,
    is_demo: Callable[[str], bool],
) -> list[Article]:
    """Select the published posts for a build.

    Args:
        articles: Every post supplied by the loader
        mode: Build mode of the current build
        is_demo: Predicate identifying preview-only posts by id

    Returns:
        Published posts in input order
    """
    mode = BuildMode(mode)
    articles = list(articles)
    published = [a for a in articles if is_visible(a, mode, is_demo)]
    logger.debug(
        f"{mode.value}: published {len(published)} of {len(articles)} posts"
    )
    return published
