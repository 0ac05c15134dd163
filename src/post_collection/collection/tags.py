"""Tag views over a set of posts.

None of these functions filter drafts; pass them the output of
filter_visible() to do so.
"""

from collections.abc import Iterable

from schemas.article import Article


def all_tags(articles: Iterable[Article]) -> list[str]:
    """Return every tag of every post, duplicates included."""
    return [tag for article in articles for tag in article.tags]


def unique_tags(articles: Iterable[Article]) -> list[str]:
    """Return the distinct tags in order of first appearance."""
    return list(dict.fromkeys(all_tags(articles)))


def tag_counts(articles: Iterable[Article]) -> list[tuple[str, int]]:
    """Rank tags by how often they occur, most frequent first.

    Tags with equal counts keep the order in which they first appeared.

    Examples:
        >>> from datetime import date
        >>> posts = [
        ...     Article(id="one", publish_date=date(2024, 1, 1), tags=["a", "b"]),
        ...     Article(id="two", publish_date=date(2024, 1, 2), tags=["b"]),
        ...     Article(id="three", publish_date=date(2024, 1, 3), tags=["a"]),
        ... ]
        >>> tag_counts(posts)
        [('a', 2), ('b', 2)]
    """
    counts: dict[str, int] = {}
    for tag in all_tags(articles):
        counts[tag] = counts.get(tag, 0) + 1

    # sorted() is stable, so ties stay in first-appearance order
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)
