"""Group posts by publication year."""

from collections.abc import Iterable

from schemas.article import Article


def group_by_year(articles: Iterable[Article]) -> dict[int, list[Article]]:
    """Partition posts by the year of their publish date.

    No filtering happens here; pass the output of filter_visible() to
    leave out drafts. Years appear in order of first encounter and each
    bucket keeps input order.
    """
    years: dict[int, list[Article]] = {}
    for article in articles:
        years.setdefault(article.year, []).append(article)
    return years
