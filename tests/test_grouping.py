"""Tests for grouping posts by year."""

from datetime import date

from post_collection.collection import group_by_year
from schemas.article import Article


def make_article(post_id, published):
    return Article(id=post_id, publish_date=published)


class TestGroupByYear:
    """Tests for group_by_year()."""

    def test_groups_by_publish_year(self):
        """Posts land in the bucket for their publish year, in input order."""
        articles = [
            make_article("new-year", date(2024, 1, 1)),
            make_article("mid-2023", date(2023, 6, 15)),
            make_article("new-years-eve", date(2024, 12, 31)),
        ]

        years = group_by_year(articles)

        assert set(years) == {2023, 2024}
        assert [a.id for a in years[2023]] == ["mid-2023"]
        assert [a.id for a in years[2024]] == ["new-year", "new-years-eve"]

    def test_year_keys_in_first_encounter_order(self):
        """Years are keyed in the order they are first seen."""
        articles = [
            make_article("a", date(2022, 1, 1)),
            make_article("b", date(2024, 1, 1)),
            make_article("c", date(2022, 5, 1)),
            make_article("d", date(2023, 1, 1)),
        ]

        assert list(group_by_year(articles)) == [2022, 2024, 2023]

    def test_partitions_input_exactly(self, sample_articles):
        """Every post appears in exactly one bucket, keyed by its year."""
        years = group_by_year(sample_articles)

        grouped = [a for posts in years.values() for a in posts]
        assert sorted(a.id for a in grouped) == sorted(a.id for a in sample_articles)
        for year, posts in years.items():
            assert all(a.publish_date.year == year for a in posts)

    def test_does_not_filter_drafts(self, sample_articles):
        """Drafts are grouped like any other post."""
        years = group_by_year(sample_articles)

        assert "draft-post" in [a.id for a in years[2024]]

    def test_no_empty_buckets(self):
        """Years without posts are absent."""
        articles = [
            make_article("old", date(2020, 1, 1)),
            make_article("new", date(2024, 1, 1)),
        ]

        years = group_by_year(articles)

        assert 2022 not in years
        assert all(years.values())

    def test_empty_input(self):
        """No posts gives an empty index."""
        assert group_by_year([]) == {}
