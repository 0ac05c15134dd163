"""Tests for building the collection index."""

import json

from post_collection.collection import build_index, demo_path_predicate
from post_collection.config import BuildMode


class TestBuildIndex:
    """Tests for build_index()."""

    def test_production_index(self, sample_articles):
        """Production index only covers non-draft, non-demo posts."""
        index = build_index(sample_articles, BuildMode.PRODUCTION, demo_path_predicate())

        assert index.mode == "production"
        assert index.posts == ["first-post", "second-post"]
        assert [(b.year, b.posts) for b in index.years] == [
            (2023, ["first-post"]),
            (2024, ["second-post"]),
        ]
        assert index.tags == ["python", "astro"]
        assert [(c.tag, c.count) for c in index.tag_counts] == [
            ("astro", 2),
            ("python", 1),
        ]

    def test_development_index(self, sample_articles):
        """Development index includes demo posts and their tags."""
        index = build_index(sample_articles, BuildMode.DEVELOPMENT, demo_path_predicate())

        assert index.mode == "development"
        assert index.posts == ["first-post", "second-post", "demo/markdown-elements"]
        assert [(b.year, b.posts) for b in index.years] == [
            (2023, ["first-post"]),
            (2024, ["second-post", "demo/markdown-elements"]),
        ]
        assert index.tags == ["python", "astro", "demo"]
        assert [(c.tag, c.count) for c in index.tag_counts] == [
            ("astro", 3),
            ("python", 1),
            ("demo", 1),
        ]

    def test_drafts_never_indexed(self, sample_articles):
        """Draft-only tags never reach the index."""
        index = build_index(sample_articles, BuildMode.DEVELOPMENT, demo_path_predicate())

        assert "draft-post" not in index.posts
        assert "wip" not in index.tags

    def test_index_serializes(self, sample_articles):
        """The index dumps to JSON readable by templating tools."""
        index = build_index(sample_articles, "production", demo_path_predicate())

        data = json.loads(index.model_dump_json(indent=2))

        assert data["posts"] == ["first-post", "second-post"]
        assert data["tag_counts"][0] == {"tag": "astro", "count": 2}

    def test_empty_collection(self):
        """An empty collection produces an empty index."""
        index = build_index([], BuildMode.PRODUCTION, demo_path_predicate())

        assert index.posts == []
        assert index.years == []
        assert index.tag_counts == []
