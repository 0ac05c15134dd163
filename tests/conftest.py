"""Pytest fixtures for post-collection tests."""

from datetime import date

import pytest

from schemas.article import Article


def write_post(content_dir, relative_path, front_matter, body="Post body.\n"):
    """Write a Markdown post with the given front matter text."""
    path = content_dir / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"---\n{front_matter}---\n\n{body}", encoding="utf-8")
    return path


@pytest.fixture
def sample_articles():
    """Published, draft and demo posts across two years."""
    return [
        Article(
            id="first-post",
            title="First Post",
            publish_date=date(2023, 6, 15),
            tags=["python", "astro"],
        ),
        Article(
            id="second-post",
            title="Second Post",
            publish_date=date(2024, 1, 1),
            tags=["astro"],
        ),
        Article(
            id="draft-post",
            title="Draft Post",
            publish_date=date(2024, 3, 1),
            tags=["wip"],
            draft=True,
        ),
        Article(
            id="demo/markdown-elements",
            title="Markdown Elements",
            publish_date=date(2024, 12, 31),
            tags=["demo", "astro"],
        ),
        Article(
            id="demo/unfinished",
            title="Unfinished Demo",
            publish_date=date(2024, 7, 4),
            tags=["demo"],
            draft=True,
        ),
    ]


@pytest.fixture
def content_dir(tmp_path):
    """Content directory mirroring sample_articles as Markdown files."""
    posts = tmp_path / "content" / "post"
    write_post(
        posts,
        "first-post.md",
        'title: "First Post"\npublishDate: 2023-06-15\ntags: [python, astro]\n',
    )
    write_post(
        posts,
        "second-post.md",
        'title: "Second Post"\npublishDate: 2024-01-01\ntags:\n  - astro\n',
    )
    write_post(
        posts,
        "draft-post.md",
        'title: "Draft Post"\npublishDate: 2024-03-01\ntags: [wip]\ndraft: true\n',
    )
    write_post(
        posts,
        "demo/markdown-elements.mdx",
        'title: "Markdown Elements"\npublishDate: 2024-12-31T09:30:00Z\n'
        "tags: [demo, astro]\n",
    )
    write_post(
        posts,
        "demo/unfinished.md",
        'title: "Unfinished Demo"\npublishDate: 2024-07-04\ntags: [demo]\ndraft: true\n',
    )
    return posts


@pytest.fixture
def post_writer():
    """Helper for writing extra posts inside a test."""
    return write_post
