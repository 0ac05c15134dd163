"""Loader for Markdown posts with YAML front matter."""

import logging
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from post_collection.config import DEFAULT_EXTENSIONS
from schemas.article import Article

from .exceptions import ContentNotFoundError, FrontMatterError, ReadError, ValidationError

logger = logging.getLogger(__name__)

FRONT_MATTER_PATTERN = re.compile(
    r"\A\ufeff?---[ \t]*\r?\n(.*?)^---[ \t]*\r?$", re.DOTALL | re.MULTILINE
)


def split_front_matter(text: str) -> tuple[str, str]:
    """Split a post into its front matter block and body.

    Args:
        text: Full post source

    Returns:
        Tuple of (front matter YAML, body). The front matter is empty when
        the post has none.

    Examples:
        >>> split_front_matter("---\\ntitle: Hi\\n---\\nBody")
        ('title: Hi\\n', 'Body')
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        return "", text
    body = text[match.end():].lstrip("\r\n")
    return match.group(1), body


def post_id_for(path: Path, content_dir: Path) -> str:
    """Derive a post id from its path relative to the content directory.

    Examples:
        >>> post_id_for(Path("posts/demo/hello.md"), Path("posts"))
        'demo/hello'
    """
    relative = path.relative_to(content_dir)
    return relative.with_suffix("").as_posix()


class ContentLoader:
    """Loads every post under a content directory.

    Post ids are paths relative to the content directory without their
    suffix, so a file at ``demo/markdown-elements.md`` has the id
    ``demo/markdown-elements``.

    Example:
        loader = ContentLoader(Path("./src/content/post"))
        articles = loader.load_all()
    """

    def __init__(
        self,
        content_dir: Path,
        extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    ):
        """Initialize the loader.

        Args:
            content_dir: Directory holding the post sources
            extensions: File suffixes treated as posts
        """
        self.content_dir = Path(content_dir)
        self.extensions = tuple(ext.lower() for ext in extensions)

    def discover(self) -> list[Path]:
        """List post files under the content directory, sorted by path.

        Files and directories whose names start with an underscore are
        skipped.

        Raises:
            ContentNotFoundError: If the content directory does not exist
        """
        if not self.content_dir.is_dir():
            raise ContentNotFoundError(self.content_dir)

        paths = []
        for path in self.content_dir.rglob("*"):
            if not path.is_file() or path.suffix.lower() not in self.extensions:
                continue
            relative = path.relative_to(self.content_dir)
            if any(part.startswith("_") for part in relative.parts):
                continue
            paths.append(path)
        return sorted(paths, key=lambda p: p.relative_to(self.content_dir).as_posix())

    def load_all(self) -> list[Article]:
        """Load every post under the content directory.

        Returns:
            Articles in path order

        Raises:
            ContentNotFoundError: If the content directory does not exist
            ReadError: If a post cannot be read as UTF-8
            FrontMatterError: If a post's front matter is missing or invalid YAML
            ValidationError: If a post's front matter fails schema validation
        """
        articles = [self.load_file(path) for path in self.discover()]
        logger.info(f"Loaded {len(articles)} posts from {self.content_dir}")
        return articles

    def load_file(self, path: Path) -> Article:
        """Load a single post.

        Args:
            path: Path to the post, inside the content directory

        Returns:
            The validated Article

        Raises:
            ReadError: If the file cannot be read as UTF-8
            FrontMatterError: If the front matter is missing or invalid YAML
            ValidationError: If the front matter fails schema validation
        """
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"Cannot read {path}: {e}", path=path) from e

        data = self._parse_front_matter(text, path)
        data["id"] = post_id_for(path, self.content_dir)

        try:
            article = Article.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid front matter in {path}: {e.error_count()} error(s)",
                path=path,
                errors=e.errors(),
            ) from e

        logger.debug(f"Loaded post {article.id}")
        return article

    def _parse_front_matter(self, text: str, path: Path) -> dict[str, Any]:
        front_matter, _ = split_front_matter(text)
        if not front_matter.strip():
            raise FrontMatterError(f"No front matter in {path}", path=path)

        try:
            data = yaml.safe_load(front_matter)
        except yaml.YAMLError as e:
            raise FrontMatterError(f"Unparseable front matter in {path}: {e}", path=path) from e

        if not isinstance(data, dict):
            raise FrontMatterError(f"Front matter in {path} is not a mapping", path=path)

        return data
