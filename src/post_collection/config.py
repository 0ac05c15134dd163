"""Build configuration for post collection runs."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

MODE_ENV_VAR = "POST_COLLECTION_MODE"
NODE_ENV_VAR = "NODE_ENV"
DEFAULT_CONTENT_DIR = Path("./src/content/post")
DEFAULT_DEMO_PREFIX = "demo/"
DEFAULT_EXTENSIONS = (".md", ".mdx")


class BuildMode(str, Enum):
    """Build mode for a single site build."""

    PRODUCTION = "production"
    DEVELOPMENT = "development"

    @classmethod
    def from_value(cls, value: str) -> "BuildMode":
        """Parse a build mode name.

        Accepts the full names and the short forms "prod" and "dev",
        case-insensitively.

        Raises:
            ValueError: If the value names no known mode
        """
        normalized = value.strip().lower()
        aliases = {"prod": cls.PRODUCTION, "dev": cls.DEVELOPMENT}
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"unknown build mode: {value!r}") from None


def resolve_build_mode(environ: Mapping[str, str] | None = None) -> BuildMode:
    """Resolve the build mode from the environment.

    POST_COLLECTION_MODE wins when set. Otherwise NODE_ENV=production
    selects production; anything else is a development build.
    """
    if environ is None:
        environ = os.environ

    explicit = environ.get(MODE_ENV_VAR)
    if explicit:
        return BuildMode.from_value(explicit)

    if environ.get(NODE_ENV_VAR, "").strip().lower() == "production":
        return BuildMode.PRODUCTION

    return BuildMode.DEVELOPMENT


@dataclass(frozen=True)
class CollectionConfig:
    """Settings for one collection run.

    Attributes:
        content_dir: Directory holding the post sources
        mode: Build mode deciding post visibility
        demo_prefix: Id prefix reserved for preview-only posts
        extensions: File suffixes treated as posts
    """

    content_dir: Path = DEFAULT_CONTENT_DIR
    mode: BuildMode = BuildMode.DEVELOPMENT
    demo_prefix: str = DEFAULT_DEMO_PREFIX
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
