"""Command-line interface for post-collection."""

import argparse
import logging
import sys
from pathlib import Path

from post_collection.collection import (
    build_index,
    demo_path_predicate,
    filter_visible,
    group_by_year,
    tag_counts,
    unique_tags,
)
from post_collection.config import (
    DEFAULT_CONTENT_DIR,
    DEFAULT_DEMO_PREFIX,
    BuildMode,
    CollectionConfig,
    resolve_build_mode,
)
from post_collection.loaders import ContentLoader, LoaderError
from schemas.article import Article

DEFAULT_INDEX_OUTPUT = Path("./collection-index.json")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def config_from_args(args: argparse.Namespace) -> CollectionConfig:
    """Build the run configuration from parsed arguments.

    The build mode comes from --mode when given, otherwise from the
    environment.
    """
    mode = BuildMode.from_value(args.mode) if args.mode else resolve_build_mode()
    return CollectionConfig(
        content_dir=args.content_dir,
        mode=mode,
        demo_prefix=args.demo_prefix,
    )


def load_published(config: CollectionConfig) -> list[Article]:
    """Load every post and keep the ones published under the build mode."""
    loader = ContentLoader(config.content_dir, extensions=config.extensions)
    articles = loader.load_all()
    return filter_visible(articles, config.mode, demo_path_predicate(config.demo_prefix))


def list_posts(args: argparse.Namespace) -> int:
    """Execute the list command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = config_from_args(args)
        published = load_published(config)
    except (LoaderError, ValueError) as e:
        logger.error(f"Failed to load posts: {e}")
        return 1

    for article in published:
        print(article.id)

    return 0


def list_years(args: argparse.Namespace) -> int:
    """Execute the years command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = config_from_args(args)
        published = load_published(config)
    except (LoaderError, ValueError) as e:
        logger.error(f"Failed to load posts: {e}")
        return 1

    for year, posts in group_by_year(published).items():
        print(f"{year}: {len(posts)}")
        for article in posts:
            print(f"  {article.id}")

    return 0


def list_tags(args: argparse.Namespace) -> int:
    """Execute the tags command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = config_from_args(args)
        published = load_published(config)
    except (LoaderError, ValueError) as e:
        logger.error(f"Failed to load posts: {e}")
        return 1

    if args.counts:
        for tag, count in tag_counts(published):
            print(f"{tag}\t{count}")
    else:
        for tag in unique_tags(published):
            print(tag)

    return 0


def write_index(args: argparse.Namespace) -> int:
    """Execute the build-index command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = config_from_args(args)
        loader = ContentLoader(config.content_dir, extensions=config.extensions)
        articles = loader.load_all()
    except (LoaderError, ValueError) as e:
        logger.error(f"Failed to load posts: {e}")
        return 1

    index = build_index(articles, config.mode, demo_path_predicate(config.demo_prefix))

    output = args.output
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(index.model_dump_json(indent=2))
    except OSError as e:
        logger.error(f"Failed to write index: {e}")
        return 1

    logger.info(f"Wrote {config.mode.value} index: {output}")
    logger.info(f"  Posts: {len(index.posts)}")
    logger.info(f"  Years: {len(index.years)}")
    logger.info(f"  Tags: {len(index.tags)}")

    return 0


def add_collection_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the options shared by every subcommand."""
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=DEFAULT_CONTENT_DIR,
        help=f"Directory holding the post sources (default: {DEFAULT_CONTENT_DIR})",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in BuildMode],
        default=None,
        help="Build mode (default: from POST_COLLECTION_MODE or NODE_ENV, else development)",
    )
    parser.add_argument(
        "--demo-prefix",
        type=str,
        default=DEFAULT_DEMO_PREFIX,
        help=f"Post id prefix for preview-only posts (default: {DEFAULT_DEMO_PREFIX})",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="post-collection",
        description="Select published posts and derive year and tag views",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    list_parser = subparsers.add_parser(
        "list",
        help="List published post ids",
        description="Load every post and print the ids of those published under the build mode.",
    )
    add_collection_arguments(list_parser)
    list_parser.set_defaults(func=list_posts)

    years_parser = subparsers.add_parser(
        "years",
        help="List published posts grouped by year",
        description="Print each publication year with its post count, followed by the post ids.",
    )
    add_collection_arguments(years_parser)
    years_parser.set_defaults(func=list_years)

    tags_parser = subparsers.add_parser(
        "tags",
        help="List tags of published posts",
        description="Print the distinct tags of the published posts, or their frequency ranking with --counts.",
    )
    add_collection_arguments(tags_parser)
    tags_parser.add_argument(
        "--counts",
        action="store_true",
        help="Print tab-separated tag counts, most frequent first",
    )
    tags_parser.set_defaults(func=list_tags)

    index_parser = subparsers.add_parser(
        "build-index",
        help="Write the collection index as JSON",
        description="Write the published posts, year groups and tag views to a JSON document for templating.",
    )
    add_collection_arguments(index_parser)
    index_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_INDEX_OUTPUT,
        help=f"Output path for the index (default: {DEFAULT_INDEX_OUTPUT})",
    )
    index_parser.set_defaults(func=write_index)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
